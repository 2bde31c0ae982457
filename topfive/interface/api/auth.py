"""Request authentication helpers."""

from fastapi import Cookie, Header


def request_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Extract the JWT from the auth cookie or an Authorization bearer header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[len("bearer ") :].strip() or None
    return None
