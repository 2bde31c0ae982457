"""JWT token domain service."""

from uuid import UUID

import logfire

from topfive.config import AuthSettings
from topfive.domain.error import UnauthenticatedError
from topfive.domain.value import UserId
from topfive.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Resolves the current user of a request from its bearer token.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, handle: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            handle: Display handle

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, handle=handle):
            token = create_token(user_id, handle, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, handle=handle)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def current_user_id(self, token: str | None) -> UserId:
        """Resolve the requesting user from a token.

        Args:
            token: JWT token string (optional)

        Returns:
            The authenticated user's ID

        Raises:
            UnauthenticatedError: If the token is missing, invalid or expired
        """
        if not token:
            raise UnauthenticatedError()

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            raise UnauthenticatedError(f"Invalid authentication token: {e}")

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the requesting user without raising.

        For routes where authentication is optional.

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        try:
            return self.current_user_id(token)
        except UnauthenticatedError:
            return None
