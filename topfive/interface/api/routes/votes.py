"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from topfive.application.usecase.vote import (
    ChangeVoteRequest,
    ChangeVoteUseCase,
    CreateVoteRequest,
    CreateVoteUseCase,
    GetVoteRequest,
    GetVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteResponse,
)
from topfive.domain.error import (
    NotFoundError,
    PersistenceFailureError,
    UnauthenticatedError,
    VoteConflictError,
)
from topfive.domain.service import JWTService
from topfive.domain.value import UserId
from topfive.interface.api.auth import request_token

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    resource_id: UUID
    direction: bool  # True = up, False = down


def _require_user(jwt_service: JWTService, token: str | None) -> UserId:
    try:
        return jwt_service.current_user_id(token)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def _unavailable(e: PersistenceFailureError) -> HTTPException:
    logfire.warn("Vote operation unavailable", error=str(e))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(e),
    )


@router.get("", response_model=VoteResponse)
async def get_vote(
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    resource_id: UUID = Query(...),
    token: str | None = Depends(request_token),
) -> VoteResponse:
    """Get the caller's vote on a resource.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if there is no vote
    """
    user_id = _require_user(jwt_service, token)

    try:
        request = GetVoteRequest(resource_id=resource_id, user_id=str(user_id))
        return await get_vote_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
async def create_vote(
    body: VoteBody,
    create_vote_use_case: FromDishka[CreateVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> VoteResponse:
    """Cast a vote on a resource.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the resource does not
            exist, 409 if the caller already voted, 503 if the vote could not
            be stored
    """
    user_id = _require_user(jwt_service, token)

    try:
        request = CreateVoteRequest(
            resource_id=body.resource_id,
            direction=body.direction,
            user_id=str(user_id),
        )
        return await create_vote_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except VoteConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except PersistenceFailureError as e:
        raise _unavailable(e)


@router.put("", response_model=VoteResponse)
async def change_vote(
    body: VoteBody,
    change_vote_use_case: FromDishka[ChangeVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> VoteResponse:
    """Change the direction of the caller's vote.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if there is no vote,
            503 if the change could not be stored
    """
    user_id = _require_user(jwt_service, token)

    try:
        request = ChangeVoteRequest(
            resource_id=body.resource_id,
            direction=body.direction,
            user_id=str(user_id),
        )
        return await change_vote_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceFailureError as e:
        raise _unavailable(e)


@router.delete("", response_model=RemoveVoteResponse)
async def remove_vote(
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    resource_id: UUID = Query(...),
    token: str | None = Depends(request_token),
) -> RemoveVoteResponse:
    """Retract the caller's vote.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if there is no vote,
            503 if the removal could not be stored
    """
    user_id = _require_user(jwt_service, token)

    try:
        request = RemoveVoteRequest(resource_id=resource_id, user_id=str(user_id))
        return await remove_vote_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceFailureError as e:
        raise _unavailable(e)
