"""Section ranking routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status

from topfive.application.usecase.ranking import (
    GetTopResourcesRequest,
    GetTopResourcesResponse,
    GetTopResourcesUseCase,
)
from topfive.config import RankingSettings
from topfive.domain.service import JWTService
from topfive.domain.value import RankingStrategy
from topfive.interface.api.auth import request_token

router = APIRouter(prefix="/sections", tags=["sections"], route_class=DishkaRoute)


@router.get("/{name}/top", response_model=GetTopResourcesResponse)
async def get_top_resources(
    name: str,
    get_top_resources_use_case: FromDishka[GetTopResourcesUseCase],
    jwt_service: FromDishka[JWTService],
    ranking_settings: FromDishka[RankingSettings],
    n: int | None = Query(default=None, ge=1),
    strategy: RankingStrategy = Query(default=RankingStrategy.CONFIDENCE),
    token: str | None = Depends(request_token),
) -> GetTopResourcesResponse:
    """Get the best resources of a section.

    Authentication is optional; authenticated callers also see their own
    vote on each listed resource.

    Args:
        name: Section name
        n: Number of resources (defaults to the configured limit)
        strategy: Ordering strategy

    Returns:
        Resources ordered best first; empty for an unknown section

    Raises:
        HTTPException: 422 if n is out of range
    """
    limit = ranking_settings.default_limit if n is None else n
    if limit > ranking_settings.max_limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"n must be at most {ranking_settings.max_limit}",
        )

    user_id = jwt_service.get_user_id_from_token(token)

    try:
        request = GetTopResourcesRequest(
            section=name,
            n=limit,
            strategy=strategy,
            user_id=str(user_id) if user_id else None,
        )
        return await get_top_resources_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
