"""Ranking use cases."""

from .get_top_resources import (
    GetTopResourcesRequest,
    GetTopResourcesResponse,
    GetTopResourcesUseCase,
    TopResourceItem,
)

__all__ = [
    "GetTopResourcesRequest",
    "GetTopResourcesResponse",
    "GetTopResourcesUseCase",
    "TopResourceItem",
]
