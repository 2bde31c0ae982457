"""Vote use cases."""

from .change_vote import ChangeVoteRequest, ChangeVoteUseCase
from .common import VoteResponse
from .create_vote import CreateVoteRequest, CreateVoteUseCase
from .get_vote import GetVoteRequest, GetVoteUseCase
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase

__all__ = [
    "ChangeVoteRequest",
    "ChangeVoteUseCase",
    "CreateVoteRequest",
    "CreateVoteUseCase",
    "GetVoteRequest",
    "GetVoteUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "VoteResponse",
]
