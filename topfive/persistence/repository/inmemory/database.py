"""Shared in-memory storage for the in-memory repositories."""

from contextvars import ContextVar
from typing import Callable, Optional

from topfive.domain.model import Resource, Section, Vote
from topfive.domain.value import ResourceId, SectionId, VoteId

UndoAction = Callable[[], None]


class InMemoryDatabase:
    """Tables kept as dicts, plus a per-task undo journal.

    Repositories record an undo action for every write made while a unit of
    work is open. The journal lives in a ContextVar, so concurrent tasks
    each roll back only their own writes.
    """

    def __init__(self) -> None:
        self.sections: dict[SectionId, Section] = {}
        self.resources: dict[ResourceId, Resource] = {}
        self.votes: dict[VoteId, Vote] = {}
        self._journal: ContextVar[Optional[list[UndoAction]]] = ContextVar(
            f"inmemory_journal_{id(self)}", default=None
        )

    def begin(self) -> None:
        if self._journal.get() is None:
            self._journal.set([])

    def commit(self) -> None:
        self._journal.set(None)

    def rollback(self) -> None:
        journal = self._journal.get() or []
        for undo in reversed(journal):
            undo()
        self._journal.set(None)

    def record(self, undo: UndoAction) -> None:
        journal = self._journal.get()
        if journal is not None:
            journal.append(undo)

    def put(self, table: dict, key, value) -> None:
        """Store a row and journal how to restore the previous one."""
        previous = table.get(key)

        def undo() -> None:
            if previous is None:
                table.pop(key, None)
            else:
                table[key] = previous

        table[key] = value
        self.record(undo)

    def remove(self, table: dict, key) -> None:
        """Delete a row and journal how to restore it."""
        previous = table.pop(key)
        self.record(lambda: table.__setitem__(key, previous))
