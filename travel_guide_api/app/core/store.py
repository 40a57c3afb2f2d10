"""
In‑memory collection store.

All records live in three ordered lists owned by a ``CollectionStore``
instance.  The application creates one store at startup and keeps it
on ``app.state``; request handlers receive it through the ``get_store``
dependency.  Nothing is persisted: restarting the process resets the
store to its seed data.

Identifiers are assigned as ``len(collection) + 1``.  After a deletion
this can hand out an id that is still in use (create, delete the first
record, create again); lookups then return the first match in storage
order.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from fastapi import Request

from ..schemas.comment import Comment
from ..schemas.destination import Destination
from ..schemas.user import User


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Destination, User, Comment)


def ids_match(record_id: Any, raw_id: Any) -> bool:
    """Compare a stored id with an id taken from a URL.

    Path parameters arrive as strings.  They match when they parse as a
    number equal to the stored id, so ``"1"``, ``"01"`` and ``"1.0"``
    all match id ``1``.  Values that are not numbers match nothing.
    """
    if record_id is None or raw_id is None:
        return False
    try:
        return float(str(raw_id).strip()) == float(record_id)
    except (TypeError, ValueError):
        return False


class Collection(Generic[RecordT]):
    """An ordered sequence of records sharing one id space."""

    def __init__(self, name: str, records: Iterable[RecordT] = ()) -> None:
        self.name = name
        self._records: List[RecordT] = list(records)
        # Held for id assignment and removal.
        self.lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[RecordT]:
        """Return the records in storage order.

        The list is a shallow copy; the records themselves are the
        stored objects and may be mutated in place.
        """
        return list(self._records)

    def find(self, raw_id: Any) -> Optional[RecordT]:
        for record in self._records:
            if ids_match(record.id, raw_id):
                return record
        return None

    def index_of(self, raw_id: Any) -> int:
        for index, record in enumerate(self._records):
            if ids_match(record.id, raw_id):
                return index
        return -1

    def add(self, build: Callable[[int], RecordT]) -> RecordT:
        """Build a record with the next id and append it.

        ``build`` receives the id (current length plus one) and returns
        the record to store.
        """
        with self.lock:
            record = build(len(self._records) + 1)
            self._records.append(record)
        logger.debug("Appended %s record %s", self.name, record.id)
        return record

    def remove(self, raw_id: Any) -> Optional[RecordT]:
        """Remove the first record matching ``raw_id``.

        Returns the removed record, or ``None`` if nothing matched.
        """
        with self.lock:
            index = self.index_of(raw_id)
            if index == -1:
                return None
            return self._records.pop(index)


def _seed_destinations() -> List[Destination]:
    return [
        Destination(id=1, name="Paris", description="The city of lights.", image="/images/paris.jpg"),
        Destination(id=2, name="New York", description="The city that never sleeps.", image="/images/newyork.jpg"),
        Destination(id=3, name="Tokyo", description="The bustling capital of Japan.", image="/images/tokyo.jpg"),
    ]


def _seed_users() -> List[User]:
    return [
        User(id=1, username="john_doe", email="john@example.com"),
        User(id=2, username="jane_smith", email="jane@example.com"),
    ]


def _seed_comments() -> List[Comment]:
    return [
        Comment(id=1, destination_id=1, user_id=1, text="Amazing city!"),
        Comment(id=2, destination_id=2, user_id=2, text="I love the skyscrapers!"),
    ]


class CollectionStore:
    """Owner of the destinations, users and comments collections."""

    def __init__(
        self,
        destinations: Iterable[Destination] = (),
        users: Iterable[User] = (),
        comments: Iterable[Comment] = (),
    ) -> None:
        self.destinations: Collection[Destination] = Collection("destination", destinations)
        self.users: Collection[User] = Collection("user", users)
        self.comments: Collection[Comment] = Collection("comment", comments)

    @classmethod
    def seeded(cls) -> "CollectionStore":
        """Create a store holding the sample records."""
        return cls(
            destinations=_seed_destinations(),
            users=_seed_users(),
            comments=_seed_comments(),
        )


def get_store(request: Request) -> CollectionStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
