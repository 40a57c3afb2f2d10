"""
Service layer.

Each service encapsulates the CRUD logic for one collection and works
against the ``CollectionStore`` passed in by the caller, so the API
handlers stay free of list manipulation.
"""

from typing import Iterable

from pydantic import BaseModel


def apply_truthy_updates(record: BaseModel, data: BaseModel, fields: Iterable[str]) -> None:
    """Copy ``fields`` from ``data`` onto ``record`` in place.

    A field is copied only when its new value is truthy: ``""``, ``0``
    and ``None`` leave the stored value as it was.
    """
    for field in fields:
        value = getattr(data, field)
        if value:
            setattr(record, field, value)
