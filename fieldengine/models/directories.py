from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger("fieldengine")

Lookup = Callable[[Any], Optional[str]]


class UserRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[str, int]
    name: str


class ProductLabel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[str, int]] = None
    name: str
    color: Optional[str] = Field(None, description="Colour token used for the label badge")
    category: Optional[str] = Field(None, description="difficulty | productType | ...")
    priority: Optional[int] = None


def _never(_: Any) -> Optional[str]:
    return None


def _index(rows: Iterable[Any], model: type[BaseModel], key: str, value: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for row in rows:
        if isinstance(row, Mapping):
            try:
                row = model.model_validate(dict(row))
            except ValidationError as e:
                logger.warning("[DIRECTORY] skipping %s row: %s", model.__name__, e.errors())
                continue
        k = getattr(row, key, None)
        v = getattr(row, value, None)
        # first entry wins, like a list .find()
        if k is not None and v is not None and str(k) not in out:
            out[str(k)] = str(v)
    return out


def user_lookup(users: Any = None) -> Lookup:
    """
    Normalise a user directory into `id -> display name`.

    `users` may be None, a callable, a mapping of id to name, or rows with `id`/`name`.
    """
    if users is None:
        return _never
    if callable(users):
        return users
    if isinstance(users, Mapping):
        table = {str(k): str(v) for k, v in users.items() if v is not None}
    else:
        table = _index(users, UserRef, "id", "name")
    return lambda user_id: table.get(str(user_id)) if user_id is not None else None


def label_color_lookup(labels: Any = None) -> Lookup:
    """
    Normalise a label directory into `label name -> colour token` (exact name match).

    `labels` may be None, a callable, a mapping of name to colour, or rows with `name`/`color`.
    """
    if labels is None:
        return _never
    if callable(labels):
        return labels
    if isinstance(labels, Mapping):
        table = {str(k): str(v) for k, v in labels.items() if v is not None}
    else:
        table = _index(labels, ProductLabel, "name", "color")
    return lambda name: table.get(name) if isinstance(name, str) else None
