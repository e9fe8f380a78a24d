"""Value objects describing how a model field is resolved."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class Mode(str, Enum):
    INCLUDE = "include"
    INCLUDES = "includes"
    HAS_ONE = "hasone"
    HAS_MANY = "hasmany"

    @property
    def is_sideloaded(self) -> bool:
        return self in (Mode.HAS_ONE, Mode.HAS_MANY)

    @property
    def is_many(self) -> bool:
        return self in (Mode.INCLUDES, Mode.HAS_MANY)


@dataclass(frozen=True)
class Directive:
    mode: Mode
    relation_key: str
    id_key: str | None = None


@dataclass(frozen=True)
class Sideload:
    """``Annotated`` marker carrying a raw directive string.

    Example::

        author: Annotated[Author | None, Sideload("hasone,authors,author_id")] = None
    """

    directive: str


@dataclass(frozen=True)
class FieldSpec:
    name: str
    directive: Directive
    related: type[BaseModel]


@dataclass(frozen=True)
class ModelSchema:
    model: type[BaseModel]
    fields: tuple[FieldSpec, ...]
