"""Per-model tables of directive-tagged fields.

The table for a model type is built once and cached, so resolving a document
never re-inspects annotations.
"""

from __future__ import annotations

import inspect
import logging
import types
from functools import cache
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from jsonsideload.core.directive import parse_directive
from jsonsideload.errors import BadDirectiveError, TypeMismatchError
from jsonsideload.models import Directive, FieldSpec, ModelSchema, Sideload

logger = logging.getLogger(__name__)


def _is_model(tp: Any) -> bool:
    return inspect.isclass(tp) and issubclass(tp, BaseModel)


def _optional_model(annotation: Any) -> type[BaseModel] | None:
    """Return ``M`` for ``M | None`` / ``Optional[M]``, else None."""
    if get_origin(annotation) not in (Union, types.UnionType):
        return None
    args = get_args(annotation)
    members = [arg for arg in args if arg is not type(None)]
    if len(members) != 1 or len(args) != 2 or not _is_model(members[0]):
        return None
    return members[0]


def _list_of_models(annotation: Any) -> type[BaseModel] | None:
    """Return ``M`` for ``list[M]``, else None."""
    if get_origin(annotation) is not list:
        return None
    args = get_args(annotation)
    if len(args) != 1 or not _is_model(args[0]):
        return None
    return args[0]


def _field_directive(model: type[BaseModel], name: str, info: FieldInfo) -> Directive | None:
    for marker in info.metadata:
        if isinstance(marker, Sideload):
            try:
                return parse_directive(marker.directive)
            except BadDirectiveError as exc:
                raise BadDirectiveError(str(exc), model=model, field=name) from exc
    return None


def _related_model(model: type[BaseModel], name: str, info: FieldInfo, directive: Directive) -> type[BaseModel]:
    if directive.mode.is_many:
        related = _list_of_models(info.annotation)
        if related is None:
            raise TypeMismatchError(
                f"expected list of model references for '{directive.mode.value}', got {info.annotation!r}",
                model=model,
                field=name,
            )
    else:
        related = _optional_model(info.annotation)
        if related is None:
            raise TypeMismatchError(
                f"expected optional model reference for '{directive.mode.value}', got {info.annotation!r}",
                model=model,
                field=name,
            )
    return related


@cache
def model_schema(model: type[BaseModel]) -> ModelSchema:
    """Build the ordered table of directive-tagged fields declared on ``model``."""
    if not _is_model(model):
        raise TypeMismatchError(f"expected a pydantic model class, got {model!r}")

    specs: list[FieldSpec] = []
    for name, info in model.model_fields.items():
        directive = _field_directive(model, name, info)
        if directive is None:
            continue
        related = _related_model(model, name, info, directive)
        specs.append(FieldSpec(name=name, directive=directive, related=related))

    logger.debug("Compiled schema for %s with %d tagged field(s)", model.__name__, len(specs))
    return ModelSchema(model=model, fields=tuple(specs))


def compile_schema(model: type[BaseModel]) -> dict[type[BaseModel], ModelSchema]:
    """Compile ``model`` and every model reachable through its tagged fields.

    Raises the first ``BadDirectiveError`` or ``TypeMismatchError`` found. Cyclic
    model graphs terminate since each type is visited once.
    """
    schemas: dict[type[BaseModel], ModelSchema] = {}
    pending = [model]
    while pending:
        current = pending.pop(0)
        if current in schemas:
            continue
        schema = model_schema(current)
        schemas[current] = schema
        pending.extend(spec.related for spec in schema.fields if spec.related not in schemas)
    return schemas
