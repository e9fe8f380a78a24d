"""Recursive resolution of a node onto a pydantic model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from jsonsideload.core.lookup import find_sideloaded, is_identifier
from jsonsideload.core.schema import model_schema
from jsonsideload.errors import StructuralMismatchError
from jsonsideload.models import FieldSpec, Mode

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _bind(node: Mapping[str, Any], model: type[M]) -> M:
    try:
        return model.model_validate(node)
    except ValidationError as exc:
        raise StructuralMismatchError(model, f"{exc.error_count()} validation error(s)") from exc


def _resolve_include(document: Mapping[str, Any], node: Mapping[str, Any], spec: FieldSpec) -> BaseModel | None:
    nested = node.get(spec.directive.relation_key)
    if not isinstance(nested, dict):
        return None
    return resolve_node(document, nested, spec.related)


def _resolve_includes(document: Mapping[str, Any], node: Mapping[str, Any], spec: FieldSpec) -> list[BaseModel]:
    nested = node.get(spec.directive.relation_key)
    if not isinstance(nested, list):
        return []
    resolved: list[BaseModel] = []
    for element in nested:
        if not isinstance(element, dict):
            raise StructuralMismatchError(spec.related, f"'{spec.directive.relation_key}' holds a non-object element")
        resolved.append(resolve_node(document, element, spec.related))
    return resolved


def _resolve_has_one(document: Mapping[str, Any], node: Mapping[str, Any], spec: FieldSpec) -> BaseModel | None:
    id_value = node.get(spec.directive.id_key)  # type: ignore[arg-type]
    if id_value is None:
        return None
    if not is_identifier(id_value):
        raise StructuralMismatchError(spec.related, f"'{spec.directive.id_key}' is not a numeric identifier")
    match = find_sideloaded(document, spec.directive.relation_key, id_value)
    if match is None:
        logger.debug("No '%s' entry with id %r", spec.directive.relation_key, id_value)
        return None
    return resolve_node(document, match, spec.related)


def _resolve_has_many(document: Mapping[str, Any], node: Mapping[str, Any], spec: FieldSpec) -> list[BaseModel]:
    id_values = node.get(spec.directive.id_key)  # type: ignore[arg-type]
    if not isinstance(id_values, list):
        return []
    resolved: list[BaseModel] = []
    for id_value in id_values:
        if not is_identifier(id_value):
            raise StructuralMismatchError(spec.related, f"'{spec.directive.id_key}' holds a non-numeric identifier")
        match = find_sideloaded(document, spec.directive.relation_key, id_value)
        if match is None:
            logger.debug("No '%s' entry with id %r", spec.directive.relation_key, id_value)
            continue
        resolved.append(resolve_node(document, match, spec.related))
    return resolved


_RESOLVERS = {
    Mode.INCLUDE: _resolve_include,
    Mode.INCLUDES: _resolve_includes,
    Mode.HAS_ONE: _resolve_has_one,
    Mode.HAS_MANY: _resolve_has_many,
}


def resolve_node(document: Mapping[str, Any], node: Mapping[str, Any], model: type[M]) -> M:
    """Bind ``node`` onto ``model`` and resolve every directive-tagged field.

    ``document`` is the root object used for sideloaded lookups; it is never
    modified. The first error raised by a field propagates unchanged.
    """
    schema = model_schema(model)
    instance = _bind(node, model)
    if not schema.fields:
        return instance

    updates: dict[str, Any] = {}
    for spec in schema.fields:
        updates[spec.name] = _RESOLVERS[spec.directive.mode](document, node, spec)
    return instance.model_copy(update=updates)
