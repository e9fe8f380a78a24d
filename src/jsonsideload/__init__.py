"""Map sideloaded compound JSON documents onto pydantic model trees."""

from jsonsideload.core.directive import parse_directive
from jsonsideload.core.lookup import find_sideloaded
from jsonsideload.core.resolver import resolve_node
from jsonsideload.core.schema import compile_schema, model_schema
from jsonsideload.core.unmarshal import resolve, unmarshal
from jsonsideload.errors import (
    BadDirectiveError,
    MalformedJSONError,
    SideloadError,
    StructuralMismatchError,
    TypeMismatchError,
)
from jsonsideload.models import Directive, FieldSpec, Mode, ModelSchema, Sideload

__all__ = [
    "BadDirectiveError",
    "Directive",
    "FieldSpec",
    "MalformedJSONError",
    "Mode",
    "ModelSchema",
    "Sideload",
    "SideloadError",
    "StructuralMismatchError",
    "TypeMismatchError",
    "compile_schema",
    "find_sideloaded",
    "model_schema",
    "parse_directive",
    "resolve",
    "resolve_node",
    "unmarshal",
]
