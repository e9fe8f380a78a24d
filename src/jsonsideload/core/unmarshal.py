import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from jsonsideload.core.resolver import resolve_node
from jsonsideload.core.schema import compile_schema
from jsonsideload.errors import MalformedJSONError

M = TypeVar("M", bound=BaseModel)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def resolve(document: Mapping[str, Any], model: type[M]) -> M:
    """Resolve an already decoded compound document into ``model``."""
    if not isinstance(document, Mapping):
        raise MalformedJSONError(f"Expected a JSON object at the top level, got {type(document).__name__}")
    compile_schema(model)
    return resolve_node(document, document, model)


def unmarshal(payload: bytes | str, model: type[M]) -> M:
    """Decode a sideloaded JSON payload and map it onto ``model``.

    Raises ``MalformedJSONError`` when the payload is not a JSON object, including
    payloads using the non-standard ``NaN`` / ``Infinity`` constants.
    """
    try:
        document = json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        raise MalformedJSONError("Malformed JSON provided") from exc
    if not isinstance(document, dict):
        raise MalformedJSONError("Malformed JSON provided")
    return resolve(document, model)
