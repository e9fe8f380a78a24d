import logging

from jsonsideload.errors import BadDirectiveError
from jsonsideload.models import Directive, Mode

logger = logging.getLogger(__name__)

_MODES = {mode.value: mode for mode in Mode}


def parse_directive(raw: str) -> Directive | None:
    """Parse ``mode[,relationKey[,idKey]]`` into a ``Directive``.

    Returns ``None`` for an unrecognized mode so the field is treated as untagged.
    Raises ``BadDirectiveError`` when the mode or a required key is missing.
    """
    tokens = [token.strip() for token in raw.split(",")]
    if not tokens[0]:
        raise BadDirectiveError(f"Missing mode in directive {raw!r}")

    mode = _MODES.get(tokens[0])
    if mode is None:
        logger.debug("Ignoring directive %r with unknown mode %r", raw, tokens[0])
        return None

    relation_key = tokens[1] if len(tokens) > 1 else ""
    if not relation_key:
        raise BadDirectiveError(f"No relationship found in directive {raw!r}")

    if not mode.is_sideloaded:
        return Directive(mode=mode, relation_key=relation_key)

    id_key = tokens[2] if len(tokens) > 2 else ""
    if not id_key:
        raise BadDirectiveError(f"No id key found in directive {raw!r}")
    return Directive(mode=mode, relation_key=relation_key, id_key=id_key)
