"""Unit tests for directive parsing."""

import pytest

from jsonsideload import BadDirectiveError, Directive, Mode, parse_directive


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("include,meta", Directive(Mode.INCLUDE, "meta")),
        ("includes,comments", Directive(Mode.INCLUDES, "comments")),
        ("hasone,authors,author_id", Directive(Mode.HAS_ONE, "authors", "author_id")),
        ("hasmany,tags,tag_ids", Directive(Mode.HAS_MANY, "tags", "tag_ids")),
    ],
    ids=["include", "includes", "hasone", "hasmany"],
)
def test_parses_every_mode(raw: str, expected: Directive) -> None:
    assert parse_directive(raw) == expected


def test_include_ignores_id_key_token() -> None:
    assert parse_directive("include,meta,meta_id") == Directive(Mode.INCLUDE, "meta")


def test_extra_tokens_are_ignored() -> None:
    assert parse_directive("hasone,authors,author_id,extra") == Directive(Mode.HAS_ONE, "authors", "author_id")


def test_tokens_are_stripped() -> None:
    assert parse_directive(" hasmany , tags , tag_ids ") == Directive(Mode.HAS_MANY, "tags", "tag_ids")


@pytest.mark.parametrize("raw", ["", ",authors", " ,authors,author_id"])
def test_missing_mode_is_rejected(raw: str) -> None:
    with pytest.raises(BadDirectiveError, match="Missing mode"):
        parse_directive(raw)


@pytest.mark.parametrize("raw", ["include", "includes", "include,", "hasone", "hasmany,"])
def test_missing_relation_key_is_rejected(raw: str) -> None:
    with pytest.raises(BadDirectiveError, match="No relationship"):
        parse_directive(raw)


@pytest.mark.parametrize("raw", ["hasone,authors", "hasmany,tags", "hasmany,tags,"])
def test_missing_id_key_is_rejected(raw: str) -> None:
    with pytest.raises(BadDirectiveError, match="No id key"):
        parse_directive(raw)


@pytest.mark.parametrize("raw", ["belongsto,authors,author_id", "HasOne,authors,author_id", "INCLUDE,meta", "embed"])
def test_unknown_mode_is_ignored(raw: str) -> None:
    assert parse_directive(raw) is None


def test_bad_directive_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_directive("hasone")


def test_mode_flags() -> None:
    assert Mode.HAS_ONE.is_sideloaded and not Mode.HAS_ONE.is_many
    assert Mode.HAS_MANY.is_sideloaded and Mode.HAS_MANY.is_many
    assert not Mode.INCLUDE.is_sideloaded and not Mode.INCLUDE.is_many
    assert not Mode.INCLUDES.is_sideloaded and Mode.INCLUDES.is_many
