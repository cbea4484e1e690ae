"""Tests for tag-dispatched block validation."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import json5
import pytest

from mdjsonlint.checker.extractor import find_json_blocks
from mdjsonlint.checker.validator import BlockValidator, validate_block
from mdjsonlint.models.nodes import CODE_BLOCK, Node
from mdjsonlint.parser.json_parsers import RelaxedJSONError


def _json_error(text: str) -> json.JSONDecodeError:
    with pytest.raises(json.JSONDecodeError) as excinfo:
        json.loads(text)
    return excinfo.value


def _json5_message(text: str) -> str:
    with pytest.raises(ValueError) as excinfo:
        json5.loads(text)
    return str(excinfo.value)


class TestStrictBlocks:
    @pytest.mark.parametrize(
        "text",
        ['{"a": 1}', "[]", '"string"', "42", '{\n  "nested": {"list": [1, 2.5, null, true]}\n}'],
    )
    def test_valid_json(self, validator: BlockValidator, text: str) -> None:
        assert validator.validate(Node.code_block(text, lang="json")) == []

    def test_trailing_comma(self, validator: BlockValidator) -> None:
        text = '{"a": 1,}'
        expected = _json_error(text)
        (error,) = validator.validate(Node.code_block(text, lang="json", line=5))
        assert error.line == 6
        assert error.column == expected.colno
        assert error.message == str(expected)

    def test_error_on_later_line(self, validator: BlockValidator) -> None:
        text = '{\n  "a": 1\n  "b": 2\n}'
        (error,) = validator.validate(Node.code_block(text, lang="json", line=10))
        assert error.line == 13
        assert error.column == 3

    def test_relaxed_syntax_rejected(self, validator: BlockValidator) -> None:
        errors = validator.validate(Node.code_block("{trailingComma: true,}", lang="json"))
        assert len(errors) == 1

    def test_empty_block(self, validator: BlockValidator) -> None:
        (error,) = validator.validate(Node.code_block("", lang="json", line=3))
        assert error.line == 4
        assert error.column == 1

    def test_message_without_position_falls_back_to_fence(self) -> None:
        def _parser(text: str) -> Any:
            raise ValueError("Unexpected end of JSON input")

        validator = BlockValidator(strict_parser=_parser)
        (error,) = validator.validate(Node.code_block("{", lang="json", line=8))
        assert error.line == 8
        assert error.column == 1
        assert error.message == "Unexpected end of JSON input"

    def test_at_position_message(self) -> None:
        def _parser(text: str) -> Any:
            raise ValueError("Unexpected token } in JSON at position 12")

        validator = BlockValidator(strict_parser=_parser)
        (error,) = validator.validate(Node.code_block('{\n  "a": 1,\n}', lang="json", line=1))
        assert (error.line, error.column) == (4, 1)

    def test_other_exceptions_propagate(self) -> None:
        def _parser(text: str) -> Any:
            raise RuntimeError("boom")

        validator = BlockValidator(strict_parser=_parser)
        with pytest.raises(RuntimeError):
            validator.validate(Node.code_block("{}", lang="json"))


class TestRelaxedBlocks:
    @pytest.mark.parametrize(
        "text",
        [
            "{a: 1}",
            "{trailingComma: true,}",
            "// comment\n{'single': 'quotes', hex: 0xFF}",
            '{"strict": "json works too"}',
        ],
    )
    def test_valid_json5(self, validator: BlockValidator, text: str) -> None:
        assert validator.validate(Node.code_block(text, lang="json5")) == []

    def test_invalid_json5(self, validator: BlockValidator) -> None:
        text = "{\n  a: 1,\n  b: ]\n}"
        (error,) = validator.validate(Node.code_block(text, lang="json5", line=11))
        assert error.line == 14
        assert error.column >= 1
        assert error.message == _json5_message(text)

    def test_uses_reported_line_and_column(self) -> None:
        def _parser(text: str) -> Any:
            raise RelaxedJSONError("<string>:2 Unexpected \"]\" at column 6", 2, 6)

        validator = BlockValidator(relaxed_parser=_parser)
        (error,) = validator.validate(Node.code_block("{\n  b: ]\n}", lang="json5", line=20))
        assert (error.line, error.column) == (22, 6)
        assert error.message == "<string>:2 Unexpected \"]\" at column 6"

    def test_missing_position_falls_back_to_fence(self) -> None:
        def _parser(text: str) -> Any:
            raise RelaxedJSONError("something went wrong")

        validator = BlockValidator(relaxed_parser=_parser)
        (error,) = validator.validate(Node.code_block("{", lang="json5", line=4))
        assert (error.line, error.column) == (4, 1)


def test_validate_block_default_instance() -> None:
    assert validate_block(Node.code_block("{a: 1}", lang="json5")) == []
    assert len(validate_block(Node.code_block("{bad}", lang="json"))) == 1


class TestStrictConstants:
    @pytest.mark.parametrize("text", ['{"a": NaN}', "[Infinity, -Infinity]", "-Infinity"])
    def test_non_standard_constants_rejected(self, validator: BlockValidator, text: str) -> None:
        errors = validator.validate(Node.code_block(text, lang="json"))
        assert len(errors) == 1
        assert errors[0].message.startswith("Unexpected token")

    def test_constant_position(self, validator: BlockValidator) -> None:
        text = '{\n  "a": 1,\n  "b": NaN\n}'
        (error,) = validator.validate(Node.code_block(text, lang="json", line=2))
        assert (error.line, error.column) == (5, 8)


class TestDeepNesting:
    @pytest.mark.parametrize("lang", ["json", "json5"])
    @pytest.mark.parametrize("depth", [60, 1200, 5000])
    def test_deep_valid_nesting_never_raises(
        self, validator: BlockValidator, lang: str, depth: int
    ) -> None:
        errors = validator.validate(Node.code_block("[" * depth + "]" * depth, lang=lang, line=3))
        assert len(errors) <= 1
        for error in errors:
            assert error.line >= 3
            assert error.column >= 1

    @pytest.mark.parametrize("lang", ["json", "json5"])
    def test_deep_unclosed_nesting_reported(self, validator: BlockValidator, lang: str) -> None:
        (error,) = validator.validate(Node.code_block("[" * 100_000, lang=lang, line=7))
        assert error.line >= 7
        assert error.column >= 1

    def test_recursion_error_from_parser(self) -> None:
        def _parser(text: str) -> Any:
            raise RecursionError("maximum recursion depth exceeded")

        validator = BlockValidator(strict_parser=_parser, relaxed_parser=_parser)
        for lang in ("json", "json5"):
            (error,) = validator.validate(Node.code_block("[[]]", lang=lang, line=9))
            assert (error.line, error.column) == (9, 1)
            assert error.message == "maximum recursion depth exceeded"


class TestDuckTypedBlocks:
    def test_block_with_position(self, validator: BlockValidator) -> None:
        block = SimpleNamespace(
            type=CODE_BLOCK,
            lang="json",
            value="{bad}",
            position=SimpleNamespace(start=SimpleNamespace(line=4)),
        )
        (error,) = validator.validate(block)
        assert (error.line, error.column) == (5, 2)

    def test_block_without_position(self, validator: BlockValidator) -> None:
        block = SimpleNamespace(type=CODE_BLOCK, lang="json5", value="{a: }")
        (error,) = validator.validate(block)
        assert error.line == 2

    def test_extracted_blocks_validate(self, validator: BlockValidator) -> None:
        root = SimpleNamespace(
            type="root",
            children=[SimpleNamespace(type=CODE_BLOCK, lang="json", value="[1,]", position=None)],
        )
        errors = [e for block in find_json_blocks(root) for e in validator.validate(block)]
        assert len(errors) == 1
