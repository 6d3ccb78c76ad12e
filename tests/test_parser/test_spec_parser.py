"""Tests for oascompat.parser.spec_parser and oascompat.parser.validator."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from oascompat.exceptions import MissingInfoObjectError, SpecParseError
from oascompat.models import ErrorReason
from oascompat.parser.spec_parser import parse_spec
from oascompat.parser.validator import (
    is_openapi_31,
    validate_openapi_version,
    validate_spec,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

INVALID_FORMAT = "Invalid format. Input must be in YAML or JSON format."
MISSING_INFO = "Specification must contain an Info Object for the meta-data of the API"


# ---------------------------------------------------------------------------
# parse_spec
# ---------------------------------------------------------------------------


class TestParseSpec:
    def test_parses_webhooks_spec(self, webhooks_text: str) -> None:
        outcome = parse_spec(webhooks_text)
        assert outcome.ok is True
        assert outcome.reason is None
        assert outcome.document["openapi"] == "3.1.0"
        assert outcome.document["webhooks"] is not None

    def test_returns_full_document(self, webhooks_text: str) -> None:
        outcome = parse_spec(webhooks_text)
        assert outcome.document == json.loads(webhooks_text)

    def test_yaml_spec(self) -> None:
        text = textwrap.dedent("""\
            openapi: 3.1.0
            info:
              title: YAML spec
              version: "2"
        """)
        outcome = parse_spec(text)
        assert outcome.ok is True
        assert outcome.document["info"] == {"title": "YAML spec", "version": "2"}

    def test_empty_spec_is_invalid_format(self) -> None:
        text = (FIXTURES_DIR / "empty-spec.yaml").read_text(encoding="utf-8")
        outcome = parse_spec(text)
        assert outcome.ok is False
        assert outcome.document is None
        assert outcome.reason.value == INVALID_FORMAT

    @pytest.mark.parametrize(
        "text",
        ["{not json", "plain words", "[1, 2]", "key: [unclosed", "   "],
    )
    def test_non_document_text_is_invalid_format(self, text: str) -> None:
        outcome = parse_spec(text)
        assert outcome.ok is False
        assert outcome.reason == ErrorReason.INVALID_FORMAT

    def test_missing_info(self) -> None:
        text = (FIXTURES_DIR / "invalid-no-info.json").read_text(encoding="utf-8")
        outcome = parse_spec(text)
        assert outcome.ok is False
        assert outcome.reason.value == MISSING_INFO

    def test_missing_info_yaml(self) -> None:
        outcome = parse_spec("openapi: 3.1.0\npaths: {}\n")
        assert outcome.reason == ErrorReason.MISSING_INFO

    def test_deterministic(self, webhooks_text: str) -> None:
        assert parse_spec(webhooks_text) == parse_spec(webhooks_text)


# ---------------------------------------------------------------------------
# validator
# ---------------------------------------------------------------------------


class TestValidateSpec:
    def test_accepts_info(self) -> None:
        validate_spec({"info": {}})

    @pytest.mark.parametrize("document", [{}, {"openapi": "3.1.0"}, [], "info", None])
    def test_rejects_without_info(self, document: object) -> None:
        with pytest.raises(MissingInfoObjectError):
            validate_spec(document)


class TestValidateOpenapiVersion:
    @pytest.mark.parametrize("version", ["3.0.3", "3.1.0", "3.1.1"])
    def test_accepts_3x(self, version: str) -> None:
        assert validate_openapi_version({"openapi": version}) == version

    def test_rejects_swagger(self) -> None:
        with pytest.raises(SpecParseError, match="Swagger 2.0"):
            validate_openapi_version({"swagger": "2.0"})

    def test_rejects_missing(self) -> None:
        with pytest.raises(SpecParseError, match="Missing 'openapi'"):
            validate_openapi_version({"info": {}})

    def test_rejects_unknown_major(self) -> None:
        with pytest.raises(SpecParseError, match="Unsupported"):
            validate_openapi_version({"openapi": "4.0.0"})


class TestIsOpenapi31:
    def test_true_for_31(self) -> None:
        assert is_openapi_31({"openapi": "3.1.0"})

    def test_false_for_30(self) -> None:
        assert not is_openapi_31({"openapi": "3.0.3"})

    def test_false_when_missing(self) -> None:
        assert not is_openapi_31({})


# ---------------------------------------------------------------------------
# Unusual but valid documents, and inputs past the decoders' limits
# ---------------------------------------------------------------------------


_INFO = {"title": "Edge cases", "version": "1.0.0"}


def _json_with(extra: str) -> str:
    return '{"openapi": "3.1.0", "info": ' + json.dumps(_INFO) + ', "x-extra": ' + extra + "}"


class TestParseSpecUnusualDocuments:
    @pytest.mark.parametrize(
        "text",
        [
            _json_with("1" * 5000),
            _json_with("-" + "9" * 4500),
            _json_with("1e400"),
            _json_with("[" * 200 + "]" * 200),
            _json_with('"\\u00e9\\ud83d\\ude00"'),
            "openapi: 3.1.0\ninfo:\n  title: Edge cases\n  version: 1.0.0\n"
            "x-extra: " + "3" * 5000 + "\n",
            "openapi: 3.1.0\ninfo:\n  title: Edge cases\n  version: 1.0.0\n"
            "x-extra: '{\"looks\": [\"like\", \"json\"]}'\n",
            '{"openapi": "3.1.0", "info": {"title": "Edge cases", "version": "1.0.0"},\n'
            "  x-extra: yaml-style key}\n",
        ],
        ids=[
            "huge-int",
            "huge-negative-int",
            "float-overflow",
            "deep-nesting",
            "unicode-escapes",
            "yaml-huge-int",
            "yaml-json-looking-string",
            "yaml-flow-mapping",
        ],
    )
    def test_ok_with_info_unchanged(self, text: str) -> None:
        outcome = parse_spec(text)
        assert outcome.ok is True
        assert outcome.document["info"] == _INFO

    @pytest.mark.parametrize(
        "text",
        [
            "[" * 100000,
            '{"info": {}, "x": ' + "[" * 100000 + "]" * 100000 + "}",
        ],
        ids=["unclosed-deep-array", "deep-array-inside-document"],
    )
    def test_too_deep_is_invalid_format(self, text: str) -> None:
        outcome = parse_spec(text)
        assert outcome.ok is False
        assert outcome.reason == ErrorReason.INVALID_FORMAT
