"""Tests for oascompat.parser.loader."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from oascompat.exceptions import ConnectionError_, SourceLoadError, SpecParseError
from oascompat.parser.loader import (
    _load_from_file,
    _load_from_stdin,
    _load_from_url,
    load_text,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class TestLoadText:
    """load_text dispatches on the shape of the source string."""

    def test_file(self) -> None:
        text = load_text(str(FIXTURES_DIR / "petstore.json"))
        assert '"Swagger Petstore"' in text

    def test_stdin(self) -> None:
        with patch("oascompat.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("openapi: 3.1.0\n")
            assert load_text("-") == "openapi: 3.1.0\n"

    def test_url(self) -> None:
        mock_response = httpx.Response(
            status_code=200,
            text="openapi: 3.1.0\n",
            request=httpx.Request("GET", "https://example.com/spec.yaml"),
        )
        with patch("oascompat.parser.loader.httpx.get", return_value=mock_response) as get:
            assert load_text("https://example.com/spec.yaml") == "openapi: 3.1.0\n"
        get.assert_called_once_with(
            "https://example.com/spec.yaml", timeout=30.0, follow_redirects=True
        )


class TestLoadFromFile:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        spec = tmp_path / "spec.yaml"
        spec.write_text("info:\n  title: Café\n", encoding="utf-8")
        assert "Café" in _load_from_file(str(spec))

    def test_empty_file_returned_as_is(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("", encoding="utf-8")
        assert _load_from_file(str(empty)) == ""

    def test_missing_file(self) -> None:
        with pytest.raises(SourceLoadError, match="not found"):
            _load_from_file("/nonexistent/path/to/spec.json")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceLoadError, match="not found"):
            _load_from_file(str(tmp_path))

    def test_undecodable_bytes(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(SourceLoadError, match="Failed to read"):
            _load_from_file(str(bad))


class TestLoadFromStdin:
    def test_empty_stdin(self) -> None:
        with patch("oascompat.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("  \n\t")
            with pytest.raises(SourceLoadError, match="No input"):
                _load_from_stdin()


class TestLoadFromUrl:
    def test_http_error_status(self) -> None:
        request = httpx.Request("GET", "https://example.com/missing.json")
        mock_response = httpx.Response(status_code=404, request=request)
        with patch("oascompat.parser.loader.httpx.get", return_value=mock_response):
            with pytest.raises(SourceLoadError, match="HTTP 404"):
                _load_from_url("https://example.com/missing.json")

    def test_network_error(self) -> None:
        with patch(
            "oascompat.parser.loader.httpx.get",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            with pytest.raises(ConnectionError_, match="Failed to fetch"):
                _load_from_url("https://example.com/spec.json")

    def test_source_load_error_is_spec_parse_error(self) -> None:
        assert issubclass(SourceLoadError, SpecParseError)
