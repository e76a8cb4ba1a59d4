"""Tests for configuration helpers."""

import pytest

from health_scan.config import parse_analyzer_name


def test_parse_analyzer_name_defaults_to_static() -> None:
    assert parse_analyzer_name(None) == "static"
    assert parse_analyzer_name(" ") == "static"
    assert parse_analyzer_name("Mock") == "static"


def test_parse_analyzer_name_openai() -> None:
    assert parse_analyzer_name("OpenAI") == "openai"
    assert parse_analyzer_name("vision") == "openai"


def test_parse_analyzer_name_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_analyzer_name("tesseract")
