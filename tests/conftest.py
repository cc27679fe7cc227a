# ABOUTME: Shared pytest fixtures for embedmeta tests.
# ABOUTME: Writes raw property sets (valid and malformed) to JSON files for CLI tests.

import json
from pathlib import Path

import pytest

from tests.fixtures.media_responses import OEMBED_RESPONSE, OPENGRAPH_RESPONSE


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def oembed_json(tmp_path: Path) -> Path:
    """An oEmbed response saved as a JSON file."""
    filepath = tmp_path / "oembed.json"
    filepath.write_text(json.dumps(OEMBED_RESPONSE))
    return filepath


@pytest.fixture
def opengraph_json(tmp_path: Path) -> Path:
    """OpenGraph meta tags saved as a JSON file."""
    filepath = tmp_path / "opengraph.json"
    filepath.write_text(json.dumps(OPENGRAPH_RESPONSE))
    return filepath


@pytest.fixture
def corrupt_json(tmp_path: Path) -> Path:
    """A file that is not valid JSON."""
    filepath = tmp_path / "corrupt.json"
    filepath.write_text("{this is not json")
    return filepath


@pytest.fixture
def array_json(tmp_path: Path) -> Path:
    """Valid JSON whose top-level value is not an object."""
    filepath = tmp_path / "array.json"
    filepath.write_text(json.dumps([{"title": "not a mapping"}]))
    return filepath
