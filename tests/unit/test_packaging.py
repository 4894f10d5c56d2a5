"""Unit tests for project metadata.

``src/core/result.py`` uses the ``type`` alias statement, so the declared
interpreter floor must be 3.12 or newer.
"""

import tomllib
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.mark.unit
def test_requires_python_allows_type_statement():
    metadata = tomllib.loads(PYPROJECT.read_text())

    assert metadata["project"]["requires-python"] == ">=3.12"

