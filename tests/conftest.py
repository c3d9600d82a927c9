"""
Fixtures for jwtgen tests
"""

from pathlib import Path
from typing import Callable

import pytest

SCENARIO_TOML = """\
[payload]
sub = "1234567890"
name = "John Doe"
iat = 1516239022

[secretkey]
value = "secretKey"
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config file under tmp_path and return its path."""

    def _write(content: str | bytes, name: str = "claims.toml") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_claims() -> dict:
    """Claims the sample config file should produce."""
    return {"sub": "1234567890", "name": "John Doe", "iat": 1516239022}


@pytest.fixture
def scenario_file(write_config) -> Path:
    """Config file with the sample John Doe claims."""
    return write_config(SCENARIO_TOML)
