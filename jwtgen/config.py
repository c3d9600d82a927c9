"""Config file loading: claim payload and signing secret."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from typing import Any

from jwtgen.exceptions import FileReadError, ParseError
from jwtgen.signer import ClaimValue, find_unsupported_claim, sign

logger = logging.getLogger(__name__)

PAYLOAD_TABLE = "payload"
SECRET_TABLE = "secretkey"
SECRET_KEY = "value"


@dataclass(frozen=True)
class Config:
    """Claims to sign and the secret to sign them with."""

    payload: dict[str, ClaimValue] = field(default_factory=dict)
    secret: str = field(default="", repr=False)

    def to_jwt(self) -> str:
        """Sign the payload with the secret.

        Returns:
            Signed JWT string.
        """
        return sign(self.payload, self.secret)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a parsed TOML document.

        Raises:
            ParseError: If a required table or key is missing, mistyped or empty.
        """
        payload = data.get(PAYLOAD_TABLE)
        if payload is None:
            raise ParseError(f"Missing [{PAYLOAD_TABLE}] table", field=PAYLOAD_TABLE)
        if not isinstance(payload, dict):
            raise ParseError(f"'{PAYLOAD_TABLE}' must be a table", field=PAYLOAD_TABLE)

        try:
            found = find_unsupported_claim(payload, PAYLOAD_TABLE)
        except RecursionError as e:
            raise ParseError(f"'{PAYLOAD_TABLE}' is nested too deeply", field=PAYLOAD_TABLE) from e
        if found:
            path, reason = found
            raise ParseError(f"Invalid claim {path}: {reason}", field=path)

        secret_table = data.get(SECRET_TABLE)
        if secret_table is None:
            raise ParseError(f"Missing [{SECRET_TABLE}] table", field=SECRET_TABLE)
        if not isinstance(secret_table, dict):
            raise ParseError(f"'{SECRET_TABLE}' must be a table", field=SECRET_TABLE)

        secret_field = f"{SECRET_TABLE}.{SECRET_KEY}"
        if SECRET_KEY not in secret_table:
            raise ParseError(f"Missing '{secret_field}'", field=secret_field)
        secret = secret_table[SECRET_KEY]
        if not isinstance(secret, str):
            raise ParseError(f"'{secret_field}' must be a string", field=secret_field)
        if not secret:
            raise ParseError(f"'{secret_field}' must not be empty", field=secret_field)

        return cls(payload=payload, secret=secret)


def parse(text: str, source: str = "<string>") -> Config:
    """Parse TOML text into a Config.

    Args:
        text: TOML document.
        source: Name used in log messages.

    Raises:
        ParseError: If the text is not valid TOML or has the wrong shape.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(f"Invalid TOML in {source}: {e}") from e
    except RecursionError as e:
        raise ParseError(f"Invalid TOML in {source}: nested too deeply") from e

    config = Config.from_dict(data)
    logger.debug("Loaded %d claim(s) from %s: %s", len(config.payload), source, sorted(config.payload))
    return config


def load(path: str) -> Config:
    """Read and parse a config file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Config with the payload claims and the secret.

    Raises:
        FileReadError: If the file cannot be read as UTF-8 text.
        ParseError: If the contents are malformed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise FileReadError(f"No such file: {path}", path=path) from e
    except UnicodeDecodeError as e:
        raise FileReadError(f"{path} is not valid UTF-8: {e}", path=path) from e
    except ValueError as e:
        raise FileReadError(f"Invalid path {path!r}: {e}", path=path) from e
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e.strerror or e}", path=path) from e

    return parse(text, source=path)
