"""jwtgen - sign the claims of a TOML config file as a JWT.

This package provides:
- Loading a claim payload and secret from a TOML file
- Signing the claims as an HS256 JWT
- The ``jwtgen`` command line tool
"""

__version__ = "0.1.0"

from jwtgen.config import Config, load, parse
from jwtgen.exceptions import (
    FileReadError,
    JWTGenError,
    ParseError,
    SignError,
    UsageError,
)
from jwtgen.signer import DEFAULT_ALGORITHM, sign

__all__ = [
    "Config",
    "load",
    "parse",
    "sign",
    "DEFAULT_ALGORITHM",
    "JWTGenError",
    "FileReadError",
    "ParseError",
    "SignError",
    "UsageError",
]
