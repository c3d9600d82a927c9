"""jwtgen exceptions."""

from __future__ import annotations


class JWTGenError(Exception):
    """Base exception for all jwtgen errors."""

    stage = "jwtgen"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UsageError(JWTGenError):
    """Raised when the command line is missing required input."""

    stage = "arguments"


class FileReadError(JWTGenError):
    """Raised when the config file cannot be read as text."""

    stage = "read"

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ParseError(JWTGenError):
    """Raised when the config file is malformed or has the wrong shape."""

    stage = "parse"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class SignError(JWTGenError):
    """Raised when the payload cannot be serialized or signed."""

    stage = "sign"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
