"""HS256 token signing for claim payloads."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Union

import jwt

from jwtgen.exceptions import SignError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"

ClaimValue = Union[str, int, float, bool, list["ClaimValue"], dict[str, "ClaimValue"]]


def find_unsupported_claim(value: Any, path: str) -> tuple[str, str] | None:
    """Walk a claim value and report the first part JSON cannot carry.

    Args:
        value: Claim value to check.
        path: Dotted path of ``value``, used in the report.

    Returns:
        ``(path, reason)`` for the first unsupported part, or None.
    """
    if isinstance(value, (str, bool, int)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return path, f"non-finite number {value!r}"
        return None
    if isinstance(value, list):
        for i, item in enumerate(value):
            found = find_unsupported_claim(item, f"{path}[{i}]")
            if found:
                return found
        return None
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                return path, f"non-string key {key!r}"
            found = find_unsupported_claim(item, f"{path}.{key}")
            if found:
                return found
        return None
    return path, f"unsupported type {type(value).__name__}"


def sign(payload: Mapping[str, ClaimValue], secret: str) -> str:
    """Sign a claim set as a compact JWT.

    The claims are encoded exactly as given; no registered claims are added.

    Args:
        payload: Claim names mapped to claim values.
        secret: Shared secret, used as raw HMAC key bytes. Must not be empty.

    Returns:
        Signed JWT string.

    Raises:
        SignError: If a claim cannot be serialized or signing fails.
    """
    if not secret:
        raise SignError("Secret must not be empty", field="secret")

    claims = dict(payload)
    try:
        found = find_unsupported_claim(claims, "payload")
    except RecursionError as e:
        raise SignError("Cannot serialize payload: nested too deeply", field="payload") from e
    if found:
        field, reason = found
        raise SignError(f"Cannot serialize claim {field}: {reason}", field=field)

    try:
        token = jwt.encode(claims, secret, algorithm=DEFAULT_ALGORITHM)
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise SignError(str(e)) from e

    logger.debug("Signed %d claim(s) with %s", len(claims), DEFAULT_ALGORITHM)
    return token
