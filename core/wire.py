from __future__ import annotations

import json
import math
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant '{name}'")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def loads(body: bytes | str) -> Any:
    """
    Strict JSON decoding for request bodies.

    NaN, Infinity, -Infinity and literals that overflow to infinity are
    not valid JSON values and could not be rendered back into a response,
    so they are rejected like any other syntax error.
    """
    return json.loads(
        body,
        parse_constant=_reject_constant,
        parse_float=_finite_float,
    )
