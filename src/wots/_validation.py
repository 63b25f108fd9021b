"""Exact-type checks for models that hold keys."""

from __future__ import annotations

from typing import Any


def enforce_strict_types(instance: Any, **field_types: type) -> None:
    """
    Raises `TypeError` unless each named field of `instance` is exactly its class.

    A subclass of a key or hasher could override `sign`, `verify` or `digest`,
    so isinstance checks are not enough. Called from pydantic `after` validators.
    """
    for name, cls in field_types.items():
        actual = type(getattr(instance, name))
        if actual is not cls:
            raise TypeError(
                f"{name} must be exactly {cls.__name__}, not a subclass ({actual.__name__})"
            )
