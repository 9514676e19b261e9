"""Utility helpers shared by the slider catalog loader."""

from __future__ import annotations

import datetime as dt

from .models import CatalogConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_id(value: object, context: str) -> int:
    """Return ``value`` as a positive integer identifier."""
    match value:
        case bool():
            pass
        case int() if value > 0:
            return value
        case str() if value.strip().isdigit() and int(value) > 0:
            return int(value)
        case _:
            pass
    msg = f"{context} requires a positive integer 'id', got {value!r}."
    raise CatalogConfigError(msg)


def _optional_int(value: object, context: str) -> int | None:
    """Return ``value`` as an integer, or None when unset."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        msg = f"{context} must be an integer, got {value!r}."
        raise CatalogConfigError(msg)
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"{context} must be an integer, got {value!r}."
        raise CatalogConfigError(msg) from exc


def _parse_date(value: dt.date | str | None, context: str) -> dt.date | None:
    """Return a date parsed from ``value``, or None when unset."""
    match value:
        case None:
            return None
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            try:
                return dt.date.fromisoformat(sanitized)
            except ValueError as exc:
                msg = f"{context} must be an ISO date, got {text!r}."
                raise CatalogConfigError(msg) from exc
        case _:
            msg = f"{context} must be an ISO date, got {value!r}."
            raise CatalogConfigError(msg)


__all__ = ["_optional_int", "_optional_str", "_parse_date", "_require_id"]
