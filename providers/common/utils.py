"""Shared utility helpers for provider request shapers."""

from typing import Any


def set_if_not_none(body: dict[str, Any], key: str, value: Any) -> None:
    """Set body[key] = value only when value is not None."""
    if value is not None:
        body[key] = value


def merge_body(payload: dict[str, Any], options: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge options over payload into a new request body.

    Payload and option keys share one namespace; on collision the option wins.
    """
    return {**payload, **options}
