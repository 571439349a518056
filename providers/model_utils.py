"""Model name parsing and classification utilities.

Model names may carry default options in a query-string suffix, e.g.
``gpt-4o?temperature=0.7&max_tokens=1000``. Everything here is pure: no
catalog lookups, no I/O.
"""

import re
from dataclasses import dataclass, field
from urllib.parse import unquote_plus

from providers.base import ModelRole, OptionValue
from providers.exceptions import ModelNameParseError

# Substring that marks a model as an embeddings model
_EMBEDDINGS_IDENTIFIER = "embed"

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ParsedModelName:
    name: str
    options: dict[str, OptionValue] = field(default_factory=dict)


def coerce_option_value(value: str) -> OptionValue:
    """
    Coerce a raw option value to int, float or str.

    Only plain numeric literals are converted; ``nan``, ``inf`` and the like
    stay strings.

    Args:
        value: The raw (already URL-decoded) value

    Returns:
        The int or float the literal denotes, otherwise the string unchanged
    """
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    return value


def parse_model_name(model: str) -> ParsedModelName:
    """
    Split a raw model name into its canonical name and default options.

    Args:
        model: ``<name>`` or ``<name>?<key>=<value>&...``

    Returns:
        ParsedModelName with the verbatim name and coerced options

    Raises:
        ModelNameParseError: If an option segment lacks ``=`` or a key
    """
    name, sep, query = model.partition("?")
    options: dict[str, OptionValue] = {}
    if not sep:
        return ParsedModelName(name=name, options=options)

    for segment in query.split("&"):
        if not segment:
            continue
        key, eq, value = segment.partition("=")
        if not eq:
            raise ModelNameParseError(
                f'Invalid option "{segment}" in model name "{model}": '
                "expected key=value."
            )
        key = unquote_plus(key)
        if not key:
            raise ModelNameParseError(
                f'Invalid option "{segment}" in model name "{model}": empty key.'
            )
        options[key] = coerce_option_value(unquote_plus(value))

    return ParsedModelName(name=name, options=options)


def is_embeddings_model(model: str) -> bool:
    """
    Check if a model name identifies as an embeddings model.

    Args:
        model: The canonical model name

    Returns:
        True if the name contains "embed" in any letter case
    """
    return _EMBEDDINGS_IDENTIFIER in model.lower()


def classify_model_role(model: str) -> ModelRole:
    """Classify a canonical model name into its role by naming convention."""
    if is_embeddings_model(model):
        return ModelRole.embeddings
    return ModelRole.completions


def strip_provider_prefix(model: str) -> tuple[str | None, str]:
    """
    Split ``provider_type/model`` into its two parts.

    Only the first ``/`` counts, so ``generic/org/model`` keeps ``org/model``.

    Args:
        model: The configured model string

    Returns:
        (provider_type, rest); provider_type is None when there is no prefix
    """
    provider_type, sep, rest = model.partition("/")
    if not sep:
        return None, model
    return provider_type, rest
