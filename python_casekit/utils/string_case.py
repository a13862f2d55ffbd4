"""String case conversion utilities.

Camel and dot case share one word splitter:

1. split on runs of whitespace, ``-``, ``_`` and ``.``;
2. split a fragment that contains lowercase letters before each uppercase
   letter that follows a letter, so ``helloWorld`` gives ``hello``, ``World``
   and ``XMLHttpRequest`` gives ``X``, ``M``, ``L``, ``Http``, ``Request``.
   An all-uppercase fragment such as ``XML`` stays a single word. With
   ``keep_digits`` a digit also ends a word before an uppercase letter, and
   a fragment holding digits is never an acronym;
3. drop everything that is not an ASCII letter (or digit, with
   ``keep_digits``), then drop empty words. ``hello123World`` gives
   ``helloWorld`` as one word.

Kebab case keeps digits and punctuation and only inserts hyphens at
separators and lowercase-to-uppercase transitions.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from common.config import get_settings
from common.models import CaseStyle
from errors import (
    EmptyInputError,
    MissingValueError,
    TypeMismatchError,
    UnknownCaseStyleError,
)

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s\-_.]+")
_NON_LETTER = re.compile(r"[^a-zA-Z]")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_BOUNDARY = re.compile(r"(?<=[A-Za-z])(?=[A-Z])")
_BOUNDARY_WITH_DIGITS = re.compile(r"(?<=[A-Za-z0-9])(?=[A-Z])")

_KEBAB_SEPARATORS = re.compile(r"[\s_.]+")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_HYPHEN_RUNS = re.compile(r"-+")


def _require_str(value, func_name: str) -> str:
    if value is None:
        logger.debug(f"{func_name} rejected None input")
        raise MissingValueError(f"{func_name}: input is None, expected a string")
    if not isinstance(value, str):
        logger.debug(f"{func_name} rejected input of type {type(value).__name__}")
        raise TypeMismatchError(
            f"{func_name}: input must be a string, got {type(value).__name__}"
        )
    return value


def _resolve_keep_digits(keep_digits: Optional[bool]) -> bool:
    if keep_digits is None:
        return get_settings().case.keep_digits
    return keep_digits


def _split(value: str, keep_digits: Optional[bool]) -> List[str]:
    keep_digits = _resolve_keep_digits(keep_digits)
    noise = _NON_ALNUM if keep_digits else _NON_LETTER
    boundary = _BOUNDARY_WITH_DIGITS if keep_digits else _BOUNDARY

    words: List[str] = []
    for fragment in _SEPARATORS.split(value):
        if _LOWER.search(fragment) or (keep_digits and _DIGIT.search(fragment)):
            pieces = boundary.split(fragment)
        else:
            pieces = [fragment]
        for piece in pieces:
            piece = noise.sub("", piece)
            if piece:
                words.append(piece)
    return words


def split_words(value: str, *, keep_digits: Optional[bool] = None) -> List[str]:
    """Split ``value`` into words, preserving the case of each word."""
    value = _require_str(value, "split_words")
    return _split(value, keep_digits)


def to_camel_case(value: str, *, keep_digits: Optional[bool] = None) -> str:
    value = _require_str(value, "to_camel_case")
    words = _split(value, keep_digits)
    if not words:
        return ""

    result = [words[0].lower()]
    for word in words[1:]:
        word = word.lower()
        result.append(word[:1].upper() + word[1:])
    converted = "".join(result)
    logger.debug(f"to_camel_case: {value!r} -> {converted!r}")
    return converted


def to_kebab_case(value: str) -> str:
    value = _require_str(value, "to_kebab_case")
    trimmed = value.strip()
    if not trimmed:
        logger.debug("to_kebab_case rejected empty input")
        raise EmptyInputError("to_kebab_case: input cannot be an empty string")

    converted = _KEBAB_SEPARATORS.sub("-", trimmed)
    converted = _LOWER_UPPER.sub(r"\1-\2", converted)
    converted = _HYPHEN_RUNS.sub("-", converted.lower()).strip("-")
    logger.debug(f"to_kebab_case: {value!r} -> {converted!r}")
    return converted


def to_dot_case(value: str, *, keep_digits: Optional[bool] = None) -> str:
    value = _require_str(value, "to_dot_case")
    words = _split(value, keep_digits)
    converted = ".".join(word.lower() for word in words)
    logger.debug(f"to_dot_case: {value!r} -> {converted!r}")
    return converted


_CONVERTERS = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.DOT: to_dot_case,
}


def convert_case(
    value: str,
    style: Union[CaseStyle, str, None] = None,
    **options,
) -> str:
    """Convert ``value`` to ``style``.

    ``style`` may be a :class:`CaseStyle`, its value, its name or a short
    alias such as ``"kebab"``. ``None`` uses the configured default style.
    Extra keyword options are passed through to the selected converter.
    """
    if style is None:
        style = get_settings().case.default_style
    try:
        style = CaseStyle(style)
    except ValueError as e:
        raise UnknownCaseStyleError(f"Unknown case style {style!r}", source=e) from e
    return _CONVERTERS[style](value, **options)
