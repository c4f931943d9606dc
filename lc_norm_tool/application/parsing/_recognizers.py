# lc_norm_tool/application/parsing/_recognizers.py

"""Field recognizers for LC call numbers

Each recognizer takes the remaining input and returns ``(remaining, field)``,
consuming a prefix of the input. On failure it raises CallNumberParseError
holding a single positioned failure; the assembler decides whether that
failure is fatal or means the field is absent.

Character classes are ASCII only. A "space run" is one or more characters of
``string.whitespace``; U+00A0 and other non-ASCII spaces are never separators.
"""

# Standard library imports
from math import isfinite
from re import compile
from string import ascii_letters
from string import ascii_uppercase
from string import digits
from string import whitespace

# Local imports
from lc_norm_tool.core.domain.call_number import ClassNumber
from lc_norm_tool.core.domain.call_number import CutterSegment
from lc_norm_tool.core.domain.call_number import Note
from lc_norm_tool.core.domain.call_number import Prefix
from lc_norm_tool.core.domain.call_number import Year
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import FieldName
from lc_norm_tool.core.domain.errors import CallNumberParseError

_ALPHA = frozenset(ascii_letters)
_UPPER = frozenset(ascii_uppercase)
_DIGITS = frozenset(digits)
_ALNUM = _ALPHA | _DIGITS
_DROP_WHITESPACE = str.maketrans("", "", whitespace)

# Space-stripped class number text: "224", "21.5", "1695.", ".55"
_CLASS_NUMBER_PATTERN = compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

PREFIX_MAX_LENGTH = 2
YEAR_LENGTH = 4


def _skip_spaces(text: str) -> str:
    return text.lstrip(whitespace)


def _take_while(text: str, allowed: frozenset[str], limit: int | None = None) -> int:
    """Length of the leading run of ``text`` made of ``allowed`` characters"""
    end = 0
    stop = len(text) if limit is None else min(limit, len(text))
    while end < stop and text[end] in allowed:
        end += 1
    return end


def parse_prefix(text: str) -> tuple[str, Prefix]:
    """Read the one or two letter subject class

    Args:
        text: Remaining input

    Returns:
        Tuple of (remaining input, Prefix)

    Raises:
        CallNumberParseError: if the input does not start with a letter
    """
    end = _take_while(text, _ALPHA, PREFIX_MAX_LENGTH)
    if end == 0:
        kind = FailureKind.UNEXPECTED_END if not text else FailureKind.UNEXPECTED_CHARACTER
        raise CallNumberParseError.single(text, kind, FieldName.PREFIX)
    return text[end:], Prefix(value=text[:end])


def find_class_number_end(text: str) -> int:
    """Locate where the class number stops and the first cutter begins

    Scans left to right and stops at the earliest of:
    - a second '.', which is left for the cutter
    - an uppercase letter; when the character before it is '.', that dot
      is left for the cutter too
    Otherwise the class number runs to the end of the input.

    Args:
        text: Input immediately after the prefix

    Returns:
        Index of the boundary
    """
    seen_dot = False
    previous: str | None = None

    for index, char in enumerate(text):
        if char == ".":
            if seen_dot:
                return index
            seen_dot = True
        elif char in _UPPER:
            if previous == ".":
                return index - 1
            return index
        previous = char

    return len(text)


def parse_class_number(text: str) -> tuple[str, ClassNumber]:
    """Read the numeric subclass, tolerating spaces inside the number

    "1695 .55", "1695.55" and "1695.55 " all read as 1695.55.

    Args:
        text: Input immediately after the prefix

    Returns:
        Tuple of (remaining input, ClassNumber)

    Raises:
        CallNumberParseError: UnexpectedEnd on blank input, MalformedNumber
            when the text before the boundary is not a number
    """
    if not text.strip(whitespace):
        raise CallNumberParseError.single(text, FailureKind.UNEXPECTED_END, FieldName.CLASS_NUMBER)

    end = find_class_number_end(text)
    candidate = text[:end]
    number_text = candidate.translate(_DROP_WHITESPACE)

    if not _CLASS_NUMBER_PATTERN.fullmatch(number_text):
        raise CallNumberParseError.single(
            candidate, FailureKind.MALFORMED_NUMBER, FieldName.CLASS_NUMBER
        )

    value = float(number_text)
    if not isfinite(value):
        raise CallNumberParseError.single(
            candidate, FailureKind.MALFORMED_NUMBER, FieldName.CLASS_NUMBER
        )

    return text[end:], ClassNumber(value=value)


def parse_cutter(
    text: str, field: FieldName = FieldName.FIRST_CUTTER
) -> tuple[str, CutterSegment]:
    """Read a cutter code such as ".C3", ". K55" or "C3723"

    Args:
        text: Remaining input
        field: Which cutter is being read, for diagnostics

    Returns:
        Tuple of (remaining input, CutterSegment)

    Raises:
        CallNumberParseError: if no alphanumeric body follows, or the body
            starts with a digit
    """
    rest = _skip_spaces(text)
    leading_dot = rest.startswith(".")
    if leading_dot:
        rest = _skip_spaces(rest[1:])

    end = _take_while(rest, _ALNUM)
    if end == 0:
        kind = FailureKind.UNEXPECTED_END if not rest else FailureKind.UNEXPECTED_CHARACTER
        raise CallNumberParseError.single(rest, kind, field)

    body = rest[:end]
    if body[0] not in _ALPHA:
        # A bare number is never a cutter
        raise CallNumberParseError.single(rest, FailureKind.UNEXPECTED_CHARACTER, field)

    return rest[end:], CutterSegment(leading_dot=leading_dot, body=body)


def parse_year(text: str) -> tuple[str, Year]:
    """Read a four-digit year and an optional letter suffix ("1988b")

    Args:
        text: Remaining input

    Returns:
        Tuple of (remaining input, Year)

    Raises:
        CallNumberParseError: if fewer than four characters remain or they
            are not all digits
    """
    rest = _skip_spaces(text)
    if len(rest) < YEAR_LENGTH:
        raise CallNumberParseError.single(rest, FailureKind.UNEXPECTED_END, FieldName.YEAR)

    year_text = rest[:YEAR_LENGTH]
    if _take_while(year_text, _DIGITS) != YEAR_LENGTH:
        raise CallNumberParseError.single(
            rest, FailureKind.UNEXPECTED_CHARACTER, FieldName.YEAR
        )

    rest = rest[YEAR_LENGTH:]
    suffix = None
    if rest and rest[0] in _ALPHA:
        suffix = rest[0]
        rest = rest[1:]

    return rest, Year(value=int(year_text), suffix=suffix)


def parse_note(text: str) -> tuple[str, Note]:
    """Take everything that is left as a trimmed note

    Raises:
        CallNumberParseError: if only whitespace remains
    """
    body = text.strip(whitespace)
    if not body:
        raise CallNumberParseError.single(text, FailureKind.UNEXPECTED_END, FieldName.NOTE)
    return "", Note(body=body)
