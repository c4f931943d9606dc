# lc_norm_tool/application/parsing/_assembler.py

"""Record assembler: runs the field recognizers in call number order

The sequence is fixed:

    Prefix -> ClassNumber -> Cutter -> [Cutter] -> [Year] -> [Note]

A failure in a required step ends the parse. A failure in an optional step
means the field is absent; the input is left as it was and the failure is
kept for diagnostics.
"""

# Standard library imports
from collections.abc import Callable
from functools import partial
from logging import getLogger
from string import whitespace

# Local imports
from lc_norm_tool.application.parsing._recognizers import parse_class_number
from lc_norm_tool.application.parsing._recognizers import parse_cutter
from lc_norm_tool.application.parsing._recognizers import parse_note
from lc_norm_tool.application.parsing._recognizers import parse_prefix
from lc_norm_tool.application.parsing._recognizers import parse_year
from lc_norm_tool.core.domain.call_number import LCRecord
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import FieldName
from lc_norm_tool.core.domain.errors import CallNumberParseError
from lc_norm_tool.core.domain.errors import PositionedFailure
from lc_norm_tool.core.types.results import NoRecord
from lc_norm_tool.core.types.results import ParseFailed
from lc_norm_tool.core.types.results import ParseOutcome
from lc_norm_tool.core.types.results import ParsedRecord

logger = getLogger(__name__)

type Recognizer[T] = Callable[[str], tuple[str, T]]

_parse_second_cutter = partial(parse_cutter, field=FieldName.SECOND_CUTTER)


class _Assembly:
    """Parse state for one line: remaining input plus absorbed failures"""

    __slots__ = ("line", "remaining", "absorbed")

    def __init__(self, line: str) -> None:
        self.line = line
        self.remaining = line
        self.absorbed: list[PositionedFailure] = []

    def require[T](self, recognizer: Recognizer[T]) -> T:
        """Run a mandatory recognizer; its failure aborts the parse"""
        try:
            self.remaining, value = recognizer(self.remaining)
        except CallNumberParseError as error:
            raise error.with_context(self.absorbed, self.line) from None
        return value

    def attempt[T](self, recognizer: Recognizer[T]) -> T | None:
        """Run an optional recognizer; its failure means the field is absent"""
        try:
            self.remaining, value = recognizer(self.remaining)
        except CallNumberParseError as error:
            logger.debug(f"Optional field absent in {self.line!r}: {error.cause.describe()}")
            self.absorbed.extend(error.failures)
            return None
        return value

    def finish(self) -> None:
        """Fail if anything other than whitespace is left unconsumed"""
        if self.remaining.strip(whitespace):
            trailing = CallNumberParseError.single(
                self.remaining, FailureKind.TRAILING_CONTENT, FieldName.RECORD
            )
            raise trailing.with_context(self.absorbed, self.line)


def try_parse(line: str) -> LCRecord:
    """Parse one line into an LCRecord

    Args:
        line: Call number text, e.g. "TD224.C3 C3723 2004"

    Returns:
        The assembled record

    Raises:
        CallNumberParseError: if a required field cannot be read or text
            is left over after every field was attempted
    """
    assembly = _Assembly(line)

    prefix = assembly.require(parse_prefix)
    class_number = assembly.require(parse_class_number)
    first_cutter = assembly.require(parse_cutter)
    second_cutter = assembly.attempt(_parse_second_cutter)
    year = assembly.attempt(parse_year)
    note = assembly.attempt(parse_note)
    assembly.finish()

    return LCRecord(
        prefix=prefix,
        class_number=class_number,
        first_cutter=first_cutter,
        second_cutter=second_cutter,
        year=year,
        note=note,
    )


def maybe_parse(line: str) -> ParseOutcome:
    """Parse a catalog cell, distinguishing empty cells from bad ones

    Never raises for malformed input.

    Args:
        line: Raw cell text

    Returns:
        NoRecord for blank text, ParsedRecord on success, ParseFailed otherwise
    """
    text = line.strip()
    if not text:
        return NoRecord()

    try:
        record = try_parse(text)
    except CallNumberParseError as error:
        return ParseFailed.from_error(error)

    return ParsedRecord(record=record)
