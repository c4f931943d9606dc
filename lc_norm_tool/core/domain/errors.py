# lc_norm_tool/core/domain/errors.py

"""Structured parse failures for LC call numbers

A failure is an ordered chain of positioned failures. Attempts at optional
fields that were treated as absent are kept in the chain ahead of the fatal
cause, so diagnostics show every step the parser tried.
"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import FieldName


class PositionedFailure(BaseModel):
    """One recognizer failure and the input it was looking at"""

    model_config = ConfigDict(frozen=True)

    fragment: str = Field(..., description="Remaining input at the point of failure")
    kind: FailureKind
    field: FieldName

    def describe(self) -> str:
        return f"input={self.fragment!r} kind={self.kind.value} field={self.field.value}"


def format_failure_chain(message: str, failures: list[PositionedFailure]) -> str:
    """Render a message followed by a numbered listing of the failure chain

    Args:
        message: Headline for the failure
        failures: Failures in the order they were encountered

    Returns:
        Multi-line diagnostic text
    """
    lines = [message]
    if failures:
        lines.append("")
        lines.append("Parse context:")
        for index, failure in enumerate(failures):
            lines.append(f"{index:>5}: {failure.describe()}")
    return "\n".join(lines)


class CallNumberParseError(ValueError):
    """Raised when a line cannot be read as an LC call number

    Attributes:
        failures: Positioned failures, innermost first; the last one is fatal
        line: The full input line, when known
    """

    def __init__(self, failures: list[PositionedFailure], line: str | None = None) -> None:
        if not failures:
            raise ValueError("CallNumberParseError needs at least one failure")
        self.failures = list(failures)
        self.line = line
        super().__init__(self.message)

    def __reduce__(self) -> tuple[type, tuple[list[PositionedFailure], str | None]]:
        return (self.__class__, (self.failures, self.line))

    @classmethod
    def single(
        cls, fragment: str, kind: FailureKind, field: FieldName
    ) -> "CallNumberParseError":
        """Build an error holding a single positioned failure"""
        return cls([PositionedFailure(fragment=fragment, kind=kind, field=field)])

    @property
    def cause(self) -> PositionedFailure:
        """The failure that ended the parse"""
        return self.failures[-1]

    @property
    def kind(self) -> FailureKind:
        return self.cause.kind

    @property
    def message(self) -> str:
        cause = self.cause
        if cause.kind is FailureKind.MALFORMED_NUMBER:
            return f"invalid class number {cause.fragment!r}"
        if cause.kind is FailureKind.TRAILING_CONTENT:
            return f"unparsed trailing content {cause.fragment!r}"
        return f"unable to parse {cause.field.value} of LC call number"

    def with_context(
        self, absorbed: list[PositionedFailure], line: str | None = None
    ) -> "CallNumberParseError":
        """Return a copy with earlier absorbed failures placed ahead of this one"""
        return CallNumberParseError(
            [*absorbed, *self.failures], line=self.line if line is None else line
        )

    def describe(self) -> str:
        """Numbered diagnostic listing of the whole failure chain"""
        message = self.message
        if self.line is not None:
            message = f"{message} in {self.line!r}"
        return format_failure_chain(message, self.failures)
