# tests/unit/application/parsing/test_call_number_properties.py

"""Property-based tests for call number parsing and rendering

These tests generate well-formed records and arbitrary text to check that
canonical rendering round-trips and that parsing never crashes.
"""

# Standard library imports
from string import ascii_letters
from string import ascii_lowercase
from string import ascii_uppercase
from string import digits
from string import punctuation

# Third party imports
from hypothesis import assume
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.strategies import composite

# Local imports
from lc_norm_tool.application.parsing import maybe_parse
from lc_norm_tool.application.parsing import try_parse
from lc_norm_tool.core.domain.call_number import ClassNumber
from lc_norm_tool.core.domain.call_number import CutterSegment
from lc_norm_tool.core.domain.call_number import LCRecord
from lc_norm_tool.core.domain.call_number import Note
from lc_norm_tool.core.domain.call_number import Prefix
from lc_norm_tool.core.domain.call_number import Year
from lc_norm_tool.core.types.results import NoRecord
from lc_norm_tool.core.types.results import ParseFailed
from lc_norm_tool.core.types.results import ParsedRecord

_ALNUM = ascii_letters + digits
_NOTE_CHARS = ascii_letters + digits + punctuation
_SEPARATOR_CHARS = " \t\n\r\f\v"


@composite
def class_numbers(draw) -> ClassNumber:
    """Class numbers written with at most six fractional digits"""
    whole = draw(st.integers(min_value=0, max_value=99999))
    fraction = draw(st.one_of(st.none(), st.text(alphabet=digits, min_size=1, max_size=6)))
    text = str(whole) if fraction is None else f"{whole}.{fraction}"
    return ClassNumber(value=float(text))


@composite
def cutters(draw, first_letters: str = ascii_letters) -> CutterSegment:
    body = draw(st.sampled_from(first_letters)) + draw(st.text(alphabet=_ALNUM, max_size=6))
    return CutterSegment(leading_dot=draw(st.booleans()), body=body)


@composite
def records(draw) -> LCRecord:
    """Records in the shape the parser produces

    The first cutter starts with an uppercase letter so it always ends the
    class number. A note only follows a year.
    """
    year = draw(
        st.one_of(
            st.none(),
            st.builds(
                Year,
                value=st.integers(min_value=0, max_value=9999),
                suffix=st.one_of(st.none(), st.sampled_from(ascii_letters)),
            ),
        )
    )
    note = None
    if year is not None:
        words = draw(
            st.lists(st.text(alphabet=_NOTE_CHARS, min_size=1, max_size=6), max_size=3)
        )
        if words:
            note = Note(body=" ".join(words))

    return LCRecord(
        prefix=Prefix(value=draw(st.text(alphabet=ascii_letters, min_size=1, max_size=2))),
        class_number=draw(class_numbers()),
        first_cutter=draw(cutters(ascii_uppercase)),
        second_cutter=draw(st.one_of(st.none(), cutters())),
        year=year,
        note=note,
    )


class TestRenderingProperties:
    """Property-based tests for canonical rendering"""

    @given(records())
    def test_rendered_record_parses_back(self, record: LCRecord) -> None:
        """Parsing the canonical form gives back the same record"""
        assert try_parse(record.render()) == record

    @given(records())
    def test_rendering_is_idempotent(self, record: LCRecord) -> None:
        """Rendering, parsing and rendering again changes nothing"""
        rendered = record.render()
        assert try_parse(rendered).render() == rendered

    @given(records())
    def test_rendered_form_has_no_surrounding_whitespace(self, record: LCRecord) -> None:
        rendered = record.render()
        assert rendered == rendered.strip()

    @given(records(), st.text(alphabet=" \t", max_size=3), st.text(alphabet=" \t", max_size=3))
    def test_surrounding_whitespace_is_ignored(
        self, record: LCRecord, before: str, after: str
    ) -> None:
        outcome = maybe_parse(f"{before}{record.render()}{after}")
        assert isinstance(outcome, ParsedRecord)
        assert outcome.record == record

    @given(records(), st.data())
    def test_whitespace_between_fields_is_a_separator(
        self, record: LCRecord, data: st.DataObject
    ) -> None:
        """Any run of tabs, newlines or spaces between fields reads like one space"""
        fields = [
            record.prefix,
            record.class_number,
            record.first_cutter,
            record.second_cutter,
            record.year,
            record.note,
        ]
        text = ""
        for field in (field for field in fields if field is not None):
            if text:
                text += data.draw(st.text(alphabet=_SEPARATOR_CHARS, min_size=1, max_size=3))
            text += field.render()

        parsed = try_parse(text)

        assert parsed == record
        assert try_parse(parsed.render()) == parsed

    @given(records())
    def test_dot_spacing_variants_render_alike(self, record: LCRecord) -> None:
        """Compact and spaced source forms normalize to one rendering"""
        assume(record.first_cutter.leading_dot)
        rendered = record.render()
        head = f"{record.prefix.render()} {record.class_number.render()} "
        compact = head.replace(" ", "") + rendered[len(head) :]
        assert try_parse(compact).render() == rendered


class TestMaybeParseProperties:
    """Property-based tests for the non-raising entry point"""

    @given(st.text())
    def test_never_raises(self, text: str) -> None:
        outcome = maybe_parse(text)
        assert isinstance(outcome, (NoRecord, ParsedRecord, ParseFailed))

    @given(st.text(alphabet=" \t\r\n", max_size=10))
    def test_blank_text_is_no_record(self, text: str) -> None:
        assert maybe_parse(text) == NoRecord()

    @given(st.text())
    def test_failures_carry_a_chain(self, text: str) -> None:
        outcome = maybe_parse(text)
        if isinstance(outcome, ParseFailed):
            assert outcome.failures
            assert outcome.message
            assert outcome.kind is outcome.failures[-1].kind

    @given(st.text(alphabet=digits + " .", min_size=1))
    def test_digits_alone_are_never_a_call_number(self, text: str) -> None:
        assert not isinstance(maybe_parse(text), ParsedRecord)

    @given(st.text(alphabet=ascii_lowercase + ascii_uppercase, min_size=1, max_size=2))
    def test_prefix_alone_fails(self, text: str) -> None:
        assert isinstance(maybe_parse(text), ParseFailed)
