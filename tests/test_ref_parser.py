import pytest
from scripture.models import ParsedReference
from scripture.ref_parser import parse_reference, require_reference


def test_parse_reference_simple():
    assert parse_reference("Romans 3:23") == ParsedReference(book="Romans", chapter="3", verse="23")


def test_parse_reference_numbered_book():
    ref = parse_reference("1 John 2:15")
    assert ref.book == "1 John"
    assert ref.chapter == "2"
    assert ref.verse == "15"


def test_parse_reference_multi_word_book():
    ref = parse_reference("Song of Solomon 2:4")
    assert ref.book == "Song of Solomon"
    assert ref.verse == "4"


def test_parse_reference_trailing_period_stripped():
    ref = parse_reference("Rom. 8:28")
    assert ref.book == "Rom"
    assert ref.chapter == "8"


def test_parse_reference_range():
    assert parse_reference("Genesis 1:1-3").verse == "1-3"
    assert parse_reference("Genesis 1:1–3").verse == "1–3"


def test_parse_reference_verse_list():
    ref = parse_reference("Psalm 23:1, 4-6")
    assert ref.book == "Psalm"
    assert ref.chapter == "23"
    assert ref.verse == "1, 4-6"


def test_parse_reference_unicode_book():
    ref = parse_reference("Génesis 1:1")
    assert ref.book == "Génesis"


def test_parse_reference_trims_input():
    assert parse_reference("  John 3:16  ") == ParsedReference(book="John", chapter="3", verse="16")


def test_parse_reference_fallback_irregular_book():
    ref = parse_reference("St. John 3:16")
    assert ref.book == "St. John"
    assert ref.chapter == "3"
    assert ref.verse == "16"


def test_parse_reference_fallback_compact_number():
    ref = parse_reference("1Cor 13:4")
    assert ref.book == "1Cor"
    assert ref.chapter == "13"


def test_parse_reference_fallback_keeps_unvalidated_verse():
    ref = parse_reference("John 3:16a")
    assert ref.book == "John"
    assert ref.verse == "16a"


def test_parse_reference_invalid():
    assert parse_reference("Invalid Reference") is None
    assert parse_reference("Not A Reference") is None
    assert parse_reference("John 3") is None
    assert parse_reference("John 3:") is None
    assert parse_reference("") is None
    assert parse_reference(None) is None


def test_parse_reference_is_deterministic():
    assert parse_reference("2 Corinthians 5:17") == parse_reference("2 Corinthians 5:17")


def test_require_reference_invalid():
    with pytest.raises(ValueError):
        require_reference("그냥 인사")


def test_require_reference_valid():
    assert require_reference("John 3:16").book == "John"


def test_parse_reference_chapter_must_be_ascii_digits():
    assert parse_reference("John ٣:16") is None
    assert parse_reference("John 3:١٦").chapter == "3"
