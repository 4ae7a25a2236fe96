import re
from typing import Optional

from scripture.models import ParsedReference

# [^\W\d_] is a unicode letter
_WORD = r"[^\W\d_]+"
_VERSE_PART = r"[0-9]+(?:[-–][0-9]+)?"

STRICT_PATTERN = re.compile(
    rf"^(?P<book>(?:[0-9]{{1,2}}\s+)?{_WORD}(?:\s+{_WORD})*\.?)"
    rf"\s+(?P<chapter>[0-9]+):(?P<verse>{_VERSE_PART}(?:\s*,\s*{_VERSE_PART})*)$"
)

FALLBACK_PATTERN = re.compile(r"^(?P<book>[^:]+?)\s+(?P<chapter>[0-9]+):(?P<verse>.+)$", re.DOTALL)


def _clean_book(book: str) -> str:
    book = book.strip()
    if book.endswith("."):
        book = book[:-1]
    return book.strip()


def parse_reference(raw: str) -> Optional[ParsedReference]:
    text = (raw or "").strip()
    if not text:
        return None

    m = STRICT_PATTERN.match(text)
    if m:
        return ParsedReference(
            book=_clean_book(m.group("book")),
            chapter=m.group("chapter"),
            verse=m.group("verse").strip(),
        )

    m = FALLBACK_PATTERN.match(text)
    if not m:
        return None
    book = _clean_book(m.group("book"))
    verse = m.group("verse").strip()
    if not book or not verse:
        return None
    return ParsedReference(book=book, chapter=m.group("chapter"), verse=verse)


def require_reference(raw: str) -> ParsedReference:
    parsed = parse_reference(raw)
    if parsed is None:
        raise ValueError("invalid reference")
    return parsed
