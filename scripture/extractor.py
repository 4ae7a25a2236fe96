import re
from typing import Iterator, List, Optional, Sequence, Tuple

from scripture.events import Observer, notify
from scripture.models import SINGLE_DELIMITER, TRIPLE_DELIMITER, Citation
from scripture.ref_parser import parse_reference


def _quote_pattern(delimiter: str) -> re.Pattern:
    # lazy, and the content may not contain an apostrophe
    quote = re.escape(delimiter)
    return re.compile(rf"{quote}([^{re.escape(SINGLE_DELIMITER)}]+?){quote}")


TRIPLE_QUOTE_PATTERN = _quote_pattern(TRIPLE_DELIMITER)
SINGLE_QUOTE_PATTERN = _quote_pattern(SINGLE_DELIMITER)


def _gaps(length: int, blocked: Sequence[Citation]) -> Iterator[Tuple[int, int]]:
    pos = 0
    for c in sorted(blocked, key=lambda c: c.start):
        if c.start > pos:
            yield pos, c.start
        pos = max(pos, c.end)
    if pos < length:
        yield pos, length


def _scan(
    text: str,
    pattern: re.Pattern,
    kind: str,
    observer: Optional[Observer],
    blocked: Sequence[Citation] = (),
) -> List[Citation]:
    # Only the gaps between blocked spans are scanned. A whole-text scan that
    # merely skips matches starting inside a triple loses a single citation
    # following a triple (its leftover apostrophes pair with the next quote)
    # and can yield a single that ends inside a triple delimiter.
    found = []
    for pos, endpos in _gaps(len(text), blocked):
        for m in pattern.finditer(text, pos, endpos):
            raw_text = m.group(1).strip()
            parsed = parse_reference(raw_text)
            if parsed is None:
                notify(
                    observer,
                    "citation_dropped",
                    {"kind": kind, "raw_text": raw_text, "start": m.start(), "end": m.end()},
                )
                continue
            found.append(
                Citation(kind=kind, raw_text=raw_text, parsed=parsed, start=m.start(), end=m.end())
            )
    return found


def extract_references(text: str, observer: Optional[Observer] = None) -> List[Citation]:
    """
    Find '...' and '''...''' citations in paragraph text.

    Triple-quoted citations are collected first and take precedence: single
    quotes are only looked for outside accepted triple spans, so no single
    citation starts inside (or overlaps) one, and the apostrophes that make up
    a triple delimiter are never paired with a neighbouring single quote.
    Triple spans whose content is not a reference do not block single matches.
    """
    if not text:
        return []

    triples = _scan(text, TRIPLE_QUOTE_PATTERN, "triple", observer)
    singles = _scan(text, SINGLE_QUOTE_PATTERN, "single", observer, blocked=triples)

    citations = sorted(triples + singles, key=lambda c: c.start)
    for c in citations:
        notify(
            observer,
            "citation_found",
            {
                "kind": c.kind,
                "raw_text": c.raw_text,
                "start": c.start,
                "end": c.end,
                "book": c.parsed.book,
                "chapter": c.parsed.chapter,
                "verse": c.parsed.verse,
            },
        )
    return citations
