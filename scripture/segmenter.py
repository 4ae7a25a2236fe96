from typing import List, Optional, Sequence

from scripture.events import Observer
from scripture.extractor import extract_references
from scripture.models import Citation, Segment, SegmentGroup


def _text_segment(text: str, start: int, end: int) -> Segment:
    return Segment(kind="text", content=text[start:end], start=start, end=end)


def segment(text: str, citations: Sequence[Citation]) -> List[Segment]:
    """
    citations: ordered by start, non-overlapping (as extract_references returns them)
    """
    if not text:
        return []
    if not citations:
        return [_text_segment(text, 0, len(text))]

    segments: List[Segment] = []
    cursor = 0
    for c in citations:
        if c.start > cursor:
            segments.append(_text_segment(text, cursor, c.start))
        segments.append(
            Segment(
                kind="reference",
                content=c.raw_text,
                reference=c.parsed,
                delimiter=c.kind,
                start=c.start,
                end=c.end,
            )
        )
        cursor = c.end

    if cursor < len(text):
        segments.append(_text_segment(text, cursor, len(text)))
    return segments


def parse_text_with_references(text: str, observer: Optional[Observer] = None) -> List[Segment]:
    return segment(text, extract_references(text, observer))


def group_segments(segments: Sequence[Segment]) -> List[SegmentGroup]:
    """
    Text and single-quoted references flow together in a text block;
    each triple-quoted reference stands alone as a card.
    """
    groups: List[SegmentGroup] = []
    block: List[Segment] = []

    for seg in segments:
        if seg.kind == "reference" and seg.delimiter == "triple":
            if block:
                groups.append(SegmentGroup(kind="text-block", segments=tuple(block)))
                block = []
            groups.append(SegmentGroup(kind="triple-card", segments=(seg,)))
        else:
            block.append(seg)

    if block:
        groups.append(SegmentGroup(kind="text-block", segments=tuple(block)))
    return groups
