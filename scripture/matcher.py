import re
from typing import Mapping, Optional, Sequence, Union

from scripture.events import Observer, notify
from scripture.models import CandidateVerse, ParsedReference

Candidate = Union[CandidateVerse, Mapping]


def normalize_book(name: str) -> str:
    return re.sub(r"\s+", "", (name or "").lower())


def _as_candidate(candidate: Candidate) -> CandidateVerse:
    if isinstance(candidate, CandidateVerse):
        return candidate
    return CandidateVerse.model_validate(candidate)


def verse_matches(ref: ParsedReference, candidate: CandidateVerse) -> bool:
    if normalize_book(candidate.book_code) != normalize_book(ref.book):
        return False
    if str(candidate.chapter) != str(ref.chapter):
        return False
    # prefix rule: candidate "1" also matches "1-3" (and, knowingly, "10-12")
    verse = "" if candidate.verse is None else str(candidate.verse)
    if not verse:
        return False
    return verse == ref.verse or ref.verse.startswith(verse)


def find_verse_text(
    ref: ParsedReference,
    candidates: Optional[Sequence[Candidate]],
    observer: Optional[Observer] = None,
) -> Optional[str]:
    payload = {"book": ref.book, "chapter": ref.chapter, "verse": ref.verse}
    for raw in candidates or []:
        candidate = _as_candidate(raw)
        if verse_matches(ref, candidate):
            notify(observer, "verse_matched", {**payload, "verse_id": candidate.verse_id})
            return candidate.text or None

    notify(observer, "verse_unmatched", payload)
    return None
