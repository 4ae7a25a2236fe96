from typing import List, Mapping, Optional, Sequence, Union

from scripture.events import Observer
from scripture.matcher import Candidate, find_verse_text
from scripture.models import AnnotatedSegment, LessonParagraph
from scripture.segmenter import parse_text_with_references


def annotate_text(
    text: str,
    candidates: Optional[Sequence[Candidate]] = None,
    observer: Optional[Observer] = None,
) -> List[AnnotatedSegment]:
    annotated = []
    for seg in parse_text_with_references(text, observer):
        verse_text = None
        if seg.reference is not None:
            verse_text = find_verse_text(seg.reference, candidates, observer)
        annotated.append(AnnotatedSegment(segment=seg, verse_text=verse_text))
    return annotated


def annotate_paragraph(
    paragraph: Union[LessonParagraph, Mapping],
    observer: Optional[Observer] = None,
) -> List[AnnotatedSegment]:
    if not isinstance(paragraph, LessonParagraph):
        paragraph = LessonParagraph.model_validate(paragraph)
    return annotate_text(paragraph.text, paragraph.references, observer)
