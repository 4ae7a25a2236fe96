from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

TRIPLE_DELIMITER = "'''"
SINGLE_DELIMITER = "'"


class ParsedReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    book: str
    chapter: str
    verse: str


class Citation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["single", "triple"]
    raw_text: str
    parsed: ParsedReference
    start: int
    end: int


class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "reference"]
    content: str
    reference: Optional[ParsedReference] = None
    delimiter: Optional[Literal["single", "triple"]] = None
    start: int = 0
    end: int = 0

    def markup(self) -> str:
        if self.kind == "text":
            return self.content
        quote = TRIPLE_DELIMITER if self.delimiter == "triple" else SINGLE_DELIMITER
        return f"{quote}{self.content}{quote}"


class SegmentGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text-block", "triple-card"]
    segments: Tuple[Segment, ...]


class CandidateVerse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    book_code: str = Field(alias="bookCode")
    chapter: int | str
    verse: int | str | None = None
    text: str | None = None
    verse_id: int | None = None


class LessonParagraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    title: str = ""
    text: str
    references: List[CandidateVerse] | None = None


class AnnotatedSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    segment: Segment
    verse_text: str | None = None
