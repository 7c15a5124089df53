"""Signals mined from uploaded or typed study material."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ContentDifficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ContentInsight(BaseModel):
    """Structured view of free text, consumed by the topic synthesizer.

    An insight built from empty text has every collection empty and the
    neutral ``intermediate`` difficulty.
    """

    topics: list[str] = Field(default_factory=list)
    concepts: list[str] = Field(default_factory=list)
    difficulty: ContentDifficulty = ContentDifficulty.INTERMEDIATE
    focus_areas: list[str] = Field(default_factory=list)
    has_formulas: bool = False
    has_examples: bool = False
    has_definitions: bool = False
    content_length: int = 0

    @property
    def is_empty(self) -> bool:
        return self.content_length == 0
