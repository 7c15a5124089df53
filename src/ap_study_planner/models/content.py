"""Study content and question set models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class QuestionType(StrEnum):
    MULTIPLE_CHOICE = "multiple_choice"
    SHORT_ANSWER = "short_answer"
    ESSAY = "essay"
    PROBLEM_SOLVING = "problem_solving"


class StudyContent(BaseModel):
    """A single practice item rendered by the study session screen."""

    question: str
    type: QuestionType = QuestionType.MULTIPLE_CHOICE
    options: list[str] = Field(default_factory=list)
    correct_answer: int | str = 0  # option index for multiple choice
    explanation: str = ""
    hint: str = ""
    points: int = 15
    concepts: list[str] = Field(default_factory=list)
    ap_skills: list[str] = Field(default_factory=list)
    visual_aid: str | None = None
    audio_explanation: str | None = None
    interactive_element: str | None = None
    common_mistakes: list[str] = Field(default_factory=list)


class Question(BaseModel):
    question: str
    type: QuestionType
    options: list[str] = Field(default_factory=list)
    correct_answer: int | str = ""
    explanation: str = ""
    hint: str = ""
    points: int = 15


class QuestionSet(BaseModel):
    title: str
    description: str = ""
    difficulty: str
    questions: list[Question] = Field(default_factory=list)
