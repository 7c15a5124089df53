"""Finished study session records and the insights derived from them."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SessionRecord(BaseModel):
    """Summary of one finished study session. Immutable once recorded."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    subject: str
    topic: str = ""
    difficulty: str = "Intermediate"
    started_at: datetime = Field(default_factory=datetime.now)
    ended_at: datetime | None = None
    duration_minutes: float = Field(default=0.0, ge=0)
    questions_answered: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    accuracy: float | None = Field(default=None, ge=0, le=100)
    stars_earned: int = Field(default=0, ge=0)
    concepts_mastered: tuple[str, ...] = ()
    areas_for_improvement: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _fill_accuracy(cls, data):
        if isinstance(data, dict) and data.get("accuracy") is None:
            answered = data.get("questions_answered") or 0
            correct = data.get("correct_answers") or 0
            data = dict(data)
            data["accuracy"] = round(correct / answered * 100, 1) if answered else 0.0
        return data


class StudyPatterns(BaseModel):
    average_session_minutes: float = 0.0
    average_questions_per_session: float = 0.0
    consistency_score: float = 0.0


class SessionInsights(BaseModel):
    has_data: bool = False
    total_sessions: int = 0
    average_accuracy: float = 0.0
    common_weak_areas: list[str] = Field(default_factory=list)
    preferred_difficulty: str | None = None
    study_patterns: StudyPatterns = Field(default_factory=StudyPatterns)
