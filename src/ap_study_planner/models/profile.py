"""Learner profile model driving plan personalization."""

from enum import StrEnum

from pydantic import BaseModel, Field


class LearningStyle(StrEnum):
    """Preferred way of taking in new material."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    READING = "reading"


class PreferredDifficulty(StrEnum):
    """Difficulty the learner asked for; ``adaptive`` lets the engine decide."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    ADAPTIVE = "adaptive"


class RecentPerformance(BaseModel):
    """Rolling performance indicators (0-100 each)."""

    accuracy: float = Field(default=75.0, ge=0, le=100)
    speed: float = Field(default=50.0, ge=0, le=100)
    consistency: float = Field(default=75.0, ge=0, le=100)
    engagement: float = Field(default=50.0, ge=0, le=100)


class LearnerProfile(BaseModel):
    name: str = ""
    level: int = Field(default=1, ge=1)
    total_stars: int = Field(default=0, ge=0)
    current_streak: int = Field(default=0, ge=0)  # days
    study_time_minutes: float = Field(default=0.0, ge=0)
    completed_lessons: int = Field(default=0, ge=0)
    weak_areas: list[str] = Field(default_factory=list)
    strong_areas: list[str] = Field(default_factory=list)
    learning_style: LearningStyle = LearningStyle.VISUAL
    preferred_difficulty: PreferredDifficulty = PreferredDifficulty.ADAPTIVE
    study_goals: list[str] = Field(default_factory=list)
    daily_time_available_minutes: int = Field(default=60, gt=0)
    recent_performance: RecentPerformance | None = None
