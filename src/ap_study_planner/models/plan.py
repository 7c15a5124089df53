"""Study plan models."""

import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

MAX_SUBJECTS = 4
MAX_TOPICS_PER_SUBJECT = 8
MAX_MILESTONES = 12
MAX_RECOMMENDATIONS = 8

MIN_DURATION_DAYS = 30
MAX_DURATION_DAYS = 120
MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 95


class TopicDifficulty(StrEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ResourceType(StrEnum):
    VIDEO = "video"
    ARTICLE = "article"
    INTERACTIVE = "interactive"
    PRACTICE = "practice"
    SIMULATION = "simulation"
    AUDIO = "audio"


class AssessmentType(StrEnum):
    QUIZ = "quiz"
    PROBLEM_SET = "problem_set"
    PROJECT = "project"
    FREE_RESPONSE = "free_response"
    PRESENTATION = "presentation"


class PlanSource(StrEnum):
    LOCAL = "local"
    REMOTE = "remote"


class Resource(BaseModel):
    type: ResourceType = ResourceType.ARTICLE
    title: str
    description: str = ""
    estimated_minutes: int = Field(default=20, gt=0)
    difficulty: str = "medium"


class Assessment(BaseModel):
    type: AssessmentType = AssessmentType.QUIZ
    title: str
    questions: int = Field(default=5, ge=1)
    estimated_minutes: int = Field(default=20, gt=0)
    passing_score: int = Field(default=75, ge=0, le=100)


class Topic(BaseModel):
    """A gradable unit of study within a subject."""

    name: str = Field(min_length=1)
    difficulty: TopicDifficulty = TopicDifficulty.INTERMEDIATE
    estimated_time_minutes: int = Field(default=45, gt=0)
    prerequisites: list[str] = Field(default_factory=list)
    learning_objectives: list[str] = Field(min_length=1)
    resources: list[Resource] = Field(default_factory=list)
    assessments: list[Assessment] = Field(default_factory=list)

    @model_validator(mode="after")
    def _drop_self_prerequisite(self) -> "Topic":
        # Prerequisites only reference other topics by name.
        self.prerequisites = [p for p in self.prerequisites if p != self.name]
        return self


class Subject(BaseModel):
    name: str = Field(min_length=1)
    priority: Priority = Priority.MEDIUM
    time_allocation_percent: int = Field(default=25, gt=0)
    topics: list[Topic] = Field(min_length=1, max_length=MAX_TOPICS_PER_SUBJECT)
    reasoning: str = ""


class Milestone(BaseModel):
    week: int = Field(ge=1)
    title: str
    description: str = ""
    success_criteria: list[str] = Field(min_length=1)
    rewards: list[str] = Field(default_factory=list)


class AdaptiveFeature(BaseModel):
    """Rule the study app applies while the plan is active."""

    trigger: str
    action: str
    description: str = ""
    enabled: bool = True


class StudyPlan(BaseModel):
    """A complete multi-week curriculum.

    Built fresh for every generation call; the caller owns persistence.
    """

    id: str = Field(default_factory=lambda: f"plan_{uuid.uuid4().hex[:12]}")
    created_at: datetime = Field(default_factory=datetime.now)
    source: PlanSource = PlanSource.LOCAL
    title: str
    description: str = ""
    duration_days: int = Field(ge=MIN_DURATION_DAYS, le=MAX_DURATION_DAYS)
    daily_time_commitment_minutes: int = Field(gt=0)
    difficulty_label: str
    subjects: list[Subject] = Field(min_length=1, max_length=MAX_SUBJECTS)
    milestones: list[Milestone] = Field(min_length=1, max_length=MAX_MILESTONES)
    adaptive_features: list[AdaptiveFeature] = Field(default_factory=list)
    personalized_recommendations: list[str] = Field(
        default_factory=list, max_length=MAX_RECOMMENDATIONS
    )
    estimated_outcome: str = ""
    confidence: int = Field(ge=MIN_CONFIDENCE, le=MAX_CONFIDENCE)

    @property
    def subject_names(self) -> list[str]:
        return [s.name for s in self.subjects]

    @property
    def total_topics(self) -> int:
        return sum(len(s.topics) for s in self.subjects)
