"""REST API routes for plans, practice content and session progress."""

from pathlib import Path

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ap_study_planner.analysis.materials import MaterialFile, build_material_text
from ap_study_planner.analysis.progress import SessionProgressTracker
from ap_study_planner.config import EngineConfig, get_settings
from ap_study_planner.errors import GoalValidationError
from ap_study_planner.models.content import QuestionSet, StudyContent
from ap_study_planner.models.plan import StudyPlan
from ap_study_planner.models.profile import LearnerProfile, LearningStyle
from ap_study_planner.models.session import SessionInsights, SessionRecord
from ap_study_planner.service import StudyPlanService

logger = structlog.get_logger()
router = APIRouter(prefix="/api")

_services: dict[Path, StudyPlanService] = {}


class PlanRequest(BaseModel):
    profile: LearnerProfile
    goals: list[str] | None = None
    notes: str = ""
    materials: list[MaterialFile] = Field(default_factory=list)


class ContentRequest(BaseModel):
    subject: str
    topic: str
    difficulty: str = "Intermediate"
    learning_style: LearningStyle = LearningStyle.VISUAL


class QuestionSetRequest(BaseModel):
    subject: str
    topic: str
    difficulty: str = "Intermediate"
    profile: LearnerProfile = Field(default_factory=LearnerProfile)


def get_service() -> StudyPlanService:
    """One service per history directory, built from current settings."""
    settings = get_settings()
    history_dir = settings.history_dir
    if history_dir not in _services:
        config = EngineConfig.from_settings(settings)
        _services[history_dir] = StudyPlanService(
            config,
            tracker=SessionProgressTracker(history_dir, max_records=config.session_history_limit),
        )
    return _services[history_dir]


@router.post("/plans")
async def create_plan(request: PlanRequest) -> StudyPlan:
    """Generate a personalized study plan."""
    raw_text = build_material_text(request.materials, request.notes)
    try:
        return await get_service().generate_plan(request.profile, request.goals, raw_text)
    except GoalValidationError as e:
        raise HTTPException(status_code=400, detail=e.user_message)


@router.post("/content")
async def create_content(request: ContentRequest) -> StudyContent:
    return await get_service().generate_content(
        request.subject, request.topic, request.difficulty, request.learning_style
    )


@router.post("/question-sets")
async def create_question_sets(request: QuestionSetRequest) -> list[QuestionSet]:
    return await get_service().generate_question_sets(
        request.subject, request.topic, request.difficulty, request.profile
    )


@router.post("/sessions")
async def record_session(session: SessionRecord) -> dict:
    """Record a finished study session."""
    service = get_service()
    service.record_session(session)
    return {"status": "recorded", "total_sessions": len(service.tracker.records(session.user_id))}


@router.get("/users/{user_id}/insights")
async def get_insights(user_id: str) -> SessionInsights:
    return get_service().insights(user_id)


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
