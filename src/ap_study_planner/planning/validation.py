"""Input normalization and plan structure validation/repair."""

from collections.abc import Iterable
from typing import Any

import structlog

from ap_study_planner.errors import GoalValidationError, PlanValidationError
from ap_study_planner.models.plan import (
    MAX_CONFIDENCE,
    MAX_DURATION_DAYS,
    MAX_MILESTONES,
    MAX_RECOMMENDATIONS,
    MAX_SUBJECTS,
    MAX_TOPICS_PER_SUBJECT,
    MIN_CONFIDENCE,
    MIN_DURATION_DAYS,
)
from ap_study_planner.models.profile import LearnerProfile

logger = structlog.get_logger()

REQUIRED_PLAN_FIELDS = (
    "title",
    "description",
    "duration_days",
    "difficulty_label",
    "subjects",
    "milestones",
    "personalized_recommendations",
    "estimated_outcome",
    "confidence",
)
DEFAULT_DURATION_DAYS = 60


def clean_phrases(phrases: Iterable[str] | None) -> list[str]:
    """Strip phrases and drop blanks, keeping order."""
    return [p.strip() for p in phrases or [] if p and p.strip()]


def validate_goals(goals: Iterable[str] | None) -> list[str]:
    """Return the cleaned goals or raise GoalValidationError when none remain."""
    cleaned = clean_phrases(goals)
    if not cleaned:
        raise GoalValidationError("Please add at least one learning goal before generating a plan.")
    return cleaned


def normalize_profile(profile: LearnerProfile) -> LearnerProfile:
    """Copy of the profile with blank goal/area phrases removed."""
    return profile.model_copy(
        update={
            "weak_areas": clean_phrases(profile.weak_areas),
            "strong_areas": clean_phrases(profile.strong_areas),
            "study_goals": clean_phrases(profile.study_goals),
        }
    )


def validate_plan_structure(data: Any) -> None:
    """Check the hard plan contract.

    Raises:
        PlanValidationError: If required fields are missing, subjects or
            milestones are not non-empty lists, or confidence is not a number
            in [0, 100].
    """
    if not isinstance(data, dict):
        raise PlanValidationError("Plan must be a JSON object")

    missing = [name for name in REQUIRED_PLAN_FIELDS if name not in data]
    if missing:
        raise PlanValidationError(f"Missing required field(s): {', '.join(missing)}")

    if not isinstance(data["subjects"], list) or not data["subjects"]:
        raise PlanValidationError("subjects must be a non-empty array")
    if not isinstance(data["milestones"], list) or not data["milestones"]:
        raise PlanValidationError("milestones must be a non-empty array")

    confidence = data["confidence"]
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise PlanValidationError("confidence must be a number")
    if not 0 <= confidence <= 100:
        raise PlanValidationError("confidence must be between 0 and 100")


def _default_topic(subject_name: str) -> dict[str, Any]:
    return {
        "name": f"{subject_name} Review",
        "difficulty": "Intermediate",
        "estimated_time_minutes": 45,
        "learning_objectives": [f"Review the key concepts of {subject_name}"],
    }


def _repair_topic(topic: Any, subject_name: str) -> dict[str, Any] | None:
    if not isinstance(topic, dict) or not str(topic.get("name") or "").strip():
        return None
    objectives = topic.get("learning_objectives")
    if not isinstance(objectives, list) or not objectives:
        topic["learning_objectives"] = [f"Understand {topic['name']}"]
    for key in ("prerequisites", "resources", "assessments"):
        if not isinstance(topic.get(key), list):
            topic[key] = []
    return topic


def repair_plan_data(data: dict[str, Any]) -> dict[str, Any]:
    """Repair loose plan data in place and return it.

    Subjects without a usable topics array get a single default topic; caps
    and clamps of the plan contract are applied. Repairs are logged, never
    raised.
    """
    subjects = []
    for index, subject in enumerate(data.get("subjects", [])[:MAX_SUBJECTS]):
        if not isinstance(subject, dict):
            logger.debug("plan_repair_subject_dropped", index=index)
            continue
        name = str(subject.get("name") or f"Subject {index + 1}")
        subject["name"] = name
        topics = subject.get("topics")
        repaired = []
        if isinstance(topics, list):
            repaired = [t for t in (_repair_topic(t, name) for t in topics) if t is not None]
        if not repaired:
            logger.debug("plan_repair_default_topic", subject=name)
            repaired = [_default_topic(name)]
        subject["topics"] = repaired[:MAX_TOPICS_PER_SUBJECT]
        subjects.append(subject)
    if not subjects:
        raise PlanValidationError("subjects must contain at least one subject object")
    data["subjects"] = subjects

    data["milestones"] = data["milestones"][:MAX_MILESTONES]
    recommendations = data.get("personalized_recommendations")
    data["personalized_recommendations"] = (
        recommendations[:MAX_RECOMMENDATIONS] if isinstance(recommendations, list) else []
    )
    duration = data["duration_days"]
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        logger.debug("plan_repair_duration", value=duration)
        duration = DEFAULT_DURATION_DAYS
    data["duration_days"] = max(MIN_DURATION_DAYS, min(MAX_DURATION_DAYS, int(duration)))
    data["confidence"] = max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, round(data["confidence"])))
    return data
