"""Per-subject topic synthesis personalized by profile and content insight."""

import structlog

from ap_study_planner.models.insight import ContentDifficulty, ContentInsight
from ap_study_planner.models.plan import (
    MAX_TOPICS_PER_SUBJECT,
    Assessment,
    AssessmentType,
    Resource,
    ResourceType,
    Topic,
    TopicDifficulty,
)
from ap_study_planner.models.profile import LearnerProfile, LearningStyle
from ap_study_planner.planning.catalog import (
    BASE_ASSESSMENTS,
    BASE_RESOURCES,
    STYLE_ASSESSMENTS,
    STYLE_OBJECTIVES,
    STYLE_RESOURCES,
    TOPIC_CATALOG,
    generic_catalog,
)

logger = structlog.get_logger()

MAX_OBJECTIVES = 4
MATERIALS_TAG = "(From Your Materials)"
MATERIALS_TOPIC_MINUTES = 45

_INSIGHT_TO_TOPIC_DIFFICULTY = {
    ContentDifficulty.BEGINNER: TopicDifficulty.BEGINNER,
    ContentDifficulty.INTERMEDIATE: TopicDifficulty.INTERMEDIATE,
    ContentDifficulty.ADVANCED: TopicDifficulty.ADVANCED,
}


def _contains_any(name: str, phrases: list[str]) -> bool:
    lowered = name.lower()
    return any(p.strip() and p.strip().lower() in lowered for p in phrases)


def _overlaps(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def topic_difficulty(name: str, profile: LearnerProfile, insight: ContentInsight) -> TopicDifficulty:
    """Derive a topic's difficulty.

    Weak-area matches downgrade, strong-area matches then upgrade (so a topic
    matching both ends up Advanced). Beginner material forces Beginner;
    advanced material lifts anything that is not already Beginner.
    """
    difficulty = TopicDifficulty.INTERMEDIATE
    if _contains_any(name, profile.weak_areas):
        difficulty = TopicDifficulty.BEGINNER
    if _contains_any(name, profile.strong_areas):
        difficulty = TopicDifficulty.ADVANCED

    if insight.difficulty == ContentDifficulty.ADVANCED and difficulty != TopicDifficulty.BEGINNER:
        difficulty = TopicDifficulty.ADVANCED
    if insight.difficulty == ContentDifficulty.BEGINNER:
        difficulty = TopicDifficulty.BEGINNER
    return difficulty


def estimate_minutes(profile: LearnerProfile) -> int:
    """Per-topic session length from the daily budget and learning style."""
    minutes = 45
    if profile.daily_time_available_minutes < 30:
        minutes = 25
    elif profile.daily_time_available_minutes > 90:
        minutes = 60

    if profile.learning_style == LearningStyle.KINESTHETIC:
        minutes += 15
    elif profile.learning_style == LearningStyle.READING:
        minutes -= 10
    return minutes


def learning_objectives(name: str, style: LearningStyle, insight: ContentInsight) -> list[str]:
    objectives = [
        f"Master the core concepts of {name} at AP exam level",
        STYLE_OBJECTIVES[style].format(topic=name),
    ]
    for area in insight.focus_areas:
        if _overlaps(area, name):
            objectives.append(f"Focus on {area}")
    return objectives[:MAX_OBJECTIVES]


def build_resources(name: str, style: LearningStyle) -> list[Resource]:
    return [
        Resource(
            type=kind,
            title=title.format(topic=name),
            description=description.format(topic=name),
            estimated_minutes=minutes,
        )
        for kind, title, description, minutes in BASE_RESOURCES + STYLE_RESOURCES[style]
    ]


def build_assessments(name: str, style: LearningStyle) -> list[Assessment]:
    return [
        Assessment(
            type=kind,
            title=title.format(topic=name),
            questions=questions,
            estimated_minutes=minutes,
            passing_score=passing,
        )
        for kind, title, questions, minutes, passing in BASE_ASSESSMENTS + STYLE_ASSESSMENTS[style]
    ]


def _materials_topic(name: str, subject: str, insight: ContentInsight) -> Topic:
    return Topic(
        name=f"{name} {MATERIALS_TAG}",
        difficulty=_INSIGHT_TO_TOPIC_DIFFICULTY[insight.difficulty],
        estimated_time_minutes=MATERIALS_TOPIC_MINUTES,
        learning_objectives=[
            f"Review {name} from your uploaded materials",
            f"Connect {name} to {subject} exam skills",
        ],
        resources=[
            Resource(
                type=ResourceType.ARTICLE,
                title=f"Your notes: {name}",
                description="Material you provided",
                estimated_minutes=MATERIALS_TOPIC_MINUTES,
            )
        ],
        assessments=[
            Assessment(type=AssessmentType.QUIZ, title=f"{name} Self-Check", questions=5)
        ],
    )


def synthesize_topics(
    subject: str,
    profile: LearnerProfile,
    insight: ContentInsight,
) -> list[Topic]:
    """Build the ordered topic list for one subject.

    Args:
        subject: Subject name (catalog or free-form).
        profile: Learner profile.
        insight: Insight mined from the learner's material (may be empty).

    Returns:
        Catalog topics followed by topics discovered in the material,
        at most MAX_TOPICS_PER_SUBJECT.
    """
    catalog = TOPIC_CATALOG.get(subject) or generic_catalog(subject)
    style = profile.learning_style
    minutes = estimate_minutes(profile)

    topics: list[Topic] = []
    previous: str | None = None
    for name in catalog:
        topics.append(
            Topic(
                name=name,
                difficulty=topic_difficulty(name, profile, insight),
                estimated_time_minutes=minutes,
                prerequisites=[previous] if previous else [],
                learning_objectives=learning_objectives(name, style, insight),
                resources=build_resources(name, style),
                assessments=build_assessments(name, style),
            )
        )
        previous = name

    for name in insight.topics:
        if any(_overlaps(name, existing.name) for existing in topics):
            continue
        topics.append(_materials_topic(name, subject, insight))

    logger.debug("topics_synthesized", subject=subject, count=len(topics))
    return topics[:MAX_TOPICS_PER_SUBJECT]
