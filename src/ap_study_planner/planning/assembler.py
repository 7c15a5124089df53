"""Deterministic study plan assembly from a learner profile."""

import math
from collections.abc import Sequence

import structlog

from ap_study_planner.analysis.insight import analyze_content
from ap_study_planner.models.insight import ContentInsight
from ap_study_planner.models.plan import (
    MAX_CONFIDENCE,
    MAX_DURATION_DAYS,
    MAX_MILESTONES,
    MAX_RECOMMENDATIONS,
    MIN_CONFIDENCE,
    MIN_DURATION_DAYS,
    AdaptiveFeature,
    Milestone,
    PlanSource,
    Priority,
    StudyPlan,
    Subject,
)
from ap_study_planner.models.profile import LearnerProfile, LearningStyle, PreferredDifficulty
from ap_study_planner.planning.classifier import classify_subjects
from ap_study_planner.planning.topics import synthesize_topics
from ap_study_planner.planning.validation import clean_phrases, normalize_profile

logger = structlog.get_logger()

TIME_ALLOCATION: dict[Priority, int] = {
    Priority.HIGH: 35,
    Priority.MEDIUM: 25,
    Priority.LOW: 20,
}

PRIORITY_REASONS: dict[Priority, str] = {
    Priority.HIGH: "It is high priority because it matches one of your weak areas and needs focused improvement.",
    Priority.MEDIUM: "It is medium priority to keep steady progress alongside your other subjects.",
    Priority.LOW: "It is lower priority because it is one of your strengths, so sessions focus on maintenance.",
}

MILESTONE_CADENCE_WEEKS = 2

# (last week of phase, title, description, success criteria)
MILESTONE_PHASES: list[tuple[int, str, str, list[str]]] = [
    (
        2,
        "Foundation Building",
        "Establish core vocabulary and fundamentals in every subject.",
        [
            "Complete the first unit of each subject",
            "Score 70%+ on knowledge checks",
            "Study on at least 5 days each week",
        ],
    ),
    (
        6,
        "Skill Development",
        "Deepen understanding and practice AP-style multiple-choice questions.",
        [
            "Finish half of the planned topics",
            "Score 75%+ on AP-style problem sets",
            "Review every missed question within 48 hours",
        ],
    ),
    (
        10,
        "Application Mastery",
        "Apply concepts to free-response questions and mixed problem sets.",
        [
            "Complete two timed free-response sets per subject",
            "Score 80%+ on mixed-topic quizzes",
            "Explain each weak-area topic without notes",
        ],
    ),
    (
        MAX_MILESTONES,
        "Exam Readiness",
        "Simulate exam conditions and polish remaining weak spots.",
        [
            "Complete a full-length practice exam per subject",
            "Reach a projected score of 4 or higher",
            "Finish a final review of all flagged topics",
        ],
    ),
]

STYLE_RECOMMENDATIONS: dict[LearningStyle, list[str]] = {
    LearningStyle.VISUAL: [
        "Turn each unit into a concept map or diagram before practicing",
        "Use color-coded notes and graphs to connect related ideas",
    ],
    LearningStyle.AUDITORY: [
        "Explain each topic out loud or teach it to a study partner",
        "Listen to recorded lectures and summarize them verbally",
    ],
    LearningStyle.KINESTHETIC: [
        "Work through hands-on problems and simulations for every topic",
        "Take short active breaks between study blocks",
    ],
    LearningStyle.READING: [
        "Write summary notes after each reading session",
        "Practice written free-response answers regularly",
    ],
}

ADAPTIVE_FEATURES: list[tuple[str, str, str]] = [
    (
        "Low performance (< 70% accuracy)",
        "Reduce difficulty and add targeted practice",
        "Automatically eases content when you are struggling",
    ),
    (
        "High performance (> 90% accuracy)",
        "Increase difficulty and unlock advanced topics",
        "Keeps strong performers challenged",
    ),
    (
        "Inconsistent study pattern",
        "Send reminders and rebalance the schedule",
        "Helps maintain a consistent daily routine",
    ),
    (
        "Low engagement detected",
        "Switch to your preferred learning style and add rewards",
        "Boosts motivation with personalized content",
    ),
]


def _overlaps(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def subject_priority(subject: str, profile: LearnerProfile) -> Priority:
    """High for weak areas, low for strengths; weakness wins when both match."""
    if any(_overlaps(subject, area) for area in profile.weak_areas):
        return Priority.HIGH
    if any(_overlaps(subject, area) for area in profile.strong_areas):
        return Priority.LOW
    return Priority.MEDIUM


def subject_reasoning(subject: str, priority: Priority, insight: ContentInsight) -> str:
    reasoning = f"{subject} is included in your plan to support your AP goals. {PRIORITY_REASONS[priority]}"
    covered = [t for t in insight.topics if _overlaps(t, subject)]
    if covered:
        reasoning += f" Your uploaded materials also cover: {', '.join(covered)}."
    return reasoning


def calculate_duration(subject_count: int, profile: LearnerProfile) -> int:
    days = 60 + 20 * (subject_count - 1)
    if profile.level < 3:
        days += 30
    elif profile.level > 7:
        days -= 20
    if profile.daily_time_available_minutes < 30:
        days += 40
    elif profile.daily_time_available_minutes > 90:
        days -= 20
    days += 10 * len(profile.weak_areas)
    return max(MIN_DURATION_DAYS, min(MAX_DURATION_DAYS, days))


def difficulty_label(profile: LearnerProfile) -> str:
    if profile.preferred_difficulty != PreferredDifficulty.ADAPTIVE:
        return profile.preferred_difficulty.value
    score = (
        profile.level * 10
        + profile.total_stars / 10
        + len(profile.strong_areas) * 5
        - len(profile.weak_areas) * 5
    )
    if score < 50:
        return "AP Supportive"
    if score < 100:
        return "AP Balanced"
    return "AP Challenging"


def build_milestones(duration_days: int) -> list[Milestone]:
    """One milestone every two weeks, never past week 12."""
    last_week = min(math.ceil(duration_days / 7), MAX_MILESTONES)
    weeks = list(range(1, last_week + 1, MILESTONE_CADENCE_WEEKS))

    milestones = []
    for week in weeks:
        _, title, description, criteria = next(
            phase for phase in MILESTONE_PHASES if week <= phase[0]
        )
        rewards = [f"{week * 10} bonus stars", "Progress badge"]
        if week == weeks[-1]:
            rewards.append("Special achievement unlock")
        milestones.append(
            Milestone(
                week=week,
                title=title,
                description=f"Week {week}: {description}",
                success_criteria=list(criteria),
                rewards=rewards,
            )
        )
    return milestones


def build_recommendations(profile: LearnerProfile, insight: ContentInsight) -> list[str]:
    recommendations = list(STYLE_RECOMMENDATIONS[profile.learning_style])

    if profile.weak_areas:
        recommendations.append(
            f"Start each session with a short review of {', '.join(profile.weak_areas[:3])}"
        )
        recommendations.append("Schedule extra practice on weak areas before moving to new units")

    daily = profile.daily_time_available_minutes
    if daily < 45:
        recommendations.append("Use focused 25-minute Pomodoro sessions to make the most of limited time")
        recommendations.append("Prioritize high-priority subjects on busy days")
    elif daily > 90:
        recommendations.append("Split long study blocks into sessions with short breaks")
        recommendations.append("Use the extra time for full-length AP practice exams")

    if insight.has_formulas:
        recommendations.append("Build a formula sheet from your materials and review it daily")
    if insight.has_examples:
        recommendations.append("Rework the examples in your materials without looking at the solutions")

    performance = profile.recent_performance
    if performance is not None:
        if performance.accuracy < 70:
            recommendations.append("Slow down and review the explanation for every missed question")
        if performance.consistency < 70:
            recommendations.append("Study at the same time each day to build a consistent routine")

    return recommendations[:MAX_RECOMMENDATIONS]


def predict_outcome(subject_names: Sequence[str], profile: LearnerProfile) -> str:
    outcome = f"By following this plan you are expected to build strong mastery in {', '.join(subject_names)}"
    if profile.weak_areas:
        outcome += f" and significantly improve in {', '.join(profile.weak_areas)}"
    return (
        f"{outcome}. Practice tailored to your {profile.learning_style.value} learning style "
        f"and current level {profile.level} positions you for AP scores of 4–5."
    )


def calculate_confidence(profile: LearnerProfile) -> int:
    confidence = 70.0
    confidence += min(profile.level * 3, 15)
    confidence += min(profile.total_stars / 50, 10)
    confidence += min(profile.current_streak / 2, 10)
    confidence -= len(profile.weak_areas) * 3
    confidence += len(profile.strong_areas) * 2
    if profile.daily_time_available_minutes >= 60:
        confidence += 5
    elif profile.daily_time_available_minutes < 30:
        confidence -= 5
    return int(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, round(confidence))))


class PlanAssembler:
    """Builds a complete StudyPlan without any network access.

    Never raises for a well-formed profile: empty goal and area lists fall
    through to the default subjects and default recommendation branches.
    """

    def assemble(
        self,
        profile: LearnerProfile,
        goals: Sequence[str] | None = None,
        raw_text: str = "",
    ) -> StudyPlan:
        """Assemble a study plan.

        Args:
            profile: Learner profile.
            goals: Learning goals; the profile's study goals when omitted or empty.
            raw_text: Optional study material text for content insight.

        Returns:
            A fresh StudyPlan owned by the caller.
        """
        profile = normalize_profile(profile)
        goals = clean_phrases(goals) or profile.study_goals
        insight = analyze_content(raw_text)

        subjects = []
        for name in classify_subjects(goals, profile.weak_areas, profile.strong_areas):
            priority = subject_priority(name, profile)
            subjects.append(
                Subject(
                    name=name,
                    priority=priority,
                    time_allocation_percent=TIME_ALLOCATION[priority],
                    topics=synthesize_topics(name, profile, insight),
                    reasoning=subject_reasoning(name, priority, insight),
                )
            )

        subject_names = [s.name for s in subjects]
        duration = calculate_duration(len(subjects), profile)

        plan = StudyPlan(
            source=PlanSource.LOCAL,
            title=f"{profile.name}'s AP Success Plan" if profile.name else "Your AP Success Plan",
            description=(
                f"A {duration}-day personalized AP study plan covering {', '.join(subject_names)}, "
                f"built around your {profile.learning_style.value} learning style."
            ),
            duration_days=duration,
            daily_time_commitment_minutes=profile.daily_time_available_minutes,
            difficulty_label=difficulty_label(profile),
            subjects=subjects,
            milestones=build_milestones(duration),
            adaptive_features=[
                AdaptiveFeature(trigger=trigger, action=action, description=description)
                for trigger, action, description in ADAPTIVE_FEATURES
            ],
            personalized_recommendations=build_recommendations(profile, insight),
            estimated_outcome=predict_outcome(subject_names, profile),
            confidence=calculate_confidence(profile),
        )

        logger.info(
            "study_plan_assembled",
            subjects=subject_names,
            duration_days=plan.duration_days,
            confidence=plan.confidence,
            total_topics=plan.total_topics,
        )
        return plan
