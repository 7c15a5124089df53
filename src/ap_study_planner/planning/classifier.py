"""Keyword classification of free-text goals into AP subjects."""

import re
from collections.abc import Iterable

import structlog

from ap_study_planner.models.plan import MAX_SUBJECTS

logger = structlog.get_logger()

# Ordered: when more than MAX_SUBJECTS match, earlier entries win.
# Keywords match at a word start; generic keywords exclude the phrases that
# name a more specific course.
SUBJECT_KEYWORDS: list[tuple[str, str]] = [
    (r"calculus\s*bc", "AP Calculus BC"),
    (r"calculus(?!\s*bc)", "AP Calculus AB"),
    ("derivative", "AP Calculus AB"),
    ("integral", "AP Calculus AB"),
    ("statistics", "AP Statistics"),
    ("probability", "AP Statistics"),
    (r"physics\s*2", "AP Physics 2"),
    (r"physics(?!\s*2)", "AP Physics 1"),
    ("kinematics", "AP Physics 1"),
    ("chemistry", "AP Chemistry"),
    ("stoichiometry", "AP Chemistry"),
    ("biology", "AP Biology"),
    ("genetics", "AP Biology"),
    ("environmental", "AP Environmental Science"),
    ("computer science", "AP Computer Science A"),
    ("programming", "AP Computer Science A"),
    ("java", "AP Computer Science A"),
    ("coding", "AP Computer Science A"),
    ("world history", "AP World History"),
    ("us history", "AP US History"),
    ("american history", "AP US History"),
    ("apush", "AP US History"),
    ("government", "AP US Government"),
    ("civics", "AP US Government"),
    ("macroeconomics", "AP Macroeconomics"),
    ("microeconomics", "AP Microeconomics"),
    ("economics", "AP Macroeconomics"),
    ("psychology", "AP Psychology"),
    ("literature", "AP English Literature"),
    ("poetry", "AP English Literature"),
    (r"english(?!\s*lit)", "AP English Language"),
    ("rhetoric", "AP English Language"),
    ("essay", "AP English Language"),
    ("writing", "AP English Language"),
]

_KEYWORD_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(rf"\b{keyword}"), subject) for keyword, subject in SUBJECT_KEYWORDS
]

DEFAULT_SUBJECTS: list[str] = ["AP Calculus AB", "AP Biology", "AP English Language"]


def classify_subjects(
    goals: Iterable[str],
    weak_areas: Iterable[str],
    strong_areas: Iterable[str],
) -> list[str]:
    """Map goals and weak/strong areas to at most four AP subjects.

    Args:
        goals: Free-text learning goals.
        weak_areas: Areas the learner struggles with.
        strong_areas: Areas the learner is confident in.

    Returns:
        Canonical subject names in keyword-table order, or the default
        subjects when no keyword matched.
    """
    blob = " ".join([*goals, *weak_areas, *strong_areas]).lower()

    matched: list[str] = []
    for pattern, subject in _KEYWORD_PATTERNS:
        if subject not in matched and pattern.search(blob):
            matched.append(subject)

    if not matched:
        logger.debug("subject_classification_default", defaults=DEFAULT_SUBJECTS)
        return list(DEFAULT_SUBJECTS)

    return matched[:MAX_SUBJECTS]
