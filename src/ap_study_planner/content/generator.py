"""Template-based study content and question set generation."""

import random
from collections.abc import Callable, Sequence
from typing import Any

import structlog

from ap_study_planner.content.rewrite import rewrite_for_difficulty, rewrite_for_style
from ap_study_planner.content.templates import (
    AP_SKILLS,
    COMMON_MISTAKES,
    GENERIC_TEMPLATE,
    QUESTION_POOLS,
    QUESTION_SET_CATEGORIES,
    QUESTION_TEMPLATES,
    QUESTIONS_PER_SET,
    SUBJECT_CONCEPTS,
)
from ap_study_planner.models.content import Question, QuestionSet, QuestionType, StudyContent
from ap_study_planner.models.profile import LearnerProfile, LearningStyle

logger = structlog.get_logger()

Selector = Callable[[Sequence[Any]], Any]

POINTS: dict[str, int] = {"Beginner": 10, "Intermediate": 15, "Advanced": 22, "Expert": 30}
DEFAULT_POINTS = 15

HINT_BASES: dict[str, str] = {
    "Beginner": "Start by recalling the basic definition involved.",
    "Advanced": "Consider how several concepts interact before committing to an answer.",
}
DEFAULT_HINT = "Eliminate the options that contradict the key principle."

STYLE_HINTS: dict[LearningStyle, str] = {
    LearningStyle.VISUAL: "Try sketching a quick diagram.",
    LearningStyle.AUDITORY: "Try talking through the problem out loud.",
    LearningStyle.KINESTHETIC: "Try working a concrete example by hand.",
    LearningStyle.READING: "Re-read the question and underline the key terms.",
}


def points_for(difficulty: str) -> int:
    return POINTS.get(difficulty, DEFAULT_POINTS)


def build_hint(difficulty: str, style: LearningStyle) -> str:
    return f"{HINT_BASES.get(difficulty, DEFAULT_HINT)} {STYLE_HINTS[LearningStyle(style)]}"


def _fill(text: str, subject: str, topic: str) -> str:
    return text.replace("{topic}", topic).replace("{subject}", subject)


def _fill_answer(answer: int | str, subject: str, topic: str) -> int | str:
    return _fill(answer, subject, topic) if isinstance(answer, str) else answer


class ContentGenerator:
    """Generates practice content from static templates.

    Args:
        selector: Picks one template from a sequence. Defaults to
            ``random.choice``; inject a fixed selector to pin output.
    """

    def __init__(self, selector: Selector | None = None):
        self.selector: Selector = selector or random.choice

    def generate_content(
        self,
        subject: str,
        topic: str,
        difficulty: str,
        learning_style: LearningStyle | str,
    ) -> StudyContent:
        """Generate one study content item.

        Args:
            subject: AP subject name; unknown subjects use a generic template.
            topic: Topic the item is about.
            difficulty: Topic difficulty tier (Beginner..Expert).
            learning_style: Learner's preferred style.

        Returns:
            StudyContent personalized for difficulty and style.
        """
        style = LearningStyle(learning_style)
        templates = QUESTION_TEMPLATES.get(subject) or [GENERIC_TEMPLATE]
        template = self.selector(templates)

        question = rewrite_for_difficulty(_fill(template["question"], subject, topic), difficulty)
        options = [
            rewrite_for_difficulty(_fill(option, subject, topic), difficulty)
            for option in template.get("options", [])
        ]

        content = StudyContent(
            question=question,
            type=QuestionType.MULTIPLE_CHOICE if options else QuestionType.SHORT_ANSWER,
            options=options,
            correct_answer=template["correct_answer"],
            explanation=rewrite_for_style(_fill(template["explanation"], subject, topic), style),
            hint=build_hint(difficulty, style),
            points=points_for(difficulty),
            concepts=self._concepts(subject, topic),
            ap_skills=list(AP_SKILLS.get(subject, ["Concept application", "Analysis", "Communication"])),
            common_mistakes=self._common_mistakes(subject, topic),
        )
        if style == LearningStyle.VISUAL:
            content.visual_aid = f"Annotated diagram summarizing {topic}"
        elif style == LearningStyle.AUDITORY:
            content.audio_explanation = f"Narrated walkthrough of {topic}"
        elif style == LearningStyle.KINESTHETIC:
            content.interactive_element = f"Drag-and-drop model of {topic}"

        logger.debug("content_generated", subject=subject, topic=topic, difficulty=difficulty)
        return content

    def generate_question_sets(
        self,
        subject: str,
        topic: str,
        difficulty: str,
        profile: LearnerProfile,
    ) -> list[QuestionSet]:
        """Generate one question set per fixed category, QUESTIONS_PER_SET questions each."""
        style = profile.learning_style
        question_sets = []
        for title, description, question_type in QUESTION_SET_CATEGORIES:
            pool = QUESTION_POOLS[question_type]
            questions = []
            for index in range(QUESTIONS_PER_SET):
                template = pool[index % len(pool)]
                questions.append(
                    Question(
                        question=rewrite_for_difficulty(
                            _fill(template["question"], subject, topic), difficulty
                        ),
                        type=template.get("type", question_type),
                        options=[
                            rewrite_for_difficulty(_fill(option, subject, topic), difficulty)
                            for option in template.get("options", [])
                        ],
                        correct_answer=_fill_answer(template["correct_answer"], subject, topic),
                        explanation=rewrite_for_style(
                            _fill(template["explanation"], subject, topic), style
                        ),
                        hint=build_hint(difficulty, style),
                        points=points_for(difficulty),
                    )
                )
            question_sets.append(
                QuestionSet(
                    title=title,
                    description=_fill(description, subject, topic),
                    difficulty=difficulty,
                    questions=questions,
                )
            )

        logger.debug("question_sets_generated", subject=subject, topic=topic, sets=len(question_sets))
        return question_sets

    @staticmethod
    def _concepts(subject: str, topic: str) -> list[str]:
        if subject in SUBJECT_CONCEPTS:
            return [topic, *SUBJECT_CONCEPTS[subject]]
        return [f"{topic} fundamentals", f"{topic} key terms", f"{topic} applications"]

    @staticmethod
    def _common_mistakes(subject: str, topic: str) -> list[str]:
        if subject in COMMON_MISTAKES:
            return list(COMMON_MISTAKES[subject])
        return [
            f"Confusing the key terms of {topic}",
            f"Skipping steps when applying {topic}",
            f"Not checking answers against the principles of {topic}",
        ]
