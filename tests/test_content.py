"""Tests for template-based content and question set generation."""

import pytest

from ap_study_planner.content.generator import ContentGenerator, build_hint, points_for
from ap_study_planner.content.rewrite import rewrite_for_difficulty, rewrite_for_style
from ap_study_planner.content.templates import GENERIC_TEMPLATE, QUESTION_POOLS, QUESTION_TEMPLATES
from ap_study_planner.models.content import QuestionType
from ap_study_planner.models.profile import LearnerProfile, LearningStyle


def first(seq):
    return seq[0]


@pytest.fixture
def generator():
    return ContentGenerator(selector=first)


class TestGenerateContent:
    def test_beginner_visual_calculus(self, generator):
        content = generator.generate_content("AP Calculus AB", "Derivatives", "Beginner", "visual")
        assert content.question == "What is the derivative of f(x) = 3x^2 + 2x using basic power rule steps?"
        assert content.type == QuestionType.MULTIPLE_CHOICE
        assert content.options[content.correct_answer] == "6x + 2"
        assert content.correct_answer == 1
        assert content.points == 10
        assert content.visual_aid is not None
        assert content.audio_explanation is None
        assert content.hint.startswith("Start by recalling the basic definition involved.")
        assert content.hint.endswith("Try sketching a quick diagram.")
        assert content.concepts[0] == "Derivatives"

    def test_advanced_rewrites_wording(self, generator):
        content = generator.generate_content("AP Calculus AB", "Derivatives", "Advanced", "visual")
        assert "using advanced power rule steps" in content.question
        assert content.points == 22
        assert content.hint.startswith("Consider how several concepts interact")

    def test_expert_points_and_default_hint(self, generator):
        content = generator.generate_content("AP Biology", "Cells", "Expert", "reading")
        assert content.points == 30
        assert content.hint.startswith("Eliminate the options")
        assert "advanced work of cellular respiration" in content.question

    def test_unknown_subject_uses_generic_template(self, generator):
        content = generator.generate_content("AP Art History", "Baroque", "Intermediate", "auditory")
        assert content.question == "Which statement best describes a basic principle of Baroque?"
        assert content.points == 15
        assert content.concepts == ["Baroque fundamentals", "Baroque key terms", "Baroque applications"]
        assert len(content.common_mistakes) == 3
        assert all("Baroque" in mistake for mistake in content.common_mistakes)
        assert content.audio_explanation is not None
        assert content.visual_aid is None

    def test_unknown_subject_beginner(self, generator):
        content = generator.generate_content("AP Art History", "Baroque", "Beginner", "visual")
        assert content.points == 10
        assert content.common_mistakes == [
            "Confusing the key terms of Baroque",
            "Skipping steps when applying Baroque",
            "Not checking answers against the principles of Baroque",
        ]
        assert content.options[content.correct_answer].startswith("It connects core definitions of Baroque")

    def test_kinesthetic_interactive_element(self, generator):
        content = generator.generate_content("AP Statistics", "Center", "Intermediate", "kinesthetic")
        assert content.interactive_element is not None

    def test_explanation_includes_style_sentence(self, generator):
        content = generator.generate_content("AP Physics 1", "Forces", "Intermediate", "auditory")
        assert content.explanation.endswith("Try explaining this reasoning out loud to check that each step follows.")

    def test_selector_is_used(self):
        last = ContentGenerator(selector=lambda seq: seq[-1])
        content = last.generate_content("AP Calculus AB", "FTC", "Intermediate", "visual")
        assert content.options[content.correct_answer] == "F(b) - F(a)"


class TestGenerateQuestionSets:
    def test_three_sets_of_four(self, generator):
        sets = generator.generate_question_sets("AP Calculus AB", "Limits", "Intermediate", LearnerProfile())
        assert [s.title for s in sets] == ["Conceptual Understanding", "Problem Solving", "Application"]
        assert all(len(s.questions) == 4 for s in sets)
        assert all(s.difficulty == "Intermediate" for s in sets)

    def test_question_types(self, generator):
        sets = generator.generate_question_sets("AP Calculus AB", "Limits", "Intermediate", LearnerProfile())
        assert all(q.type == QuestionType.MULTIPLE_CHOICE for q in sets[0].questions)
        assert all(q.type == QuestionType.PROBLEM_SOLVING for q in sets[1].questions)
        assert sets[2].questions[1].type == QuestionType.ESSAY
        assert sets[2].questions[0].type == QuestionType.SHORT_ANSWER

    def test_pool_wraps_around(self, generator):
        sets = generator.generate_question_sets("AP Calculus AB", "Limits", "Intermediate", LearnerProfile())
        assert sets[0].questions[3].question == sets[0].questions[0].question

    def test_difficulty_and_placeholders(self, generator):
        sets = generator.generate_question_sets("AP Calculus AB", "Limits", "Advanced", LearnerProfile())
        assert sets[0].questions[0].question == "Which advanced idea is central to Limits?"
        assert sets[0].description == "Check your grasp of the key ideas in Limits"
        assert sets[2].description == "Apply Limits to new AP Calculus AB scenarios"
        assert all(q.points == 22 for s in sets for q in s.questions)

    def test_style_from_profile(self, generator):
        profile = LearnerProfile(learning_style=LearningStyle.KINESTHETIC)
        sets = generator.generate_question_sets("AP Biology", "Ecology", "Beginner", profile)
        question = sets[1].questions[0]
        assert question.hint.endswith("Try working a concrete example by hand.")
        assert question.correct_answer == "A complete solution with every step justified"


class TestRepeatability:
    def test_content_repeats(self, generator):
        first_call = generator.generate_content("AP Chemistry", "Equilibrium", "Advanced", "reading")
        second_call = generator.generate_content("AP Chemistry", "Equilibrium", "Advanced", "reading")
        assert first_call == second_call

    def test_question_sets_repeat(self, generator):
        profile = LearnerProfile(learning_style=LearningStyle.AUDITORY)
        first_call = generator.generate_question_sets("AP Statistics", "Sampling", "Expert", profile)
        second_call = generator.generate_question_sets("AP Statistics", "Sampling", "Expert", profile)
        assert first_call == second_call


class TestTemplates:
    def test_answer_positions_vary(self):
        positions = {t["correct_answer"] for ts in QUESTION_TEMPLATES.values() for t in ts}
        assert len(positions) > 1

    def test_pool_answer_positions_vary(self):
        positions = {t["correct_answer"] for t in QUESTION_POOLS[QuestionType.MULTIPLE_CHOICE]}
        assert len(positions) > 1

    def test_answer_index_in_range(self):
        templates = [t for ts in QUESTION_TEMPLATES.values() for t in ts]
        templates += [GENERIC_TEMPLATE, *QUESTION_POOLS[QuestionType.MULTIPLE_CHOICE]]
        assert all(0 <= t["correct_answer"] < len(t["options"]) for t in templates)


class TestRewrite:
    def test_harder(self):
        assert rewrite_for_difficulty("a basic and simple case", "Expert") == "a advanced and complex case"

    def test_easier(self):
        assert rewrite_for_difficulty("an advanced and complex case", "Beginner") == "an basic and simple case"

    def test_intermediate_unchanged(self):
        assert rewrite_for_difficulty("a basic case", "Intermediate") == "a basic case"

    def test_no_target_words_unchanged(self):
        assert rewrite_for_difficulty("a plain case", "Advanced") == "a plain case"

    def test_style_sentence_appended(self):
        text = rewrite_for_style("Because.", LearningStyle.READING)
        assert text == "Because. Write a short summary of this reasoning in your notes to reinforce it."


class TestLookups:
    @pytest.mark.parametrize(
        "difficulty,points",
        [("Beginner", 10), ("Intermediate", 15), ("Advanced", 22), ("Expert", 30), ("Unknown", 15)],
    )
    def test_points(self, difficulty, points):
        assert points_for(difficulty) == points

    def test_hint_for_unknown_tier(self):
        hint = build_hint("Intermediate", LearningStyle.VISUAL)
        assert hint == "Eliminate the options that contradict the key principle. Try sketching a quick diagram."
