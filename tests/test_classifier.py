"""Tests for goal-to-subject classification."""

from ap_study_planner.planning.classifier import DEFAULT_SUBJECTS, classify_subjects


class TestClassifySubjects:
    def test_goals_map_to_subjects(self):
        subjects = classify_subjects(
            ["Master calculus derivatives", "Improve essay writing"], [], []
        )
        assert subjects == ["AP Calculus AB", "AP English Language"]

    def test_no_match_returns_defaults(self):
        assert classify_subjects(["get better grades"], [], []) == DEFAULT_SUBJECTS

    def test_empty_input_returns_defaults(self):
        assert classify_subjects([], [], []) == DEFAULT_SUBJECTS

    def test_defaults_are_a_copy(self):
        subjects = classify_subjects([], [], [])
        subjects.append("AP Psychology")
        assert "AP Psychology" not in DEFAULT_SUBJECTS

    def test_weak_and_strong_areas_contribute(self):
        assert classify_subjects([], ["genetics"], ["java"]) == [
            "AP Biology",
            "AP Computer Science A",
        ]

    def test_case_insensitive(self):
        assert classify_subjects(["STATISTICS"], [], []) == ["AP Statistics"]

    def test_at_most_four_subjects_in_table_order(self):
        subjects = classify_subjects(
            ["psychology", "biology", "chemistry", "physics", "statistics", "calculus"], [], []
        )
        assert subjects == ["AP Calculus AB", "AP Statistics", "AP Physics 1", "AP Chemistry"]

    def test_synonyms_deduplicated(self):
        subjects = classify_subjects(["calculus", "integral", "derivative"], [], [])
        assert subjects == ["AP Calculus AB"]

    def test_keyword_must_start_a_word(self):
        assert classify_subjects(["a famous history lesson"], [], []) == DEFAULT_SUBJECTS


class TestSpecificCourseNames:
    def test_microeconomics_only(self):
        assert classify_subjects(["ace microeconomics"], [], []) == ["AP Microeconomics"]

    def test_macroeconomics_only(self):
        assert classify_subjects(["macroeconomics review"], [], []) == ["AP Macroeconomics"]

    def test_plain_economics_is_macro(self):
        assert classify_subjects(["economics"], [], []) == ["AP Macroeconomics"]

    def test_calculus_bc_only(self):
        assert classify_subjects(["pass calculus bc"], [], []) == ["AP Calculus BC"]

    def test_calculus_ab(self):
        assert classify_subjects(["pass calculus ab"], [], []) == ["AP Calculus AB"]

    def test_physics_2_only(self):
        assert classify_subjects(["physics 2"], [], []) == ["AP Physics 2"]

    def test_physics_1(self):
        assert classify_subjects(["physics 1 exam"], [], []) == ["AP Physics 1"]

    def test_english_literature_only(self):
        assert classify_subjects(["AP English Literature"], [], []) == ["AP English Literature"]

    def test_english_language(self):
        assert classify_subjects(["AP English Language"], [], []) == ["AP English Language"]
