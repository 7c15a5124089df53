"""Tests for per-subject topic synthesis."""

from ap_study_planner.models.insight import ContentDifficulty, ContentInsight
from ap_study_planner.models.plan import TopicDifficulty
from ap_study_planner.models.profile import LearnerProfile, LearningStyle
from ap_study_planner.planning.topics import (
    estimate_minutes,
    learning_objectives,
    synthesize_topics,
    topic_difficulty,
)

EMPTY = ContentInsight()


class TestSynthesizeTopics:
    def test_catalog_subject(self):
        topics = synthesize_topics("AP Calculus AB", LearnerProfile(), EMPTY)
        assert len(topics) == 8
        assert topics[0].name == "Limits and Continuity"
        assert all(t.difficulty == TopicDifficulty.INTERMEDIATE for t in topics)
        assert all(t.estimated_time_minutes == 45 for t in topics)

    def test_prerequisites_chain(self):
        topics = synthesize_topics("AP Calculus AB", LearnerProfile(), EMPTY)
        assert topics[0].prerequisites == []
        assert topics[1].prerequisites == ["Limits and Continuity"]
        for topic in topics:
            assert topic.name not in topic.prerequisites

    def test_generic_catalog_for_unknown_subject(self):
        topics = synthesize_topics("AP Art History", LearnerProfile(), EMPTY)
        assert [t.name for t in topics] == [
            "AP Art History Fundamentals",
            "AP Art History Applications",
            "AP Art History Problem Solving",
        ]

    def test_material_topics_appended(self):
        insight = ContentInsight(topics=["Vector Fields"], content_length=20)
        topics = synthesize_topics("AP Art History", LearnerProfile(), insight)
        assert len(topics) == 4
        assert topics[-1].name == "Vector Fields (From Your Materials)"
        assert topics[-1].difficulty == TopicDifficulty.INTERMEDIATE
        assert topics[-1].estimated_time_minutes == 45

    def test_overlapping_material_topics_skipped(self):
        insight = ContentInsight(topics=["Applications"], content_length=20)
        topics = synthesize_topics("AP Art History", LearnerProfile(), insight)
        assert len(topics) == 3

    def test_capped_at_eight(self):
        insight = ContentInsight(topics=["Vector Fields", "Polar Curves"], content_length=40)
        topics = synthesize_topics("AP Calculus AB", LearnerProfile(), insight)
        assert len(topics) == 8

    def test_every_topic_has_objectives_resources_and_assessments(self):
        profile = LearnerProfile(learning_style=LearningStyle.AUDITORY)
        for topic in synthesize_topics("AP Biology", profile, EMPTY):
            assert topic.learning_objectives
            assert topic.resources
            assert topic.assessments


class TestTopicDifficulty:
    def test_weak_area_downgrades(self):
        profile = LearnerProfile(weak_areas=["limits"])
        assert topic_difficulty("Limits and Continuity", profile, EMPTY) == TopicDifficulty.BEGINNER

    def test_strong_area_upgrades(self):
        profile = LearnerProfile(strong_areas=["limits"])
        assert topic_difficulty("Limits and Continuity", profile, EMPTY) == TopicDifficulty.ADVANCED

    def test_strong_overrides_weak(self):
        profile = LearnerProfile(weak_areas=["limits"], strong_areas=["continuity"])
        assert topic_difficulty("Limits and Continuity", profile, EMPTY) == TopicDifficulty.ADVANCED

    def test_advanced_material_lifts_intermediate(self):
        insight = ContentInsight(difficulty=ContentDifficulty.ADVANCED)
        assert topic_difficulty("Ecology", LearnerProfile(), insight) == TopicDifficulty.ADVANCED

    def test_advanced_material_keeps_beginner(self):
        profile = LearnerProfile(weak_areas=["ecology"])
        insight = ContentInsight(difficulty=ContentDifficulty.ADVANCED)
        assert topic_difficulty("Ecology", profile, insight) == TopicDifficulty.BEGINNER

    def test_beginner_material_forces_beginner(self):
        profile = LearnerProfile(strong_areas=["ecology"])
        insight = ContentInsight(difficulty=ContentDifficulty.BEGINNER)
        assert topic_difficulty("Ecology", profile, insight) == TopicDifficulty.BEGINNER

    def test_blank_areas_ignored(self):
        profile = LearnerProfile(weak_areas=["  "])
        assert topic_difficulty("Ecology", profile, EMPTY) == TopicDifficulty.INTERMEDIATE


class TestEstimateMinutes:
    def test_default(self):
        assert estimate_minutes(LearnerProfile()) == 45

    def test_short_days_kinesthetic(self):
        profile = LearnerProfile(daily_time_available_minutes=20, learning_style=LearningStyle.KINESTHETIC)
        assert estimate_minutes(profile) == 40

    def test_long_days_reading(self):
        profile = LearnerProfile(daily_time_available_minutes=120, learning_style=LearningStyle.READING)
        assert estimate_minutes(profile) == 50


class TestLearningObjectives:
    def test_focus_area_added(self):
        insight = ContentInsight(focus_areas=["limits"])
        objectives = learning_objectives("Limits and Continuity", LearningStyle.VISUAL, insight)
        assert objectives[-1] == "Focus on limits"
        assert len(objectives) == 3

    def test_capped_at_four(self):
        insight = ContentInsight(focus_areas=["Limits", "Continuity", "Limits and", "and Continuity"])
        objectives = learning_objectives("Limits and Continuity", LearningStyle.VISUAL, insight)
        assert len(objectives) == 4
