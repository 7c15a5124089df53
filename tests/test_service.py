"""Tests for the remote-first study plan service and its local fallback."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from ap_study_planner.config import EngineConfig
from ap_study_planner.content.generator import ContentGenerator
from ap_study_planner.errors import GoalValidationError, PlanValidationError, RemoteGenerationError
from ap_study_planner.models.content import StudyContent
from ap_study_planner.models.plan import PlanSource
from ap_study_planner.models.profile import LearnerProfile
from ap_study_planner.models.session import SessionRecord
from ap_study_planner.planning.assembler import PlanAssembler
from ap_study_planner.service import StudyPlanService

REMOTE_CONFIG = EngineConfig(remote_enabled=True, api_key="test-key", timeout_seconds=0.05)


def remote_plan():
    plan = PlanAssembler().assemble(LearnerProfile(), ["biology"])
    return plan.model_copy(update={"source": PlanSource.REMOTE})


@pytest.fixture
def profile():
    return LearnerProfile(name="Sam", study_goals=["calculus"])


class TestServiceInit:
    def test_default_is_local_only(self):
        service = StudyPlanService()
        assert service.remote is None

    def test_remote_ignored_when_disabled(self):
        service = StudyPlanService(EngineConfig(remote_enabled=False), remote=AsyncMock())
        assert service.remote is None

    def test_remote_built_from_config(self):
        service = StudyPlanService(REMOTE_CONFIG)
        assert service.remote is not None
        assert service.remote.model == "gpt-4o-mini"

    def test_history_limit_from_config(self):
        service = StudyPlanService(EngineConfig(session_history_limit=7))
        assert service.tracker.max_records == 7


class TestGeneratePlan:
    async def test_local_plan_without_remote(self, profile):
        plan = await StudyPlanService().generate_plan(profile)
        assert plan.source == PlanSource.LOCAL
        assert plan.subject_names == ["AP Calculus AB"]

    async def test_explicit_goals_used(self, profile):
        plan = await StudyPlanService().generate_plan(profile, ["chemistry"])
        assert plan.subject_names == ["AP Chemistry"]

    async def test_blank_goals_rejected(self, profile):
        with pytest.raises(GoalValidationError) as exc_info:
            await StudyPlanService().generate_plan(profile, ["  ", ""])
        assert "learning goal" in exc_info.value.user_message

    async def test_missing_goals_rejected(self):
        with pytest.raises(GoalValidationError):
            await StudyPlanService().generate_plan(LearnerProfile())

    async def test_remote_result_returned(self, profile):
        remote = AsyncMock()
        expected = remote_plan()
        remote.generate_plan.return_value = expected
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)

        plan = await service.generate_plan(profile, [" calculus "], "notes")

        assert plan is expected
        remote.generate_plan.assert_awaited_once_with(profile, ["calculus"], "notes")

    @pytest.mark.parametrize(
        "error",
        [
            RemoteGenerationError("boom"),
            PlanValidationError("bad plan"),
            ValueError("unexpected"),
        ],
    )
    async def test_remote_error_falls_back(self, profile, error):
        remote = AsyncMock()
        remote.generate_plan.side_effect = error
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)

        plan = await service.generate_plan(profile)

        assert plan.source == PlanSource.LOCAL
        assert plan.subject_names == ["AP Calculus AB"]

    async def test_remote_timeout_falls_back(self, profile):
        async def slow_plan(*args):
            await asyncio.sleep(1)
            return remote_plan()

        remote = AsyncMock()
        remote.generate_plan.side_effect = slow_plan
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)

        plan = await service.generate_plan(profile)

        assert plan.source == PlanSource.LOCAL

    async def test_remote_cancellation_falls_back(self, profile):
        remote = AsyncMock()
        remote.generate_plan.side_effect = asyncio.CancelledError()
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)

        plan = await service.generate_plan(profile)

        assert plan.source == PlanSource.LOCAL

    async def test_goal_error_not_sent_to_remote(self):
        remote = AsyncMock()
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)
        with pytest.raises(GoalValidationError):
            await service.generate_plan(LearnerProfile(), [])
        remote.generate_plan.assert_not_awaited()


class TestGenerateContent:
    async def test_local_content(self):
        service = StudyPlanService(content=ContentGenerator(selector=lambda seq: seq[0]))
        content = await service.generate_content("AP Biology", "Cells", "Beginner", "visual")
        assert content.points == 10

    async def test_remote_content(self):
        remote = AsyncMock()
        remote.generate_content.return_value = StudyContent(question="Remote?", points=99)
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)

        content = await service.generate_content("AP Biology", "Cells", "Beginner", "visual")

        assert content.question == "Remote?"
        remote.generate_content.assert_awaited_once_with("AP Biology", "Cells", "Beginner", "visual")

    async def test_remote_content_failure_falls_back(self):
        remote = AsyncMock()
        remote.generate_content.side_effect = RemoteGenerationError("down")
        service = StudyPlanService(
            REMOTE_CONFIG, remote=remote, content=ContentGenerator(selector=lambda seq: seq[0])
        )

        content = await service.generate_content("AP Biology", "Cells", "Advanced", "reading")

        assert content.points == 22

    async def test_question_sets_are_local(self):
        remote = AsyncMock()
        service = StudyPlanService(REMOTE_CONFIG, remote=remote)
        sets = await service.generate_question_sets("AP Biology", "Cells", "Beginner", LearnerProfile())
        assert len(sets) == 3
        remote.assert_not_called()


class TestSessions:
    def test_record_and_insights(self):
        service = StudyPlanService()
        service.record_session(
            SessionRecord(user_id="u1", subject="AP Biology", questions_answered=4, correct_answers=3)
        )
        insights = service.insights("u1")
        assert insights.total_sessions == 1
        assert insights.average_accuracy == 75.0
