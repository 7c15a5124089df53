"""Study plan service combining the remote generator with the local engine."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

import structlog

from ap_study_planner.analysis.progress import SessionProgressTracker
from ap_study_planner.config import EngineConfig
from ap_study_planner.content.generator import ContentGenerator
from ap_study_planner.models.content import QuestionSet, StudyContent
from ap_study_planner.models.plan import StudyPlan
from ap_study_planner.models.profile import LearnerProfile, LearningStyle
from ap_study_planner.models.session import SessionInsights, SessionRecord
from ap_study_planner.planning.assembler import PlanAssembler
from ap_study_planner.planning.validation import validate_goals
from ap_study_planner.remote.llm_generator import RemoteGenerator

logger = structlog.get_logger()

T = TypeVar("T")


class StudyPlanService:
    """Remote-first generation with a deterministic local fallback.

    Each call issues at most one remote request, bounded by the configured
    timeout. Any remote failure returns the local result unchanged; remote
    and local output are never merged.

    Args:
        config: Engine configuration; remote generation only runs when
            ``config.remote_enabled`` is set.
        remote: Remote generator. Built from ``config`` when omitted.
        assembler: Local plan assembler.
        content: Local content generator.
        tracker: Session progress tracker.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        remote: RemoteGenerator | None = None,
        assembler: PlanAssembler | None = None,
        content: ContentGenerator | None = None,
        tracker: SessionProgressTracker | None = None,
    ):
        self.config = config or EngineConfig()
        if remote is None and self.config.remote_enabled:
            remote = RemoteGenerator(api_key=self.config.api_key, model=self.config.model)
        self.remote = remote if self.config.remote_enabled else None
        self.assembler = assembler or PlanAssembler()
        self.content = content or ContentGenerator()
        self.tracker = tracker or SessionProgressTracker(
            max_records=self.config.session_history_limit
        )

    async def _try_remote(self, operation: str, call: Callable[[], Awaitable[T]]) -> T | None:
        """Run one remote call under the timeout; None means use the local result."""
        if self.remote is None:
            return None
        try:
            return await asyncio.wait_for(call(), timeout=self.config.timeout_seconds)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            logger.warning("remote_generation_cancelled", operation=operation)
        except TimeoutError:
            logger.warning(
                "remote_generation_timeout",
                operation=operation,
                timeout_seconds=self.config.timeout_seconds,
            )
        except Exception as e:
            logger.warning("remote_generation_failed", operation=operation, error=str(e))
        return None

    async def generate_plan(
        self,
        profile: LearnerProfile,
        goals: Sequence[str] | None = None,
        raw_text: str = "",
    ) -> StudyPlan:
        """Generate a study plan, falling back to the local assembler.

        Args:
            profile: Learner profile.
            goals: Learning goals; the profile's study goals when None.
            raw_text: Optional study material text.

        Raises:
            GoalValidationError: No non-blank goal was supplied.
        """
        cleaned = validate_goals(profile.study_goals if goals is None else goals)

        plan = await self._try_remote(
            "plan", lambda: self.remote.generate_plan(profile, cleaned, raw_text)
        )
        if plan is None:
            plan = self.assembler.assemble(profile, cleaned, raw_text)
        logger.info("study_plan_generated", source=plan.source.value, plan_id=plan.id)
        return plan

    async def generate_content(
        self,
        subject: str,
        topic: str,
        difficulty: str,
        learning_style: LearningStyle | str,
    ) -> StudyContent:
        style = LearningStyle(learning_style)
        content = await self._try_remote(
            "content",
            lambda: self.remote.generate_content(subject, topic, difficulty, style.value),
        )
        return content or self.content.generate_content(subject, topic, difficulty, style)

    async def generate_question_sets(
        self,
        subject: str,
        topic: str,
        difficulty: str,
        profile: LearnerProfile,
    ) -> list[QuestionSet]:
        # Question sets are always template-based
        return self.content.generate_question_sets(subject, topic, difficulty, profile)

    def record_session(self, session: SessionRecord) -> None:
        self.tracker.record(session)

    def insights(self, user_id: str) -> SessionInsights:
        return self.tracker.aggregate(user_id)
