"""LLM-backed plan and content generation (optional remote strategy)."""

import json
from collections.abc import Sequence

import structlog
from openai import AsyncOpenAI
from pydantic import ValidationError

from ap_study_planner.errors import PlanValidationError, RemoteGenerationError
from ap_study_planner.models.content import StudyContent
from ap_study_planner.models.plan import PlanSource, StudyPlan
from ap_study_planner.models.profile import LearnerProfile
from ap_study_planner.planning.validation import repair_plan_data, validate_plan_structure
from ap_study_planner.remote.prompts import (
    CONTENT_SYSTEM_PROMPT,
    PLAN_SYSTEM_PROMPT,
    build_content_prompt,
    build_plan_prompt,
)

logger = structlog.get_logger()


class RemoteGenerator:
    """Generates plans and content through the OpenAI chat API.

    Errors are raised, not swallowed: the caller decides on fallback.

    Args:
        api_key: OpenAI API key.
        model: Chat model to use.
        client: Pre-built client, mainly for tests.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        client: AsyncOpenAI | None = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model

    async def _complete_json(self, system_prompt: str, user_prompt: str, temperature: float) -> dict:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                response_format={"type": "json_object"},
            )
            content = response.choices[0].message.content
        except Exception as e:
            raise RemoteGenerationError(f"Remote request failed: {e}") from e

        if not content:
            raise RemoteGenerationError("Empty response from remote generator")
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise RemoteGenerationError(f"Remote response is not valid JSON: {e}") from e

    async def generate_plan(
        self,
        profile: LearnerProfile,
        goals: Sequence[str],
        raw_text: str = "",
    ) -> StudyPlan:
        """Request a plan and validate it against the plan contract.

        Raises:
            RemoteGenerationError: Transport, parsing or model errors.
            PlanValidationError: The response violates the plan structure.
        """
        data = await self._complete_json(
            PLAN_SYSTEM_PROMPT, build_plan_prompt(profile, goals, raw_text), temperature=0.7
        )
        validate_plan_structure(data)
        data = repair_plan_data(data)
        data["daily_time_commitment_minutes"] = profile.daily_time_available_minutes
        data["source"] = PlanSource.REMOTE
        try:
            plan = StudyPlan.model_validate(data)
        except ValidationError as e:
            raise PlanValidationError(f"Remote plan failed validation: {e.error_count()} error(s)") from e

        logger.info("remote_plan_generated", subjects=plan.subject_names, confidence=plan.confidence)
        return plan

    async def generate_content(
        self,
        subject: str,
        topic: str,
        difficulty: str,
        learning_style: str,
    ) -> StudyContent:
        data = await self._complete_json(
            CONTENT_SYSTEM_PROMPT,
            build_content_prompt(subject, topic, difficulty, learning_style),
            temperature=0.8,
        )
        try:
            return StudyContent.model_validate(data)
        except ValidationError as e:
            raise RemoteGenerationError(f"Remote content failed validation: {e.error_count()} error(s)") from e
