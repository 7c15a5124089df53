"""Exception hierarchy for the study planner."""


class StudyPlannerError(Exception):
    """Base class for all study planner errors."""


class GoalValidationError(StudyPlannerError):
    """The learner supplied no usable goals.

    ``user_message`` is safe to show as-is in the goal form.
    """

    def __init__(self, user_message: str = "Please add at least one learning goal."):
        super().__init__(user_message)
        self.user_message = user_message


class PlanValidationError(StudyPlannerError):
    """A generated plan violates the plan contract."""


class RemoteGenerationError(StudyPlannerError):
    """The remote generator failed (network, timeout, unparsable output)."""
