"""Prompts for the remote (LLM-backed) generators."""

from collections.abc import Sequence

from ap_study_planner.models.profile import LearnerProfile

PLAN_SYSTEM_PROMPT = """\
You are an expert AP exam coach that creates personalized study plans. \
You analyze student profiles and produce actionable multi-week plans with \
AP subjects, topics, milestones and study strategies. \
Always respond with a single JSON object matching the requested structure.\
"""

PLAN_RESPONSE_FORMAT = """\
{
    "title": "<plan title>",
    "description": "<brief overview>",
    "duration_days": <30-120>,
    "difficulty_label": "<AP Supportive | AP Balanced | AP Challenging>",
    "subjects": [
        {
            "name": "<AP subject>",
            "priority": "<high | medium | low>",
            "time_allocation_percent": <integer>,
            "topics": [
                {
                    "name": "<topic>",
                    "difficulty": "<Beginner | Intermediate | Advanced | Expert>",
                    "estimated_time_minutes": <minutes>,
                    "learning_objectives": ["<objective>"]
                }
            ],
            "reasoning": "<why this subject and priority>"
        }
    ],
    "milestones": [
        {"week": <n>, "title": "<title>", "description": "<goal>", "success_criteria": ["<criterion>"]}
    ],
    "personalized_recommendations": ["<recommendation>"],
    "estimated_outcome": "<expected result>",
    "confidence": <60-95>
}"""

CONTENT_SYSTEM_PROMPT = """\
You are an expert AP content author. Generate one exam-style practice item \
tailored to the learning style and difficulty requested. \
Respond ONLY with a JSON object with keys: question, options (list of 4 strings), \
correct_answer (index of the correct option), explanation, hint, concepts, \
ap_skills, common_mistakes.\
"""


def build_plan_prompt(profile: LearnerProfile, goals: Sequence[str], raw_text: str = "") -> str:
    """Render the user prompt describing the learner."""
    goal_lines = "\n".join(f"{i}. {goal}" for i, goal in enumerate(goals, start=1)) or "None provided"
    material = raw_text.strip()[:2000] or "None provided"
    return f"""\
Create a personalized AP study plan for this student.

STUDENT PROFILE:
- Name: {profile.name or "Student"}
- Current level: {profile.level}
- Total stars: {profile.total_stars}
- Current streak: {profile.current_streak} days
- Weak areas: {", ".join(profile.weak_areas) or "None"}
- Strong areas: {", ".join(profile.strong_areas) or "None"}
- Learning style: {profile.learning_style.value}
- Daily time available: {profile.daily_time_available_minutes} minutes

LEARNING GOALS:
{goal_lines}

STUDY MATERIAL EXCERPT:
{material}

REQUIREMENTS:
1. At most 4 AP subjects, weak areas first
2. At most 8 topics per subject
3. Milestones every two weeks, at most 12
4. At most 8 personalized recommendations

Respond with JSON in this format:
{PLAN_RESPONSE_FORMAT}
"""


def build_content_prompt(subject: str, topic: str, difficulty: str, learning_style: str) -> str:
    return (
        f"Subject: {subject}\n"
        f"Topic: {topic}\n"
        f"Difficulty: {difficulty}\n"
        f"Learning style: {learning_style}"
    )
