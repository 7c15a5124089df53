"""Text rewrites that personalize template questions."""

from ap_study_planner.models.profile import LearningStyle

HARDER_TIERS = {"Advanced", "Expert"}
EASIER_TIERS = {"Beginner"}

# Literal replacements, applied in order.
HARDER_SUBSTITUTIONS: list[tuple[str, str]] = [("basic", "advanced"), ("simple", "complex")]
EASIER_SUBSTITUTIONS: list[tuple[str, str]] = [("advanced", "basic"), ("complex", "simple")]

STYLE_EXPLANATIONS: dict[LearningStyle, str] = {
    LearningStyle.VISUAL: "Sketching a diagram or graph of this relationship makes the pattern easier to see.",
    LearningStyle.AUDITORY: "Try explaining this reasoning out loud to check that each step follows.",
    LearningStyle.KINESTHETIC: "Work a concrete example by hand to feel how each step changes the result.",
    LearningStyle.READING: "Write a short summary of this reasoning in your notes to reinforce it.",
}


def _substitute(text: str, substitutions: list[tuple[str, str]]) -> str:
    for old, new in substitutions:
        text = text.replace(old, new)
    return text


def rewrite_for_difficulty(text: str, difficulty: str) -> str:
    """Swap basic/simple wording for advanced/complex (or back) by tier.

    Intermediate and unknown tiers are returned unchanged, as is text that
    contains none of the target words.
    """
    if difficulty in HARDER_TIERS:
        return _substitute(text, HARDER_SUBSTITUTIONS)
    if difficulty in EASIER_TIERS:
        return _substitute(text, EASIER_SUBSTITUTIONS)
    return text


def rewrite_for_style(explanation: str, style: LearningStyle) -> str:
    """Append the learning-style sentence to an explanation."""
    sentence = STYLE_EXPLANATIONS[LearningStyle(style)]
    return f"{explanation} {sentence}" if explanation else sentence
