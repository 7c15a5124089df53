"""Regex-based extraction of topics, concepts and focus areas from study material."""

import re

import structlog

from ap_study_planner.models.insight import ContentDifficulty, ContentInsight

logger = structlog.get_logger()

MAX_TOPICS = 10
MAX_FOCUS_AREAS = 5
MIN_PHRASE_LENGTH = 4
MAX_PHRASE_LENGTH = 99

# Label-prefixed headings, scanned in this order.
TOPIC_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^\s*chapter\s+\d+\s*[:.\-]\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*unit\s+\d+\s*[:.\-]\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*lesson\s+\d+\s*[:.\-]\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*section\s+[\d.]+\s*[:.\-]\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*topic\s*:\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^\s*#{1,3}\s+(.+)$", re.MULTILINE),
]

FOCUS_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"focus on\s+([^.\n;!?]+)", re.IGNORECASE),
    re.compile(r"important\s*:\s*([^.\n;!?]+)", re.IGNORECASE),
    re.compile(r"key concept\s*:\s*([^.\n;!?]+)", re.IGNORECASE),
    re.compile(r"remember\s*:\s*([^.\n;!?]+)", re.IGNORECASE),
]

CONCEPT_KEYWORDS: list[str] = [
    # math / statistics
    "derivative", "integral", "limit", "function", "equation", "probability",
    "distribution", "hypothesis", "regression",
    # physics
    "velocity", "acceleration", "force", "energy", "momentum", "torque",
    # chemistry
    "molecule", "reaction", "equilibrium", "stoichiometry", "bond",
    # biology
    "cell", "dna", "evolution", "ecosystem", "photosynthesis", "enzyme",
    # computer science
    "algorithm", "variable", "array", "loop", "recursion", "class",
    # humanities
    "thesis", "argument", "rhetoric", "evidence", "revolution",
    "constitution", "supply", "demand", "inflation",
]

ADVANCED_VOCABULARY: list[str] = [
    "advanced", "complex", "theorem", "proof", "derivation", "rigorous",
    "multivariable", "differential", "synthesis",
]
BASIC_VOCABULARY: list[str] = [
    "basic", "introduction", "introductory", "simple", "fundamental",
    "overview", "beginner", "elementary",
]

FORMULA_PATTERN = re.compile(r"[A-Za-z0-9)\]]\s*[=^]\s*[A-Za-z0-9(\-]|[∫√∑π∆]")
EXAMPLE_MARKERS = ("example", "e.g.", "for instance", "worked problem")
DEFINITION_MARKERS = ("definition", "defined as", "is called", " means ")


def _harvest(patterns: list[re.Pattern[str]], text: str, limit: int) -> list[str]:
    """Collect trimmed captures in pattern order, keeping the first ``limit``."""
    found: list[str] = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            candidate = match.group(1).strip().rstrip(":").strip()
            if not (MIN_PHRASE_LENGTH <= len(candidate) <= MAX_PHRASE_LENGTH):
                continue
            if candidate not in found:
                found.append(candidate)
    return found[:limit]


def _vocabulary_count(lowered: str, vocabulary: list[str]) -> int:
    return sum(lowered.count(word) for word in vocabulary)


def classify_difficulty(lowered: str) -> ContentDifficulty:
    """Vote between advanced and basic vocabulary; a tie is intermediate."""
    advanced = _vocabulary_count(lowered, ADVANCED_VOCABULARY)
    basic = _vocabulary_count(lowered, BASIC_VOCABULARY)
    if advanced > basic:
        return ContentDifficulty.ADVANCED
    if basic > advanced:
        return ContentDifficulty.BEGINNER
    return ContentDifficulty.INTERMEDIATE


def analyze_content(text: str | None) -> ContentInsight:
    """Analyze free text and return the derived insight.

    Args:
        text: Uploaded or typed study material. May be empty.

    Returns:
        ContentInsight; the empty insight for empty or whitespace text.
    """
    if not text or not text.strip():
        return ContentInsight()

    lowered = text.lower()
    insight = ContentInsight(
        topics=_harvest(TOPIC_PATTERNS, text, MAX_TOPICS),
        concepts=[keyword for keyword in CONCEPT_KEYWORDS if keyword in lowered],
        difficulty=classify_difficulty(lowered),
        focus_areas=_harvest(FOCUS_PATTERNS, text, MAX_FOCUS_AREAS),
        has_formulas=bool(FORMULA_PATTERN.search(text)),
        has_examples=any(marker in lowered for marker in EXAMPLE_MARKERS),
        has_definitions=any(marker in lowered for marker in DEFINITION_MARKERS),
        content_length=len(text),
    )

    logger.debug(
        "content_analyzed",
        topics=len(insight.topics),
        concepts=len(insight.concepts),
        difficulty=insight.difficulty.value,
        focus_areas=len(insight.focus_areas),
    )
    return insight
