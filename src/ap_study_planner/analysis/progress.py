"""Session progress tracking and insight aggregation."""

import threading
from collections import Counter, defaultdict
from collections.abc import Sequence
from pathlib import Path
from statistics import mean

import structlog

from ap_study_planner.models.profile import LearnerProfile
from ap_study_planner.models.session import SessionInsights, SessionRecord, StudyPatterns
from ap_study_planner.storage.session_history import append_session_record, read_session_records

logger = structlog.get_logger()

MAX_SESSION_RECORDS = 50
TOP_WEAK_AREAS = 3
EXPERIENCE_BONUS = 5.0
EXPERIENCE_MIN_SESSIONS = 3


def _common_weak_areas(records: Sequence[SessionRecord]) -> list[str]:
    # Counter keeps first-seen order; sorted() is stable, so equal counts stay in that order
    counts = Counter(area for record in records for area in record.areas_for_improvement)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [area for area, _ in ranked[:TOP_WEAK_AREAS]]


def _preferred_difficulty(records: Sequence[SessionRecord]) -> str:
    by_tier: dict[str, list[float]] = defaultdict(list)
    for record in records:
        by_tier[record.difficulty].append(record.accuracy or 0.0)

    def score(tier: str) -> float:
        accuracies = by_tier[tier]
        bonus = EXPERIENCE_BONUS if len(accuracies) > EXPERIENCE_MIN_SESSIONS else 0.0
        return mean(accuracies) + bonus

    return max(by_tier, key=score)


def consistency_score(records: Sequence[SessionRecord]) -> float:
    """Score study regularity from the gaps between consecutive sessions.

    One session a day scores 100; every extra day between sessions costs
    10 points and shorter gaps score above 100. Fewer than two sessions
    score 0.
    """
    if len(records) < 2:
        return 0.0
    starts = sorted(record.started_at for record in records)
    gaps = [(later - earlier).total_seconds() / 86400 for earlier, later in zip(starts, starts[1:])]
    score = 100 - (mean(gaps) - 1) * 10
    return round(max(0.0, score), 1)


def aggregate_sessions(records: Sequence[SessionRecord]) -> SessionInsights:
    """Summarize a user's session log.

    Args:
        records: Session records, oldest first.

    Returns:
        Insights with ``has_data=False`` when the log is empty.
    """
    if not records:
        return SessionInsights()

    patterns = StudyPatterns(
        average_session_minutes=round(mean(r.duration_minutes for r in records), 1),
        average_questions_per_session=round(mean(r.questions_answered for r in records), 1),
        consistency_score=consistency_score(records),
    )
    return SessionInsights(
        has_data=True,
        total_sessions=len(records),
        average_accuracy=round(mean(r.accuracy or 0.0 for r in records), 1),
        common_weak_areas=_common_weak_areas(records),
        preferred_difficulty=_preferred_difficulty(records),
        study_patterns=patterns,
    )


def apply_insights(profile: LearnerProfile, insights: SessionInsights) -> LearnerProfile:
    """Fold recurring weak areas back into a profile for the next plan."""
    if not insights.has_data:
        return profile
    known = {area.lower() for area in profile.weak_areas}
    extra = [area for area in insights.common_weak_areas if area.lower() not in known]
    return profile.model_copy(update={"weak_areas": [*profile.weak_areas, *extra]})


class SessionProgressTracker:
    """Per-user append-only session log with bounded history.

    Records are kept in memory and, when ``history_dir`` is given, also
    persisted as one JSON file per user.

    Args:
        history_dir: Directory for persisted histories, or None for memory only.
        max_records: Oldest records beyond this count are evicted.
    """

    def __init__(self, history_dir: Path | None = None, max_records: int = MAX_SESSION_RECORDS):
        self.history_dir = history_dir
        self.max_records = max_records
        self._logs: dict[str, list[SessionRecord]] = {}
        self._locks: dict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[user_id]

    def _load(self, user_id: str) -> list[SessionRecord]:
        if user_id not in self._logs:
            if self.history_dir is not None:
                self._logs[user_id] = read_session_records(self.history_dir, user_id)[-self.max_records:]
            else:
                self._logs[user_id] = []
        return self._logs[user_id]

    def record(self, session: SessionRecord) -> None:
        """Append a finished session to its user's log."""
        with self._lock_for(session.user_id):
            log = self._load(session.user_id)
            # Disk first: a failed write leaves the in-memory log untouched
            if self.history_dir is not None:
                append_session_record(self.history_dir, session, limit=self.max_records)
            log.append(session)
            del log[:-self.max_records]

        logger.info(
            "session_recorded",
            user_id=session.user_id,
            subject=session.subject,
            accuracy=session.accuracy,
            retained=len(log),
        )

    def records(self, user_id: str) -> list[SessionRecord]:
        with self._lock_for(user_id):
            return list(self._load(user_id))

    def aggregate(self, user_id: str) -> SessionInsights:
        return aggregate_sessions(self.records(user_id))
