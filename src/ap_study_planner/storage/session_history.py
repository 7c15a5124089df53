"""Per-user session history persistence (JSON + fcntl.flock + atomic write)."""

import fcntl
import hashlib
import json
import os
import re
import tempfile
from pathlib import Path

from ap_study_planner.models.session import SessionRecord

DEFAULT_HISTORY_LIMIT = 50


def history_path(history_dir: Path, user_id: str) -> Path:
    """File for one user: readable prefix plus a digest of the raw id, unique per user."""
    safe_id = re.sub(r"[^A-Za-z0-9_.-]", "_", user_id)[:64]
    digest = hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:12]
    return history_dir / f"{safe_id}-{digest}.json"


def _read(path: Path) -> list[dict]:
    if not path.exists():
        return []
    return json.loads(path.read_text()).get("sessions", [])


def append_session_record(
    history_dir: Path,
    record: SessionRecord,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> int:
    """Append a record to the user's history, evicting the oldest beyond ``limit``.

    The read-evict-write cycle holds an exclusive lock on the user's lock file.

    Returns:
        Number of records retained after the append.
    """
    history_dir.mkdir(parents=True, exist_ok=True)
    path = history_path(history_dir, record.user_id)

    lock_path = path.with_suffix(".json.lock")
    with open(lock_path, "w") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)

        sessions = _read(path)
        sessions.append(record.model_dump(mode="json"))
        sessions = sessions[-limit:]

        with tempfile.NamedTemporaryFile(
            "w", dir=history_dir, delete=False, suffix=".json"
        ) as tmp:
            json.dump({"user_id": record.user_id, "sessions": sessions}, tmp, indent=2)
        os.replace(tmp.name, path)

    return len(sessions)


def read_session_records(history_dir: Path, user_id: str) -> list[SessionRecord]:
    """Read a user's history, oldest first. Empty if none was recorded."""
    path = history_path(history_dir, user_id)
    if not path.exists():
        return []
    with open(path) as f:
        fcntl.flock(f, fcntl.LOCK_SH)
        data = json.load(f)
        fcntl.flock(f, fcntl.LOCK_UN)
    return [
        SessionRecord.model_validate(entry)
        for entry in data.get("sessions", [])
        if entry.get("user_id") == user_id
    ]
