"""JSON-lines event log for task store activity."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..state.tasks import Task


class EventLog:
    """Minimal logger that appends task events to a log file."""

    def __init__(self, log_file: Path) -> None:
        self.log_file = Path(log_file).expanduser()
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, payload: dict) -> None:
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), **payload}
        with self.log_file.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(entry) + "\n")

    def log_loaded(self, tasks: List[Task]) -> None:
        self._write({"event": "loaded", "count": len(tasks)})

    def log_created(self, task: Task) -> None:
        self._write({"event": "created", "task_id": task.id, "task": task.to_dict()})

    def log_toggled(self, task: Task) -> None:
        self._write({"event": "toggled", "task_id": task.id, "completed": task.completed})

    def log_deleted(self, task_id: str) -> None:
        self._write({"event": "deleted", "task_id": task_id})

    def log_failed(self, operation: str, reason: str, task_id: str | None = None) -> None:
        payload = {"event": "failed", "operation": operation, "reason": reason}
        if task_id is not None:
            payload["task_id"] = task_id
        self._write(payload)

    def read_entries(self) -> List[dict]:
        """Return every logged entry, skipping unreadable lines."""
        if not self.log_file.exists():
            return []
        entries: List[dict] = []
        for line in self.log_file.read_text(encoding="utf-8").splitlines():
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError:
                continue
        return entries
