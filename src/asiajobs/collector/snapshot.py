"""Local JSON snapshot source and corpus persistence."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from asiajobs.collector.base import BaseSource, extract_records
from asiajobs.models import Job

logger = logging.getLogger(__name__)


class SnapshotSource(BaseSource):
    """Read raw records from one or more local JSON files.

    Each file may hold a bare list of records or a {"jobs": [...]} wrapper.
    Missing or unreadable files contribute nothing.
    """

    name = "snapshot"

    def __init__(self, paths: list[str | Path]):
        self.paths = [Path(p) for p in paths]

    def fetch(self) -> list[dict[str, Any]]:
        records: list[dict[str, Any]] = []
        for path in self.paths:
            try:
                records.extend(load_snapshot(path))
            except (OSError, ValueError) as e:
                logger.warning("Skipping snapshot %s: %s", path, e)
        return records


def load_snapshot(path: str | Path) -> list[dict[str, Any]]:
    """Load raw records from a single snapshot file."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    return extract_records(payload)


def save_snapshot(jobs: list[Job], path: str | Path) -> Path:
    """Write the corpus in a form SnapshotSource can read back."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "count": len(jobs),
        "jobs": [job.model_dump(mode="json") for job in jobs],
    }
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
