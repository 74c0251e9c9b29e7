"""Identity keys and corpus merging."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime

from asiajobs.models import Job

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("original_url", "apply_url", "id")


def identity_key_of(record) -> str:
    """Dedup key for a record: first non-empty of original_url, apply_url, id."""
    for name in IDENTITY_FIELDS:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        key = str(value).strip() if value is not None else ""
        if key:
            return key
    return ""


def merge(existing: Sequence[Job], incoming: Sequence[Job]) -> list[Job]:
    """Fold an incoming batch into an existing corpus.

    Records already in the corpus are never replaced; incoming records with
    an empty or already-seen key are dropped. The result is ordered newest
    first, with undated records last.
    """
    _check_sequence("existing", existing)
    _check_sequence("incoming", incoming)

    index: dict[str, Job] = {job.identity_key: job for job in existing}
    added = 0
    for job in incoming:
        key = (job.identity_key or "").strip()
        if not key or key in index:
            continue
        index[key] = job
        added += 1

    logger.debug("Merged %d new of %d incoming into %d existing", added, len(incoming), len(existing))
    return sort_by_recency(index.values())


def sort_by_recency(jobs) -> list[Job]:
    """Stable sort by posting_date descending; None sorts last."""
    return sorted(jobs, key=_recency_key)


def _recency_key(job: Job) -> tuple[int, float]:
    posted: datetime | None = job.posting_date
    if posted is None:
        return (1, 0.0)
    return (0, -posted.timestamp())


def _check_sequence(name: str, value) -> None:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise TypeError(f"merge() expects a sequence of jobs for {name!r}, got {type(value).__name__}")
