"""Raw job record normalization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as date_parser
from pydantic import ValidationError

from asiajobs.classifier.category import classify_category
from asiajobs.classifier.country import classify_country
from asiajobs.collector.merge import identity_key_of
from asiajobs.collector.sanitize import sanitize_description
from asiajobs.models import Job, RawJob

logger = logging.getLogger(__name__)


def parse_date(value: Any) -> datetime | None:
    """Coerce a date-ish value to an aware UTC datetime, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value, tz=timezone.utc)
        text = str(value).strip()
        if not text:
            return None
        return _as_utc(date_parser.parse(text))
    except (ValueError, OverflowError, OSError, TypeError):
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def infer_school(title: str, school: str = "") -> tuple[str, str]:
    """Split "SCHOOL NAME: Role" titles into (school, title).

    Only applies when no school is known and the part before the first colon
    is longer than three characters and all upper case.
    """
    if school or ":" not in title:
        return school, title
    left, rest = title.split(":", 1)
    left = left.strip()
    if len(left) > 3 and left == left.upper():
        return left, rest.strip() or title
    return school, title


def normalize(raw: Mapping[str, Any] | RawJob) -> Job | None:
    """Normalize one raw record. Returns None when the record is unusable."""
    try:
        record = raw if isinstance(raw, RawJob) else RawJob.model_validate(raw)
    except ValidationError as e:
        logger.debug("Dropping malformed record: %s", e)
        return None

    original_url = record.original_url.strip() or record.apply_url.strip()
    apply_url = record.apply_url.strip() or original_url
    title = record.title.strip()
    if not title and not original_url:
        return None

    school, title = infer_school(title, record.school.strip())

    partial = {
        "country": record.country,
        "location": record.location,
        "city": record.city,
        "school": school,
        "title": title,
        "description": sanitize_description(record.description),
        "original_url": original_url,
        "apply_url": apply_url,
        "id": record.id.strip(),
    }
    key = identity_key_of(partial)
    if not key:
        return None

    return Job(
        identity_key=key,
        title=title,
        description=partial["description"],
        school=school,
        location=record.location.strip(),
        city=record.city.strip(),
        country=classify_country(partial),
        category=record.category.strip() or classify_category(title),
        experience_level=record.experience_level.strip(),
        source=record.source.strip(),
        id=partial["id"],
        posting_date=parse_date(record.posting_date),
        application_deadline=parse_date(record.application_deadline),
        original_url=original_url,
        apply_url=apply_url,
    )


def normalize_batch(records: Iterable[Any]) -> list[Job]:
    """Normalize a batch of raw records, silently dropping unusable ones."""
    jobs: list[Job] = []
    total = 0
    for raw in records:
        total += 1
        if not isinstance(raw, (Mapping, RawJob)):
            continue
        job = normalize(raw)
        if job is not None:
            jobs.append(job)
    if total != len(jobs):
        logger.info("Normalized %d of %d records (%d dropped)", len(jobs), total, total - len(jobs))
    return jobs
