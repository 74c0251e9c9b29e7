"""Shared test fixtures for asiajobs."""

import json
from datetime import datetime, timezone

import pytest

from asiajobs.models import Job


@pytest.fixture
def make_job():
    def _make(key: str, title: str = "Teacher", posted: datetime | None = None, **kwargs) -> Job:
        return Job(
            identity_key=key,
            title=title,
            original_url=key,
            apply_url=key,
            posting_date=posted,
            **kwargs,
        )

    return _make


@pytest.fixture
def local_batch():
    return [
        {"title": "Teacher", "original_url": "https://x.com/1", "posting_date": "2024-01-01"},
    ]


@pytest.fixture
def live_batch():
    return [
        {"title": "Teacher", "apply_url": "https://x.com/1", "posting_date": "2024-06-01"},
        {"title": "Dean", "original_url": "https://x.com/2", "posting_date": "2024-05-01"},
    ]


@pytest.fixture
def raw_feed_item():
    """A record as produced by the RSS/Atom aggregation endpoint."""
    return {
        "id": "https://www.jobs.ac.uk/job/ABC123",
        "title": "XJTLU: Lecturer in Marketing",
        "description": "<p>Xi&#39;an Jiaotong-Liverpool University, based in <b>Suzhou</b>, "
                       "invites applications&nbsp;for a lecturer post.</p>",
        "school": "",
        "location": "",
        "country": "",
        "city": "",
        "source": "RSS",
        "posting_date": "Mon, 03 Jun 2024 09:00:00 GMT",
        "application_deadline": None,
        "category": "",
        "experience_level": "",
        "original_url": "https://www.jobs.ac.uk/job/ABC123",
        "apply_url": "https://www.jobs.ac.uk/job/ABC123",
    }


@pytest.fixture
def snapshot_files(tmp_path, local_batch):
    """Two snapshot files: a bare list and a {"jobs": [...]} wrapper."""
    bare = tmp_path / "real_asia_education_jobs.json"
    bare.write_text(json.dumps(local_batch))

    wrapped = tmp_path / "asia_education_jobs_database.json"
    wrapped.write_text(json.dumps({
        "jobs": [
            {
                "title": "Primary Teacher",
                "school": "Dulwich College Seoul",
                "location": "Seoul",
                "original_url": "https://x.com/3",
                "posting_date": "2024-03-01",
            },
        ],
    }))
    return [bare, wrapped]


@pytest.fixture
def utc():
    def _utc(*args) -> datetime:
        return datetime(*args, tzinfo=timezone.utc)

    return _utc
