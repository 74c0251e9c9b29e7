"""Search, filter and sort a job corpus for display."""

from collections.abc import Iterable

from asiajobs.models import Job, SortOrder

SEARCH_FIELDS = ("title", "school", "location", "country", "city", "category")


def filter_jobs(
    jobs: Iterable[Job],
    search: str | None = None,
    country: str | None = None,
    category: str | None = None,
    sort: SortOrder | str = SortOrder.DATE_DESC,
) -> list[Job]:
    """Filter by free-text search, exact country and category; then sort."""
    query = (search or "").strip().lower()
    selected = []
    for job in jobs:
        if country and job.country != country:
            continue
        if category and job.category != category:
            continue
        if query and query not in _search_blob(job):
            continue
        selected.append(job)
    return sort_jobs(selected, SortOrder(sort))


def sort_jobs(jobs: list[Job], sort: SortOrder) -> list[Job]:
    if sort == SortOrder.TITLE_ASC:
        return sorted(jobs, key=lambda j: j.title.casefold())
    if sort == SortOrder.DATE_ASC:
        return sorted(jobs, key=lambda j: j.posting_date.timestamp() if j.posting_date else float("-inf"))
    return sorted(jobs, key=lambda j: j.posting_date.timestamp() if j.posting_date else float("-inf"), reverse=True)


def _search_blob(job: Job) -> str:
    return " ".join(getattr(job, name) for name in SEARCH_FIELDS).lower()
