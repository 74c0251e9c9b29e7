"""One refresh cycle: fetch every source, normalize, merge into the corpus."""

import logging
from pathlib import Path

import httpx
from pydantic import BaseModel, Field

from asiajobs.collector.base import BaseSource
from asiajobs.collector.live import LiveSource
from asiajobs.collector.merge import merge
from asiajobs.collector.normalize import normalize_batch
from asiajobs.collector.snapshot import SnapshotSource, load_snapshot, save_snapshot
from asiajobs.config import AsiaJobsConfig
from asiajobs.models import Job

logger = logging.getLogger(__name__)


class RefreshResult(BaseModel):
    """Outcome of a refresh cycle."""
    jobs: list[Job] = Field(default_factory=list)
    fetched: dict[str, int] = Field(default_factory=dict)
    normalized: dict[str, int] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    previous_count: int = 0

    @property
    def new_count(self) -> int:
        return len(self.jobs) - self.previous_count


def refresh(corpus: list[Job], sources: list[BaseSource]) -> RefreshResult:
    """Fold each source's records into the corpus, in source order.

    A failing source is logged and skipped; the others still merge.
    """
    result = RefreshResult(jobs=list(corpus), previous_count=len(corpus))

    for source in sources:
        try:
            records = source.fetch()
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
            logger.warning("Source %s failed: %s", source.name, e)
            result.errors[source.name] = str(e)
            records = []

        batch = normalize_batch(records)
        result.fetched[source.name] = len(records)
        result.normalized[source.name] = len(batch)
        result.jobs = merge(result.jobs, batch)

    logger.info(
        "Refresh: %d jobs (%d new), sources: %s",
        len(result.jobs),
        result.new_count,
        ", ".join(f"{k}={v}" for k, v in result.fetched.items()),
    )
    return result


def build_sources(config: AsiaJobsConfig) -> list[BaseSource]:
    """Snapshot source first, then the live endpoint when enabled."""
    sources: list[BaseSource] = [SnapshotSource(config.snapshot.paths)]
    if config.live.enabled and config.live.effective_url:
        sources.append(LiveSource(config.live.effective_url, timeout=config.live.timeout))
    return sources


def load_corpus(path: str | Path) -> list[Job]:
    """Load the stored corpus, or an empty one if none exists yet."""
    path = Path(path)
    if not path.exists():
        return []
    try:
        records = load_snapshot(path)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable corpus %s: %s", path, e)
        return []
    return merge([], normalize_batch(records))


def run_refresh(config: AsiaJobsConfig, sources: list[BaseSource] | None = None) -> RefreshResult:
    """Load the stored corpus, refresh it from all sources and save it back."""
    corpus = load_corpus(config.corpus_path)
    result = refresh(corpus, sources if sources is not None else build_sources(config))
    save_snapshot(result.jobs, config.corpus_path)
    return result
