"""Configuration loading via Pydantic settings."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel


class SnapshotConfig(BaseModel):
    paths: list[str] = ["real_asia_education_jobs.json", "asia_education_jobs_database.json"]


class LiveConfig(BaseModel):
    enabled: bool = True
    url: str = "http://localhost:8888/.netlify/functions/fetch_jobs"
    timeout: float = 20.0

    @property
    def effective_url(self) -> str:
        return os.getenv("ASIAJOBS_LIVE_URL", "") or self.url


class SchedulerConfig(BaseModel):
    enabled: bool = False
    interval_hours: float = 6.0


class AsiaJobsConfig(BaseModel):
    snapshot: SnapshotConfig = SnapshotConfig()
    live: LiveConfig = LiveConfig()
    scheduler: SchedulerConfig = SchedulerConfig()
    corpus_path: str = "corpus.json"
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> AsiaJobsConfig:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = Path("config.yaml")

    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return AsiaJobsConfig(**data)

    return AsiaJobsConfig()
