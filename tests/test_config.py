"""Tests for configuration loading."""

import yaml

from asiajobs.config import AsiaJobsConfig, LiveConfig, SchedulerConfig, SnapshotConfig, load_config


class TestDefaults:
    def test_snapshot_defaults(self):
        cfg = SnapshotConfig()
        assert cfg.paths == ["real_asia_education_jobs.json", "asia_education_jobs_database.json"]

    def test_live_defaults(self):
        cfg = LiveConfig()
        assert cfg.enabled is True
        assert cfg.timeout == 20.0

    def test_scheduler_defaults(self):
        cfg = SchedulerConfig()
        assert cfg.enabled is False
        assert cfg.interval_hours == 6.0

    def test_effective_url_env(self, monkeypatch):
        monkeypatch.setenv("ASIAJOBS_LIVE_URL", "https://env.test/jobs")
        assert LiveConfig(url="https://file.test/jobs").effective_url == "https://env.test/jobs"

    def test_effective_url_fallback(self, monkeypatch):
        monkeypatch.delenv("ASIAJOBS_LIVE_URL", raising=False)
        assert LiveConfig(url="https://file.test/jobs").effective_url == "https://file.test/jobs"


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.yaml")
        assert isinstance(cfg, AsiaJobsConfig)
        assert cfg.corpus_path == "corpus.json"

    def test_empty_file_returns_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")
        cfg = load_config(config_path)
        assert isinstance(cfg, AsiaJobsConfig)

    def test_partial_config(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.dump({"live": {"enabled": False}}))
        cfg = load_config(config_path)
        assert cfg.live.enabled is False
        # Other fields should still have defaults
        assert cfg.scheduler.interval_hours == 6.0
        assert cfg.log_level == "INFO"

    def test_full_config(self, tmp_path):
        data = {
            "snapshot": {"paths": ["a.json"]},
            "live": {"url": "https://jobs.test/fn", "timeout": 5},
            "scheduler": {"enabled": True, "interval_hours": 1.5},
            "corpus_path": "data/corpus.json",
            "log_level": "debug",
        }
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.dump(data))
        cfg = load_config(config_path)
        assert cfg.snapshot.paths == ["a.json"]
        assert cfg.live.timeout == 5.0
        assert cfg.scheduler.interval_hours == 1.5
        assert cfg.corpus_path == "data/corpus.json"

    def test_none_path_uses_default(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        # No config.yaml exists → defaults
        cfg = load_config(None)
        assert isinstance(cfg, AsiaJobsConfig)
