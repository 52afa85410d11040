"""Tests for settings loading and the content probe factory."""

from __future__ import annotations

import pytest

import services.content_probe as content_probe_module
from config.settings import Settings, get_settings
from services.content_probe import LocalDiskContentProbe, S3ContentProbe, get_content_probe


@pytest.fixture
def fresh_probe(monkeypatch):
    """Clear cached settings and probe around each test."""
    get_settings.cache_clear()
    monkeypatch.setattr(content_probe_module, "_probe", None)
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CONTENT_BACKEND", raising=False)
        settings = Settings(_env_file=None)
        assert settings.content_backend == "local"
        assert settings.attempts_page_limit == 100
        assert settings.stats_window_days == 7

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICE_PORT", "8080")
        monkeypatch.setenv("S3_BUCKET", "deeds")
        settings = Settings(_env_file=None)
        assert settings.service_port == 8080
        assert settings.s3_bucket == "deeds"


class TestGetContentProbe:
    def test_local_backend(self, fresh_probe, monkeypatch, tmp_path):
        upload_dir = tmp_path / "scans"
        monkeypatch.setenv("CONTENT_BACKEND", "local")
        monkeypatch.setenv("UPLOAD_PATH", str(upload_dir))
        probe = get_content_probe()
        assert isinstance(probe, LocalDiskContentProbe)
        assert upload_dir.is_dir()
        assert get_content_probe() is probe

    def test_s3_backend(self, fresh_probe, monkeypatch):
        monkeypatch.setenv("CONTENT_BACKEND", "s3")
        monkeypatch.setenv("S3_BUCKET", "deeds")
        monkeypatch.setenv("S3_REGION", "us-west-2")
        probe = get_content_probe()
        assert isinstance(probe, S3ContentProbe)
        assert probe.public_url("a.pdf") == "https://deeds.s3.us-west-2.amazonaws.com/a.pdf"

    def test_s3_without_bucket_falls_back_to_local(self, fresh_probe, monkeypatch, tmp_path):
        monkeypatch.setenv("CONTENT_BACKEND", "s3")
        monkeypatch.setenv("S3_BUCKET", "")
        monkeypatch.setenv("UPLOAD_PATH", str(tmp_path))
        assert isinstance(get_content_probe(), LocalDiskContentProbe)
