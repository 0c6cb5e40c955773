import pytest


@pytest.fixture
def log_env(tmp_path, monkeypatch):
    """Point the codec log at a temporary file and keep console echo off."""
    log_file = tmp_path / "logs" / "codec.log"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CODEC_LOG_FILE", str(log_file))
    monkeypatch.setenv("PRINT_CODEC_LOGS", "false")
    monkeypatch.delenv("CODEC_LOG_LEVEL", raising=False)
    return log_file
