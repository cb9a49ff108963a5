from pathlib import Path

from pagecap.config import RunnerConfig


class TestRunnerConfig:
    """Test cases for RunnerConfig"""

    def test_defaults(self):
        config = RunnerConfig()
        assert config.output_root == Path("pagecap_output")
        assert config.log_dir == Path("pagecap_output/logs")
        assert config.run_timeout is None
        assert config.docker_bin == "docker"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PAGECAP_OUTPUT_ROOT", str(tmp_path))
        monkeypatch.setenv("PAGECAP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PAGECAP_RUN_TIMEOUT", "90")
        monkeypatch.setenv("PAGECAP_DOCKER_BIN", "podman")
        monkeypatch.delenv("PAGECAP_LOG_DIR", raising=False)

        config = RunnerConfig.from_env()

        assert config.output_root == tmp_path
        assert config.log_dir == tmp_path / "logs"
        assert config.log_level == "DEBUG"
        assert config.run_timeout == 90.0
        assert config.docker_bin == "podman"

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("PAGECAP_LOG_LEVEL", "DEBUG")
        config = RunnerConfig.from_env(log_level="WARNING", run_timeout=None)
        assert config.log_level == "WARNING"
