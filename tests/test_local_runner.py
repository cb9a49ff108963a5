import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagecap.errors import ErrorKind
from pagecap.monitoring import LogManager
from pagecap.runner import LocalActionRunner, RunnerBuilder


class TestLocalActionRunner:
    """Test cases for the in-process runner"""

    @pytest.fixture
    def runner(self, runner_config, session_factory):
        return LocalActionRunner(runner_config, session_factory=session_factory)

    @pytest.mark.asyncio
    async def test_screenshot_directory(self, runner, session):
        result = await runner.capture_screenshot("https://example.com", width=640, height=480)

        assert result.ok
        directory = result.directory()
        assert directory.names() == ["screenshot.png"]
        assert directory.image_size("screenshot.png") == (640, 480)
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_each_call_gets_a_fresh_directory(self, runner):
        first = await runner.capture_screenshot("https://example.com")
        second = await runner.capture_screenshot("https://example.com")
        assert first.output_dir != second.output_dir
        assert first.output_dir.parent == second.output_dir.parent

    @pytest.mark.asyncio
    async def test_fill_form(self, runner):
        result = await runner.fill_form("https://example.com", '{"#name": "Ada"}', "#submit")
        assert result.artifacts == ["before-submit.png", "after-submit.png"]
        assert len(result.directory()) == 2

    @pytest.mark.asyncio
    async def test_title(self, runner, fake_page):
        fake_page.title.return_value = "Hello, world"
        result = await runner.capture_title("https://example.com")
        assert result.unwrap() == "Hello, world"

    @pytest.mark.asyncio
    async def test_failure_cleans_up(self, runner, fake_page, session, runner_config):
        fake_page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

        result = await runner.scroll_and_capture("https://slow.example")

        assert result.error_kind is ErrorKind.NAVIGATION_TIMEOUT
        assert result.output_dir is None
        assert list(runner_config.output_root.glob("*")) == []
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_keep_failed_output(self, runner_config, session_factory, fake_page):
        runner = LocalActionRunner(runner_config.with_overrides(keep_failed_output=True),
                                   session_factory=session_factory)
        fake_page.click.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

        result = await runner.fill_form("https://example.com", {"#name": "Ada"}, "#submit")

        assert not result.ok
        kept = list(runner_config.output_root.glob("fill-form_*"))
        assert len(kept) == 1
        assert [p.name for p in kept[0].iterdir()] == ["before-submit.png"]

    @pytest.mark.asyncio
    async def test_no_environment(self, runner):
        assert await runner.build_environment() is None

    @pytest.mark.asyncio
    async def test_action_events_logged(self, runner_config, session_factory, tmp_path, restore_root_logging):
        log_manager = LogManager(log_dir=str(tmp_path / "logs"), log_level="INFO")
        runner = LocalActionRunner(runner_config, log_manager=log_manager, session_factory=session_factory)

        await runner.capture_title("https://example.com")
        log_manager.actions_handler.flush()

        lines = list((tmp_path / "logs").glob("actions_*.log"))[0].read_text().splitlines()
        assert '"kind": "capture-title"' in lines[-1]
        assert '"ok": true' in lines[-1]


class TestRunnerBuilder:
    """Test cases for RunnerBuilder"""

    def test_local(self, runner_config):
        runner = RunnerBuilder(runner_config).locally().build()
        assert isinstance(runner, LocalActionRunner)

    def test_docker_with_environment_overrides(self, runner_config):
        runner = (RunnerBuilder(runner_config)
                  .with_environment(base_image="debian:bookworm-slim")
                  .with_output_root(runner_config.output_root / "shots")
                  .with_run_timeout(60)
                  .build())

        assert runner.environment_spec.base_image == "debian:bookworm-slim"
        assert runner.config.output_root.name == "shots"
        assert runner.config.log_dir == runner_config.output_root / "shots" / "logs"
        assert runner.config.run_timeout == 60
        assert runner.log_manager is None
