from unittest.mock import AsyncMock, MagicMock

import pytest

from pagecap import cli
from pagecap.actions import ActionKind
from pagecap.errors import ErrorKind
from pagecap.runner import ActionResult


class TestCli:
    """Test cases for the command line interface"""

    def test_defaults(self):
        args = cli.build_parser().parse_args(["screenshot", "https://example.com"])
        assert (args.width, args.height, args.full_page, args.local) == (1280, 720, False, False)

        args = cli.build_parser().parse_args(["scroll", "https://example.com"])
        assert (args.steps, args.step_size) == (3, 800)

        args = cli.build_parser().parse_args(["click", "https://example.com", "#more"])
        assert args.wait_time == 1000

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    @pytest.fixture
    def runner(self, mocker):
        runner = MagicMock()
        mocker.patch("pagecap.cli.make_runner", return_value=runner)
        return runner

    def test_title_printed(self, runner, capsys):
        runner.capture_title = AsyncMock(return_value=ActionResult(
            kind=ActionKind.CAPTURE_TITLE, url="https://example.com", text="Example Domain"))

        assert cli.run(["title", "https://example.com"]) == 0
        assert capsys.readouterr().out == "Example Domain\n"

    def test_failure_exit_status(self, runner, capsys):
        runner.fill_form = AsyncMock(return_value=ActionResult.failure(
            ActionKind.FILL_FORM, "https://example.com", ErrorKind.SELECTOR_NOT_FOUND, "no #go", exit_code=5))

        assert cli.run(["fill-form", "https://example.com", '{"#a": "1"}', "#go"]) == 5
        assert "selector_not_found" in capsys.readouterr().err

    def test_build(self, runner, capsys):
        environment = MagicMock(image_tag="pagecap-env:abc", reused=True)
        runner.build_environment = AsyncMock(return_value=environment)

        assert cli.run(["build", "--force"]) == 0
        runner.build_environment.assert_awaited_once_with(force=True)
        assert "pagecap-env:abc reused" in capsys.readouterr().out
