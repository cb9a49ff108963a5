import subprocess
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from pagecap.browser import BrowserSession
from pagecap.config import RunnerConfig


@pytest.fixture
def fake_page():
    """Playwright page double whose screenshot() writes a real PNG"""
    page = MagicMock()
    page.viewport = {'width': 1280, 'height': 720}

    async def set_viewport_size(size):
        page.viewport = dict(size)

    async def screenshot(path=None, full_page=False, type='png'):
        Image.new('RGB', (page.viewport['width'], page.viewport['height'])).save(path, format='PNG')

    page.goto = AsyncMock(return_value=None)
    page.set_viewport_size = AsyncMock(side_effect=set_viewport_size)
    page.screenshot = AsyncMock(side_effect=screenshot)
    page.wait_for_selector = AsyncMock(return_value=MagicMock())
    page.click = AsyncMock(return_value=None)
    page.type = AsyncMock(return_value=None)
    page.evaluate = AsyncMock(return_value=None)
    page.wait_for_timeout = AsyncMock(return_value=None)
    page.title = AsyncMock(return_value="Example Domain")
    page.close = AsyncMock(return_value=None)
    return page


@pytest.fixture
def session(fake_page):
    """A BrowserSession with the fake page already open"""
    browser_session = BrowserSession()
    browser_session.page = fake_page
    return browser_session


@pytest.fixture
def session_factory(session):
    """Factory usable wherever BrowserSession is injected"""
    session.close = AsyncMock(return_value=None)

    class _Factory:
        def __init__(self):
            self.sessions = []

        def __call__(self):
            self.sessions.append(session)
            return self

        async def __aenter__(self):
            return session

        async def __aexit__(self, exc_type, exc_val, exc_tb):
            await session.close()

    return _Factory()


@pytest.fixture
def mock_subprocess():
    """Mock subprocess module"""
    mock = MagicMock()
    mock.run = MagicMock(return_value=MagicMock(returncode=0, stdout="", stderr=""))
    mock.CalledProcessError = subprocess.CalledProcessError
    mock.SubprocessError = subprocess.SubprocessError
    mock.TimeoutExpired = subprocess.TimeoutExpired
    return mock


@pytest.fixture
def runner_config(tmp_path):
    return RunnerConfig(output_root=tmp_path / "out")


@pytest.fixture
def restore_root_logging():
    """LogManager replaces root handlers; put the previous ones back afterwards"""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
