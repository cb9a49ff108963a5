import logging
import os
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from .errors import ActionError, ErrorKind

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT_MS = 30000
ACTION_TIMEOUT_MS = 30000

CHROMIUM_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--disable-gpu'
]


class BrowserSession:
    """One headless Chromium with one page, released on every exit path"""

    def __init__(self, headless=True, executable_path: Optional[str] = None,
                 navigation_timeout=NAVIGATION_TIMEOUT_MS, action_timeout=ACTION_TIMEOUT_MS):
        self.headless = headless
        self.executable_path = executable_path or os.environ.get("PAGECAP_CHROMIUM_PATH") or None
        self.navigation_timeout = navigation_timeout
        self.action_timeout = action_timeout
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

    async def __aenter__(self):
        """Async context manager entry"""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def start(self):
        """Launch the browser and open the single page"""
        try:
            self.playwright = await async_playwright().start()

            launch_options = {'headless': self.headless, 'args': CHROMIUM_ARGS}
            if self.executable_path:
                launch_options['executable_path'] = self.executable_path

            self.browser = await self.playwright.chromium.launch(**launch_options)
            self.context = await self.browser.new_context()
            self.page = await self.context.new_page()
            self.page.set_default_navigation_timeout(self.navigation_timeout)
            self.page.set_default_timeout(self.action_timeout)

        except Exception as e:
            logger.error(f"Failed to start browser: {e}")
            await self.close()
            raise

    async def close(self):
        """Clean up browser resources; each step runs even if an earlier one fails"""
        steps = [
            ('page', self.page.close if self.page else None),
            ('context', self.context.close if self.context else None),
            ('browser', self.browser.close if self.browser else None),
            ('playwright', self.playwright.stop if self.playwright else None),
        ]
        try:
            for name, step in steps:
                if step is None:
                    continue
                try:
                    await step()
                except Exception as e:
                    logger.warning(f"Error closing {name}: {e}")
        finally:
            self.page = None
            self.context = None
            self.browser = None
            self.playwright = None

    async def goto(self, url: str):
        """Navigate and wait until network activity settles"""
        if not self.page:
            raise RuntimeError("Browser not started. Use 'async with' or call start() first")

        logger.info(f"Navigating to {url}")
        try:
            await self.page.goto(url, wait_until='networkidle')
        except PlaywrightTimeoutError as e:
            raise ActionError(f"Navigation to {url} timed out: {e}", ErrorKind.NAVIGATION_TIMEOUT)
        except PlaywrightError as e:
            raise ActionError(f"Navigation to {url} failed: {e}", ErrorKind.NAVIGATION_FAILED)
