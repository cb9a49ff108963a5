"""
Base Runner - Per-action operations shared by every execution backend
"""

import logging
import shutil
import time
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from ..actions import ActionKind, ActionRequest, BrowserAction
from ..config import RunnerConfig
from ..errors import EnvironmentBuildError, ErrorKind, PagecapError, classify_error, exit_code_for
from .result import ActionResult

logger = logging.getLogger(__name__)


class ActionRunner(ABC):
    """
    Runs browser actions and returns structured results.

    Every call is independent: it gets a fresh output directory under
    config.output_root, and a failed call leaves nothing behind.
    Subclasses only decide where the action executes.
    """

    def __init__(self, config: Optional[RunnerConfig] = None, log_manager=None):
        self.config = config or RunnerConfig()
        self.log_manager = log_manager

    async def capture_screenshot(self, url: str, width: int = 1280, height: int = 720,
                                 full_page: bool = False) -> ActionResult:
        """Capture screenshot.png at the given viewport"""
        return await self.run(ActionRequest(ActionKind.SCREENSHOT, url, {
            'width': width, 'height': height, 'full_page': full_page
        }))

    async def click_and_capture(self, url: str, selector: str, wait_time: int = 1000) -> ActionResult:
        """Click selector and capture after-click.png"""
        return await self.run(ActionRequest(ActionKind.CLICK_AND_CAPTURE, url, {
            'selector': selector, 'wait_time': wait_time
        }))

    async def scroll_and_capture(self, url: str, scroll_steps: int = 3, step_size: int = 800) -> ActionResult:
        """Capture scroll-0.png through scroll-<scroll_steps>.png"""
        return await self.run(ActionRequest(ActionKind.SCROLL_AND_CAPTURE, url, {
            'scroll_steps': scroll_steps, 'step_size': step_size
        }))

    async def fill_form(self, url: str, form_data: Union[str, Dict[str, str]],
                        submit_selector: str) -> ActionResult:
        """Fill form_data (selector -> value, or its JSON), then submit"""
        return await self.run(ActionRequest(ActionKind.FILL_FORM, url, {
            'form_data': form_data, 'submit_selector': submit_selector
        }))

    async def capture_title(self, url: str) -> ActionResult:
        """Read the page title; the result's text holds it"""
        return await self.run(ActionRequest(ActionKind.CAPTURE_TITLE, url))

    async def build_environment(self, force: bool = False):
        """Prepare the execution environment; backends without one return None"""
        return None

    async def run(self, request: ActionRequest) -> ActionResult:
        """Validate, execute and clean up one request"""
        start_time = time.time()

        try:
            action = request.to_action()
        except PagecapError as e:
            logger.warning(f"Rejected {request.kind.value} for {request.url}: {e}")
            result = ActionResult.failure(request.kind, request.url, e.kind, e.message,
                                          exit_code=exit_code_for(e.kind))
            return self._finish(result, None, start_time)

        output_dir = None if action.kind.produces_text else self._new_output_dir(action.kind)
        logger.info(f"Running {action.kind.value} for {action.url}")

        try:
            result = await self._execute(action, output_dir)
        except EnvironmentBuildError:
            self._discard(output_dir)
            raise
        except Exception as e:
            error_kind = classify_error(e)
            logger.error(f"{action.kind.value} failed for {action.url}: {e}")
            result = ActionResult.failure(action.kind, action.url, error_kind, str(e),
                                          exit_code=exit_code_for(error_kind))

        return self._finish(result, output_dir, start_time)

    @abstractmethod
    async def _execute(self, action: BrowserAction, output_dir: Optional[Path]) -> ActionResult:
        """Execute action, writing any screenshots into output_dir"""
        pass

    def _new_output_dir(self, kind: ActionKind) -> Path:
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        output_dir = self.config.output_root / f"{kind.value}_{stamp}_{uuid.uuid4().hex[:8]}"
        output_dir.mkdir(parents=True, exist_ok=False)
        return output_dir

    def _discard(self, output_dir: Optional[Path]):
        if output_dir is None or self.config.keep_failed_output:
            return
        shutil.rmtree(output_dir, ignore_errors=True)

    def _finish(self, result: ActionResult, output_dir: Optional[Path], start_time: float) -> ActionResult:
        result.duration = time.time() - start_time

        if result.ok:
            logger.info(f"{result.kind.value} finished in {result.duration:.2f}s "
                        f"({len(result.artifacts)} artifact(s))")
        else:
            # No partial results on failure
            self._discard(output_dir)
            result.output_dir = None
            result.artifacts = []
            result.text = None
            logger.error(f"{result.kind.value} failed [{result.error_kind.value}]: {result.error}")

        if self.log_manager:
            self.log_manager.log_action_event(result)

        return result
