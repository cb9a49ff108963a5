"""
Local Runner - Executes actions with the Playwright install on this host
"""

import logging
from pathlib import Path
from typing import Optional

from ..actions import BrowserAction
from ..browser import BrowserSession
from .base import ActionRunner
from .result import ActionResult

logger = logging.getLogger(__name__)


class LocalActionRunner(ActionRunner):
    """Runs each action in a fresh in-process browser session"""

    def __init__(self, config=None, log_manager=None, session_factory=BrowserSession):
        super().__init__(config, log_manager)
        self.session_factory = session_factory

    async def _execute(self, action: BrowserAction, output_dir: Optional[Path]) -> ActionResult:
        async with self.session_factory() as session:
            output = await action.perform(session, output_dir)

        return ActionResult(
            kind=action.kind,
            url=action.url,
            output_dir=output_dir,
            artifacts=output.artifacts,
            text=output.text
        )
