"""
Click Action - Clicks an element and captures the result
"""

from pathlib import Path

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction, non_empty_str, positive_int


class ClickAction(BrowserAction):
    """Click selector, wait wait_time ms, capture after-click.png"""

    kind = ActionKind.CLICK_AND_CAPTURE
    OUTPUT_NAME = "after-click.png"

    def __init__(self, url: str, selector: str, wait_time: int = 1000):
        super().__init__(url)
        self.selector = non_empty_str("selector", selector)
        self.wait_time = positive_int("wait_time", wait_time, allow_zero=True)

    def to_params(self):
        return {'selector': self.selector, 'wait_time': self.wait_time}

    def expected_artifacts(self):
        return [self.OUTPUT_NAME]

    async def perform(self, session, output_dir: Path) -> ActionOutput:
        await session.goto(self.url)

        await self.wait_for(session, self.selector)
        await self.click(session, self.selector)

        # Let animations and follow-up requests settle
        await session.page.wait_for_timeout(self.wait_time)

        name = await self.screenshot(session, output_dir, self.OUTPUT_NAME)
        return ActionOutput(artifacts=[name])
