"""
Screenshot Action - Captures the page at a fixed viewport
"""

from pathlib import Path

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction, boolean, positive_int


class ScreenshotAction(BrowserAction):
    """Set the viewport, load the page and capture screenshot.png"""

    kind = ActionKind.SCREENSHOT
    OUTPUT_NAME = "screenshot.png"

    def __init__(self, url: str, width: int = 1280, height: int = 720, full_page: bool = False):
        super().__init__(url)
        self.width = positive_int("width", width)
        self.height = positive_int("height", height)
        self.full_page = boolean("full_page", full_page)

    def to_params(self):
        return {'width': self.width, 'height': self.height, 'full_page': self.full_page}

    def expected_artifacts(self):
        return [self.OUTPUT_NAME]

    async def perform(self, session, output_dir: Path) -> ActionOutput:
        await session.page.set_viewport_size({'width': self.width, 'height': self.height})
        await session.goto(self.url)

        name = await self.screenshot(session, output_dir, self.OUTPUT_NAME, full_page=self.full_page)
        return ActionOutput(artifacts=[name])
