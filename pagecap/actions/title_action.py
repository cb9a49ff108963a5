from pathlib import Path

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction


class TitleAction(BrowserAction):
    """Load the page and read document.title"""

    kind = ActionKind.CAPTURE_TITLE

    def to_params(self):
        return {}

    async def perform(self, session, output_dir: Path = None) -> ActionOutput:
        await session.goto(self.url)
        return ActionOutput(text=await session.page.title())
