"""
Scroll Action - Scrolls down in fixed steps, capturing each position
"""

from pathlib import Path

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction, positive_int

SCROLL_SETTLE_MS = 1000

SCROLL_SCRIPT = "(step) => window.scrollBy(0, step)"


class ScrollAction(BrowserAction):
    """Capture scroll-0.png, then scroll step_size px and capture, scroll_steps times"""

    kind = ActionKind.SCROLL_AND_CAPTURE

    def __init__(self, url: str, scroll_steps: int = 3, step_size: int = 800):
        super().__init__(url)
        self.scroll_steps = positive_int("scroll_steps", scroll_steps, allow_zero=True)
        self.step_size = positive_int("step_size", step_size)

    def to_params(self):
        return {'scroll_steps': self.scroll_steps, 'step_size': self.step_size}

    @staticmethod
    def artifact_name(index: int) -> str:
        return f"scroll-{index}.png"

    def expected_artifacts(self):
        return [self.artifact_name(i) for i in range(self.scroll_steps + 1)]

    async def perform(self, session, output_dir: Path) -> ActionOutput:
        await session.goto(self.url)

        artifacts = [await self.screenshot(session, output_dir, self.artifact_name(0))]

        for i in range(1, self.scroll_steps + 1):
            await session.page.evaluate(SCROLL_SCRIPT, self.step_size)

            # Give lazy-loaded content a chance to appear
            await session.page.wait_for_timeout(SCROLL_SETTLE_MS)

            artifacts.append(await self.screenshot(session, output_dir, self.artifact_name(i)))

        return ActionOutput(artifacts=artifacts)
