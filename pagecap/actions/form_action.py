"""
Form Action - Fills form fields, submits, and captures before/after
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction, invalid, non_empty_str

logger = logging.getLogger(__name__)

SUBMIT_SETTLE_MS = 2000


def parse_form_data(form_data: Union[str, Dict[str, str]]) -> Dict[str, str]:
    """Accept a selector->value map, or its JSON encoding"""
    if isinstance(form_data, str):
        try:
            form_data = json.loads(form_data)
        except json.JSONDecodeError as e:
            raise invalid(f"form_data is not valid JSON: {e}")

    if not isinstance(form_data, dict):
        raise invalid(f"form_data must be an object of selector -> value, got {type(form_data).__name__}")

    for selector, value in form_data.items():
        if not selector:
            raise invalid("form_data contains an empty selector")
        if not isinstance(value, str):
            raise invalid(f"form_data value for {selector!r} must be a string, got {value!r}")

    return dict(form_data)


class FormAction(BrowserAction):
    """Type each value into its selector, capture, click submit, capture again"""

    kind = ActionKind.FILL_FORM
    BEFORE_NAME = "before-submit.png"
    AFTER_NAME = "after-submit.png"

    def __init__(self, url: str, form_data: Union[str, Dict[str, str]], submit_selector: str):
        super().__init__(url)
        self.form_data = parse_form_data(form_data)
        self.submit_selector = non_empty_str("submit_selector", submit_selector)

    def to_params(self):
        return {'form_data': self.form_data, 'submit_selector': self.submit_selector}

    def expected_artifacts(self):
        return [self.BEFORE_NAME, self.AFTER_NAME]

    async def perform(self, session, output_dir: Path) -> ActionOutput:
        await session.goto(self.url)

        for selector, value in self.form_data.items():
            await self.wait_for(session, selector)
            await self.type_into(session, selector, value)
        logger.info(f"Filled {len(self.form_data)} field(s)")

        before = await self.screenshot(session, output_dir, self.BEFORE_NAME)

        await self.wait_for(session, self.submit_selector)
        await self.click(session, self.submit_selector)
        await session.page.wait_for_timeout(SUBMIT_SETTLE_MS)

        after = await self.screenshot(session, output_dir, self.AFTER_NAME)
        return ActionOutput(artifacts=[before, after])
