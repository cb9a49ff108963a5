from typing import Any, Dict

from .action_kind import ActionKind
from .base import BrowserAction
from .click_action import ClickAction
from .form_action import FormAction
from .screenshot_action import ScreenshotAction
from .scroll_action import ScrollAction
from .title_action import TitleAction

ACTIONS = {
    ActionKind.SCREENSHOT: ScreenshotAction,
    ActionKind.CLICK_AND_CAPTURE: ClickAction,
    ActionKind.SCROLL_AND_CAPTURE: ScrollAction,
    ActionKind.FILL_FORM: FormAction,
    ActionKind.CAPTURE_TITLE: TitleAction,
}


def create_action(kind: ActionKind, url: str, params: Dict[str, Any] = None) -> BrowserAction:
    """Instantiate the action class registered for kind"""
    return ACTIONS[ActionKind(kind)].from_params(url, params or {})
