"""
Browser actions - one class per action kind
"""

from .action_kind import ActionKind
from .base import ActionOutput, BrowserAction
from .screenshot_action import ScreenshotAction
from .click_action import ClickAction
from .scroll_action import ScrollAction
from .form_action import FormAction, parse_form_data
from .title_action import TitleAction
from .registry import ACTIONS, create_action
from .request import ActionRequest

__all__ = [
    'ActionKind',
    'ActionOutput',
    'ActionRequest',
    'BrowserAction',
    'ScreenshotAction',
    'ClickAction',
    'ScrollAction',
    'FormAction',
    'TitleAction',
    'ACTIONS',
    'create_action',
    'parse_form_data'
]
