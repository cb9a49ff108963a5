from enum import Enum


class ActionKind(Enum):
    """The browser actions pagecap can run"""
    SCREENSHOT = "screenshot"
    CLICK_AND_CAPTURE = "click-and-capture"
    SCROLL_AND_CAPTURE = "scroll-and-capture"
    FILL_FORM = "fill-form"
    CAPTURE_TITLE = "capture-title"

    @property
    def produces_text(self) -> bool:
        return self is ActionKind.CAPTURE_TITLE
