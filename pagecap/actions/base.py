"""
Base Action Interface - Abstract base class for all browser actions
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..errors import ActionError, ErrorKind
from .action_kind import ActionKind

logger = logging.getLogger(__name__)


@dataclass
class ActionOutput:
    """What an action produced: screenshot file names and/or captured text"""
    artifacts: List[str] = field(default_factory=list)
    text: Optional[str] = None


def invalid(message: str) -> ActionError:
    return ActionError(message, ErrorKind.INVALID_PARAMETERS)


def positive_int(name: str, value, allow_zero=False) -> int:
    """Validate an integer parameter"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise invalid(f"{name} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise invalid(f"{name} must be {bound}, got {value}")
    return value


def boolean(name: str, value) -> bool:
    """Validate a flag parameter"""
    if not isinstance(value, bool):
        raise invalid(f"{name} must be true or false, got {value!r}")
    return value


def non_empty_str(name: str, value) -> str:
    """Validate a selector-like string parameter"""
    if not isinstance(value, str) or not value:
        raise invalid(f"{name} must be a non-empty string, got {value!r}")
    return value


class BrowserAction(ABC):
    """Base interface for all browser actions.

    Parameters are validated on construction and are only ever handed to
    Playwright as call arguments.
    """

    kind: ActionKind = None

    def __init__(self, url: str):
        if not isinstance(url, str):
            raise invalid(f"url must be a string, got {url!r}")
        self.url = url

    @classmethod
    def from_params(cls, url: str, params: Dict[str, Any]) -> "BrowserAction":
        """Build an action from a flat parameter map"""
        try:
            return cls(url, **params)
        except TypeError as e:
            raise invalid(f"Bad parameters for {cls.kind.value}: {e}")

    @abstractmethod
    def to_params(self) -> Dict[str, Any]:
        """Flat parameter map, excluding the URL"""
        pass

    def expected_artifacts(self) -> List[str]:
        """File names this action writes, in creation order"""
        return []

    @abstractmethod
    async def perform(self, session, output_dir: Path) -> ActionOutput:
        """Run the action in an open BrowserSession"""
        pass

    async def screenshot(self, session, output_dir: Path, name: str, full_page: bool = False) -> str:
        """Capture the page into output_dir/name"""
        path = Path(output_dir) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        await session.page.screenshot(path=str(path), full_page=full_page, type='png')
        logger.debug(f"Saved {path}")
        return name

    async def wait_for(self, session, selector: str):
        """Wait until selector is attached, or fail as selector-not-found"""
        try:
            await session.page.wait_for_selector(selector, state="attached")
        except PlaywrightTimeoutError as e:
            raise ActionError(f"No element matches selector {selector!r}: {e}", ErrorKind.SELECTOR_NOT_FOUND)

    async def click(self, session, selector: str):
        """Click the first element matching selector"""
        try:
            await session.page.click(selector)
        except PlaywrightTimeoutError as e:
            raise ActionError(f"Could not click {selector!r}: {e}", ErrorKind.SELECTOR_NOT_FOUND)

    async def type_into(self, session, selector: str, value: str):
        """Type value into the element matching selector"""
        try:
            await session.page.type(selector, value)
        except PlaywrightTimeoutError as e:
            raise ActionError(f"Could not type into {selector!r}: {e}", ErrorKind.SELECTOR_NOT_FOUND)

    def __repr__(self):
        return f"{type(self).__name__}(url={self.url!r}, {self.to_params()!r})"
