"""
Action Request - Structured description of one invocation
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from .action_kind import ActionKind
from .base import BrowserAction
from .registry import create_action
from ..errors import ActionError, ErrorKind


@dataclass
class ActionRequest:
    """An action kind, its target URL and its parameters"""
    kind: ActionKind
    url: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        try:
            self.kind = ActionKind(self.kind)
        except ValueError:
            raise ActionError(f"Unknown action kind: {self.kind!r}", ErrorKind.INVALID_PARAMETERS)

    def to_action(self) -> BrowserAction:
        """Validate the parameters and build the matching action"""
        return create_action(self.kind, self.url, self.params)

    def to_json(self) -> str:
        return json.dumps({'url': self.url, 'params': self.params}, ensure_ascii=False)

    @classmethod
    def from_json(cls, kind, document: str) -> "ActionRequest":
        """Decode the document produced by to_json"""
        try:
            data = json.loads(document)
        except json.JSONDecodeError as e:
            raise ActionError(f"Malformed request document: {e}", ErrorKind.INVALID_PARAMETERS)

        if not isinstance(data, dict) or 'url' not in data:
            raise ActionError("Request document must be an object with a url", ErrorKind.INVALID_PARAMETERS)

        return cls(kind=kind, url=data['url'], params=data.get('params') or {})

    @classmethod
    def from_action(cls, action: BrowserAction) -> "ActionRequest":
        return cls(kind=action.kind, url=action.url, params=action.to_params())
