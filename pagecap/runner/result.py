"""
Action Result - Outcome of a single invocation
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..actions import ActionKind
from ..errors import ActionError, ErrorKind
from ..storage import ArtifactDirectory


@dataclass
class ActionResult:
    """Result of running one action; failed results carry no artifacts"""
    kind: ActionKind
    url: str
    output_dir: Optional[Path] = None
    artifacts: List[str] = field(default_factory=list)
    text: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None
    exit_code: int = 0
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def failure(cls, kind: ActionKind, url: str, error_kind: ErrorKind, error: str,
                exit_code: int = 1, duration: float = 0.0) -> "ActionResult":
        return cls(kind=kind, url=url, error_kind=error_kind, error=error,
                   exit_code=exit_code or 1, duration=duration)

    def directory(self) -> ArtifactDirectory:
        """View over the produced artifacts"""
        if not self.ok:
            raise ActionError(f"{self.kind.value} failed: {self.error}", self.error_kind)
        if self.output_dir is None:
            raise ActionError(f"{self.kind.value} produces text, not a directory", ErrorKind.INVALID_PARAMETERS)
        return ArtifactDirectory(self.output_dir)

    def unwrap(self) -> Union[Path, str]:
        """Return the output directory (or text), raising ActionError on failure"""
        if not self.ok:
            raise ActionError(f"{self.kind.value} failed for {self.url}: {self.error}", self.error_kind)
        if self.kind.produces_text:
            return self.text
        return self.output_dir
