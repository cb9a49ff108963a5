"""
Runner configuration
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional


@dataclass
class RunnerConfig:
    """Configuration for action runners"""
    output_root: Path = Path("pagecap_output")
    log_dir: Optional[Path] = None
    log_level: str = "INFO"
    docker_bin: str = "docker"
    run_timeout: Optional[float] = None     # seconds; None waits for the container
    keep_failed_output: bool = False
    extra_run_args: list = field(default_factory=list)

    def __post_init__(self):
        self.output_root = Path(self.output_root)
        if self.log_dir is None:
            self.log_dir = self.output_root / "logs"
        self.log_dir = Path(self.log_dir)

    @classmethod
    def from_env(cls, **overrides) -> "RunnerConfig":
        """Build a config from PAGECAP_* environment variables"""
        values = {}
        if os.environ.get("PAGECAP_OUTPUT_ROOT"):
            values["output_root"] = Path(os.environ["PAGECAP_OUTPUT_ROOT"])
        if os.environ.get("PAGECAP_LOG_DIR"):
            values["log_dir"] = Path(os.environ["PAGECAP_LOG_DIR"])
        if os.environ.get("PAGECAP_LOG_LEVEL"):
            values["log_level"] = os.environ["PAGECAP_LOG_LEVEL"]
        if os.environ.get("PAGECAP_DOCKER_BIN"):
            values["docker_bin"] = os.environ["PAGECAP_DOCKER_BIN"]
        if os.environ.get("PAGECAP_RUN_TIMEOUT"):
            values["run_timeout"] = float(os.environ["PAGECAP_RUN_TIMEOUT"])

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **changes) -> "RunnerConfig":
        """Return a copy with the given fields replaced"""
        if "output_root" in changes and "log_dir" not in changes:
            changes["log_dir"] = Path(changes["output_root"]) / "logs"
        return replace(self, **changes)
