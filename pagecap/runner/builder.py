"""
Runner Builder - Fluent API for configuring an action runner
"""

from pathlib import Path

from ..config import RunnerConfig
from ..environment import EnvironmentSpec
from ..monitoring import LogManager
from .base import ActionRunner
from .docker_runner import DockerActionRunner
from .local_runner import LocalActionRunner


class RunnerBuilder:
    """Builder for creating runners with an explicit environment and config"""

    def __init__(self, config: RunnerConfig = None):
        self.config = config or RunnerConfig.from_env()
        self.environment_spec = EnvironmentSpec()
        self._local = False
        self._logging = False

    def with_environment(self, spec: EnvironmentSpec = None, **overrides):
        """Use spec (or the default recipe) with the given field overrides"""
        spec = spec or self.environment_spec
        self.environment_spec = spec.with_overrides(**overrides) if overrides else spec
        return self

    def with_output_root(self, path):
        self.config = self.config.with_overrides(output_root=Path(path))
        return self

    def with_run_timeout(self, seconds: float):
        self.config = self.config.with_overrides(run_timeout=seconds)
        return self

    def with_logging(self, enable: bool = True, log_level: str = None):
        """Configure file logging and the per-action JSON log"""
        self._logging = enable
        if log_level:
            self.config = self.config.with_overrides(log_level=log_level)
        return self

    def keep_failed_output(self, keep: bool = True):
        self.config = self.config.with_overrides(keep_failed_output=keep)
        return self

    def locally(self):
        """Run actions in-process with the host's Playwright"""
        self._local = True
        return self

    def in_docker(self):
        """Run actions in containers built from the environment spec (default)"""
        self._local = False
        return self

    def build(self) -> ActionRunner:
        """Build the configured runner"""
        log_manager = None
        if self._logging:
            log_manager = LogManager(log_dir=str(self.config.log_dir), log_level=self.config.log_level)

        if self._local:
            return LocalActionRunner(self.config, log_manager=log_manager)

        return DockerActionRunner(self.config, environment_spec=self.environment_spec,
                                  log_manager=log_manager)
