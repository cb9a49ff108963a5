"""
Action runners - execute browser actions and return structured results
"""

from .base import ActionRunner
from .builder import RunnerBuilder
from .docker_runner import DockerActionRunner
from .local_runner import LocalActionRunner
from .result import ActionResult

__all__ = ['ActionRunner', 'RunnerBuilder', 'DockerActionRunner', 'LocalActionRunner', 'ActionResult']
