"""
Execution environment - recipe, builder and handle
"""

from .environment_spec import EnvironmentSpec, DEFAULT_OS_PACKAGES, DEFAULT_BASE_IMAGE
from .environment import Environment
from .builder import EnvironmentBuilder


def build_environment(spec: EnvironmentSpec = None, force: bool = False, **kwargs) -> Environment:
    """Build (or reuse) the execution environment described by spec"""
    return EnvironmentBuilder(spec, **kwargs).build(force=force)


__all__ = [
    'EnvironmentSpec',
    'Environment',
    'EnvironmentBuilder',
    'build_environment',
    'DEFAULT_OS_PACKAGES',
    'DEFAULT_BASE_IMAGE'
]
