"""
Environment - Handle to a built execution image
"""

from dataclasses import dataclass

from .environment_spec import EnvironmentSpec


@dataclass(frozen=True)
class Environment:
    """A built image, ready to run actions"""
    spec: EnvironmentSpec
    image_tag: str
    reused: bool = False

    @property
    def workdir(self) -> str:
        return self.spec.workdir

    @property
    def output_dir(self) -> str:
        return self.spec.output_dir
