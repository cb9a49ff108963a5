"""
Environment Builder - Builds the browser execution image with the docker CLI
"""

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from ..errors import EnvironmentBuildError
from .environment import Environment
from .environment_spec import PACKAGE_NAME, PACKAGE_ROOT, EnvironmentSpec

logger = logging.getLogger(__name__)


def _stderr_tail(error: subprocess.CalledProcessError, lines: int = 20) -> str:
    stderr = error.stderr or ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return "\n".join(stderr.strip().splitlines()[-lines:])


class EnvironmentBuilder:
    """Turns an EnvironmentSpec into a docker image.

    Images are tagged by the recipe fingerprint, so an image already present
    locally is reused instead of being rebuilt. Any failing build step is
    fatal and is never retried.
    """

    def __init__(self, spec: Optional[EnvironmentSpec] = None,
                 docker_bin: str = "docker", subprocess_module=subprocess):
        self.spec = spec or EnvironmentSpec()
        self.docker_bin = docker_bin
        self.subprocess = subprocess_module

        self._check_docker_availability()

    def _check_docker_availability(self) -> None:
        """Check if Docker is available on the system"""
        try:
            self.subprocess.run([self.docker_bin, "--version"], check=True, capture_output=True)
            logger.debug("Docker is available")
        except (subprocess.SubprocessError, FileNotFoundError) as e:
            logger.error(f"Docker is not available: {e}")
            raise EnvironmentBuildError(f"Docker is not available: {e}")

    def _docker(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd: List[str] = [self.docker_bin, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        return self.subprocess.run(cmd, check=check, capture_output=True, text=True,
                                   encoding="utf-8", errors="replace")

    def image_exists(self, tag: Optional[str] = None) -> bool:
        """Whether an image with the given (or this spec's) tag exists locally"""
        result = self._docker("image", "inspect", tag or self.spec.image_tag, check=False)
        return result.returncode == 0

    def prepare_context(self, context_dir: Path) -> Path:
        """Write the Dockerfile and the package sources into a build context"""
        context_dir = Path(context_dir)
        dockerfile = context_dir / "Dockerfile"
        dockerfile.write_text(self.spec.render_dockerfile(), encoding="utf-8")

        shutil.copytree(
            PACKAGE_ROOT,
            context_dir / PACKAGE_NAME,
            ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
        )
        return dockerfile

    def build(self, force: bool = False) -> Environment:
        """Build the image, or reuse a cached one with the same fingerprint"""
        tag = self.spec.image_tag

        if not force and self.image_exists(tag):
            logger.info(f"Reusing environment image {tag}")
            return Environment(spec=self.spec, image_tag=tag, reused=True)

        logger.info(f"Building environment image {tag} from {self.spec.base_image}")
        context_dir = Path(tempfile.mkdtemp(prefix="pagecap-build-"))
        try:
            self.prepare_context(context_dir)
            self._docker("build", "-t", tag, str(context_dir))
        except subprocess.CalledProcessError as e:
            details = _stderr_tail(e)
            logger.error(f"Environment build failed for {tag}: {details}")
            raise EnvironmentBuildError(f"docker build failed with exit code {e.returncode}: {details}")
        except (subprocess.SubprocessError, OSError) as e:
            logger.error(f"Environment build failed for {tag}: {e}")
            raise EnvironmentBuildError(f"docker build failed: {e}")
        finally:
            shutil.rmtree(context_dir, ignore_errors=True)

        logger.info(f"Environment image {tag} ready")
        return Environment(spec=self.spec, image_tag=tag)

    def remove(self, tag: Optional[str] = None) -> bool:
        """Delete the environment image; returns False if docker refused"""
        tag = tag or self.spec.image_tag
        result = self._docker("rmi", tag, check=False)
        if result.returncode != 0:
            logger.warning(f"Could not remove image {tag}: {(result.stderr or '').strip()}")
            return False

        logger.info(f"Removed environment image {tag}")
        return True
