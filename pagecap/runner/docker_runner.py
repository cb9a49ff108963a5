"""
Docker Runner - Executes actions inside the built environment image
"""

import asyncio
import logging
import os
import subprocess
import uuid
from pathlib import Path
from typing import List, Optional

from ..actions import ActionRequest, BrowserAction
from ..environment import Environment, EnvironmentBuilder, EnvironmentSpec
from ..errors import ErrorKind, kind_for_exit_code
from ..storage import ArtifactDirectory
from .base import ActionRunner
from .result import ActionResult

logger = logging.getLogger(__name__)

ENTRYPOINT_MODULE = "pagecap.entrypoint"


def error_message(stderr: str, fallback: str) -> str:
    """Pick the entrypoint's 'Error:' line out of container stderr"""
    lines = [line.strip() for line in (stderr or "").splitlines() if line.strip()]
    for line in reversed(lines):
        if "Error:" in line:
            return line[line.index("Error:") + len("Error:"):].strip()
    return lines[-1] if lines else fallback


class DockerActionRunner(ActionRunner):
    """
    Runs each action in a throwaway container (docker run --rm).

    The environment image is built on first use, or reused when an image
    with the same recipe fingerprint already exists.
    """

    def __init__(self, config=None, environment_spec: Optional[EnvironmentSpec] = None,
                 log_manager=None, subprocess_module=subprocess):
        super().__init__(config, log_manager)
        self.environment_spec = environment_spec or EnvironmentSpec()
        self.subprocess = subprocess_module
        self.environment: Optional[Environment] = None
        self._build_lock: Optional[asyncio.Lock] = None

    async def build_environment(self, force: bool = False) -> Environment:
        """Build the image once; later calls return the same handle"""
        if self._build_lock is None:
            # Created here so it belongs to the running event loop
            self._build_lock = asyncio.Lock()
        async with self._build_lock:
            if self.environment is None or force:
                builder = EnvironmentBuilder(
                    self.environment_spec,
                    docker_bin=self.config.docker_bin,
                    subprocess_module=self.subprocess
                )
                self.environment = await asyncio.to_thread(builder.build, force)
        return self.environment

    def build_run_command(self, environment: Environment, action: BrowserAction,
                          output_dir: Optional[Path], container_name: str) -> List[str]:
        """docker run argv; parameters travel as one JSON argument"""
        cmd = [
            self.config.docker_bin, "run", "--rm",
            "--name", container_name,
            "--workdir", environment.workdir,
        ]

        if hasattr(os, "getuid"):
            # Artifacts on the host belong to the caller, not root
            cmd += ["--user", f"{os.getuid()}:{os.getgid()}", "-e", "HOME=/tmp"]

        if output_dir is not None:
            cmd += ["-v", f"{Path(output_dir).resolve()}:{environment.output_dir}"]

        cmd += list(self.config.extra_run_args)
        cmd += [
            environment.image_tag,
            "python", "-m", ENTRYPOINT_MODULE,
            action.kind.value,
            "--params", ActionRequest.from_action(action).to_json(),
            "--output-dir", environment.output_dir,
        ]
        return cmd

    def _remove_container(self, container_name: str):
        try:
            self.subprocess.run(
                [self.config.docker_bin, "rm", "-f", container_name],
                capture_output=True, text=True, encoding="utf-8", errors="replace", timeout=30
            )
            logger.info(f"Removed container {container_name}")
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning(f"Failed to remove container {container_name}: {e}")

    async def _execute(self, action: BrowserAction, output_dir: Optional[Path]) -> ActionResult:
        environment = await self.build_environment()

        container_name = f"pagecap-{action.kind.value}-{uuid.uuid4().hex[:12]}"
        cmd = self.build_run_command(environment, action, output_dir, container_name)
        logger.debug(f"Starting container {container_name} from {environment.image_tag}")

        try:
            completed = await asyncio.to_thread(
                self.subprocess.run, cmd,
                capture_output=True, text=True, encoding="utf-8", timeout=self.config.run_timeout
            )
        except subprocess.TimeoutExpired:
            self._remove_container(container_name)
            return ActionResult.failure(
                action.kind, action.url, ErrorKind.CONTAINER_ERROR,
                f"Container {container_name} did not finish within {self.config.run_timeout}s"
            )
        except (subprocess.SubprocessError, OSError) as e:
            return ActionResult.failure(action.kind, action.url, ErrorKind.CONTAINER_ERROR,
                                        f"Could not start container: {e}")
        except UnicodeDecodeError as e:
            return ActionResult.failure(action.kind, action.url, ErrorKind.CONTAINER_ERROR,
                                        f"Container output is not valid UTF-8: {e}")

        if completed.stderr:
            logger.debug(f"[{container_name}] {completed.stderr.strip()}")

        if completed.returncode != 0:
            return ActionResult.failure(
                action.kind, action.url,
                kind_for_exit_code(completed.returncode),
                error_message(completed.stderr, f"exit status {completed.returncode}"),
                exit_code=completed.returncode
            )

        if action.kind.produces_text:
            stdout = completed.stdout or ""
            text = stdout[:-1] if stdout.endswith("\n") else stdout
            return ActionResult(kind=action.kind, url=action.url, text=text)

        present = ArtifactDirectory(output_dir)
        artifacts = action.expected_artifacts()
        missing = [name for name in artifacts if name not in present]
        if missing:
            return ActionResult.failure(action.kind, action.url, ErrorKind.CONTAINER_ERROR,
                                        f"Container exited cleanly but did not write {', '.join(missing)}")

        return ActionResult(kind=action.kind, url=action.url, output_dir=output_dir, artifacts=artifacts)
