"""Thin wrapper over the ``git`` command line.

Every call blocks until git exits. Failures to start the process and
non-zero exit codes raise ``GatewayError``; callers decide how to surface it.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from .errors import GatewayError

logger = logging.getLogger(__name__)

# Status text is parsed, so it must be the untranslated, uncolored long format
# with the hint line under each section header, and its paths must be
# relative to the working directory previews are read from.
_STATUS_ENV = {"LC_ALL": "C", "LANGUAGE": "C"}


class GitGateway:
    """Run git subcommands in a fixed working directory."""

    def __init__(self, cwd: Path | None = None, git_executable: str = "git") -> None:
        self.cwd = cwd
        self.git_executable = git_executable

    def run(self, args: list[str], env_overrides: dict[str, str] | None = None) -> str:
        """Run ``git <args>`` and return its stdout.

        Raises ``GatewayError`` when git cannot be started or exits non-zero.
        """
        command = [self.git_executable, *args]
        env = None
        if env_overrides:
            env = dict(os.environ)
            env.update(env_overrides)
        logger.debug("running %s", " ".join(command))
        try:
            proc = subprocess.run(
                command,
                cwd=self.cwd,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            logger.warning("could not start %s: %s", " ".join(command), exc)
            raise GatewayError(command, None, str(exc)) from exc
        if proc.returncode != 0:
            logger.warning("%s exited with %d", " ".join(command), proc.returncode)
            raise GatewayError(command, proc.returncode, proc.stderr or "")
        return proc.stdout

    def status_report(self) -> str:
        return self.run(
            [
                "-c",
                "color.status=false",
                "-c",
                "advice.statusHints=true",
                "-c",
                "status.relativePaths=true",
                "status",
                "--long",
            ],
            env_overrides=_STATUS_ENV,
        )

    def stage_all(self) -> None:
        logger.info("staging all changes")
        self.run(["add", "."])

    def list_branches(self) -> str:
        return self.run(["-c", "color.branch=false", "branch"], env_overrides=_STATUS_ENV)

    def checkout(self, branch: str) -> None:
        logger.info("checking out %s", branch)
        self.run(["checkout", branch])

    def create_branch(self, name: str) -> None:
        logger.info("creating branch %s", name)
        self.run(["checkout", "-b", name])
