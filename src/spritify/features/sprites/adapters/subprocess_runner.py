"""Process runner backed by :mod:`subprocess`."""

from __future__ import annotations

import os
import subprocess

from ..usecases.ports import Invocation, ProcessResult, ProcessRunnerPort


class SubprocessRunner(ProcessRunnerPort):
    """Run invocations as blocking child processes. No timeout is applied."""

    def run(self, invocation: Invocation) -> ProcessResult:
        env = {**os.environ, **invocation.env}
        try:
            completed = subprocess.run(
                list(invocation.args),
                cwd=invocation.cwd,
                env=env,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            # Launch failures look like a failed run to callers.
            return ProcessResult(exit_code=127, stdout="", stderr=str(exc))
        return ProcessResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )


__all__ = ["SubprocessRunner"]
