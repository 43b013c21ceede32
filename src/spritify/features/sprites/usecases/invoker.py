"""
Summary: Run the sprite tool and turn its exit status and output into errors.
Why: SmartSprites sometimes exits 0 while reporting failures, so stdout is checked too.
"""

from __future__ import annotations

import shlex
from typing import Final

from spritify.features.sprites.domain.errors import ExecutionError, ToolReportedError
from spritify.platform.logging import logger

from .ports import Invocation, ProcessResult, ProcessRunnerPort

ERROR_MARKER: Final[str] = "ERROR:"


def invoke(invocation: Invocation, runner: ProcessRunnerPort) -> ProcessResult:
    """Run ``invocation`` once, without retries.

    Raises:
        ExecutionError: If the process exits with a non-zero status.
        ToolReportedError: If the process exits cleanly but stdout contains ``ERROR:``.
    """
    logger.debug("Running [cwd=%s]: %s", invocation.cwd, shlex.join(invocation.args))
    result = runner.run(invocation)

    if result.exit_code != 0:
        raise ExecutionError(result.exit_code, result.stdout, result.stderr)
    if ERROR_MARKER in result.stdout:
        raise ToolReportedError(result.stdout)

    if result.stdout.strip():
        logger.debug("SmartSprites output:\n%s", result.stdout.rstrip())
    return result


__all__ = ["ERROR_MARKER", "invoke"]
