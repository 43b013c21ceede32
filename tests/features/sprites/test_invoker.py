"""
Summary: Validate exit code and stdout error-marker handling around the sprite tool.
Why: SmartSprites reports some failures only in its output, so both checks must hold.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from spritify.features.sprites.adapters.subprocess_runner import SubprocessRunner
from spritify.features.sprites.domain.errors import ExecutionError, ToolReportedError
from spritify.features.sprites.usecases.invoker import invoke
from spritify.features.sprites.usecases.ports import Invocation, ProcessResult, ProcessRunnerPort


def _runner(mocker: MockerFixture, result: ProcessResult) -> ProcessRunnerPort:
    runner = mocker.Mock(spec=ProcessRunnerPort)
    runner.run.return_value = result
    return runner


def test_invoke_returns_result_on_success(mocker: MockerFixture, tmp_path: Path) -> None:
    invocation = Invocation(args=("java",), cwd=tmp_path)
    result = ProcessResult(exit_code=0, stdout="INFO: done\n", stderr="")
    runner = _runner(mocker, result)

    assert invoke(invocation, runner) is result
    runner.run.assert_called_once_with(invocation)


def test_invoke_raises_execution_error_with_stderr_verbatim(
    mocker: MockerFixture, tmp_path: Path
) -> None:
    stderr = "Exception in thread \"main\" java.lang.NoClassDefFoundError\n\tat x\n"
    runner = _runner(mocker, ProcessResult(exit_code=1, stdout="partial", stderr=stderr))

    with pytest.raises(ExecutionError) as excinfo:
        _ = invoke(Invocation(args=("java",), cwd=tmp_path), runner)

    assert str(excinfo.value) == stderr
    assert excinfo.value.exit_code == 1
    assert excinfo.value.stdout == "partial"


def test_invoke_raises_tool_reported_error_on_marker(
    mocker: MockerFixture, tmp_path: Path
) -> None:
    stdout = "WARN: meh\nERROR: Could not read image: /img/missing.png\n"
    runner = _runner(mocker, ProcessResult(exit_code=0, stdout=stdout, stderr=""))

    with pytest.raises(ToolReportedError) as excinfo:
        _ = invoke(Invocation(args=("java",), cwd=tmp_path), runner)

    assert str(excinfo.value) == stdout


def test_subprocess_runner_captures_output_and_exit_code(tmp_path: Path) -> None:
    code = (
        "import os, sys; "
        "sys.stdout.write(os.environ['CLASSPATH'] + '|' + os.getcwd()); "
        "sys.stderr.write('boom'); sys.exit(3)"
    )
    invocation = Invocation(
        args=(sys.executable, "-c", code),
        cwd=tmp_path,
        env={"CLASSPATH": "a.jar"},
    )

    result = SubprocessRunner().run(invocation)

    assert result.exit_code == 3
    classpath, _, cwd = result.stdout.partition("|")
    assert classpath == "a.jar"
    assert Path(cwd).resolve() == tmp_path.resolve()
    assert result.stderr == "boom"


def test_subprocess_runner_reports_missing_executable(tmp_path: Path) -> None:
    invocation = Invocation(args=(str(tmp_path / "missing-java"),), cwd=tmp_path)

    result = SubprocessRunner().run(invocation)

    assert result.exit_code == 127
    with pytest.raises(ExecutionError):
        _ = invoke(invocation, SubprocessRunner())
