"""Fake collaborators shared by the test suite."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from spritify.features.sprites.domain.directive import parse_directive, render_image_glob
from spritify.features.sprites.usecases.ports import Invocation, ProcessResult


def _option(args: tuple[str, ...], name: str) -> str | None:
    if name not in args:
        return None
    return args[args.index(name) + 1]


@dataclass
class FakeSmartSprites:
    """Stand-in for the SmartSprites process that writes plausible outputs.

    With ``--output-dir-path`` each listed stylesheet is copied, rewritten, to
    the output dir and every sprite directive produces a dated PNG under the
    document root. Otherwise the rewrite lands next to the input using the
    ``--css-file-suffix``.
    """

    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""
    stamp: str = "20260101"
    calls: list[Invocation] = field(default_factory=list)
    on_run: Callable[[Invocation], None] | None = None

    def run(self, invocation: Invocation) -> ProcessResult:
        self.calls.append(invocation)
        if self.on_run is not None:
            self.on_run(invocation)
        if self.exit_code == 0 and "ERROR:" not in self.stdout:
            self._write_outputs(invocation)
        return ProcessResult(exit_code=self.exit_code, stdout=self.stdout, stderr=self.stderr)

    def _write_outputs(self, invocation: Invocation) -> None:
        args = invocation.args
        document_root = Path(_option(args, "--document-root-dir-path") or ".")
        output_dir = _option(args, "--output-dir-path")
        suffix = _option(args, "--css-file-suffix") or ""
        css_files = args[args.index("--css-files") + 1 :]

        for name in css_files:
            source = (invocation.cwd / name).resolve()
            text = source.read_text(encoding="utf-8")
            rewritten = "/* spritified */\n" + text

            if output_dir is not None:
                destination = Path(output_dir) / name.removeprefix("./")
            else:
                destination = source.with_name(f"{source.stem}{suffix}{source.suffix}")
            destination.parent.mkdir(parents=True, exist_ok=True)
            _ = destination.write_text(rewritten, encoding="utf-8")

            if "/** sprite:" in text:
                pattern = render_image_glob(parse_directive(text)).replace("*", self.stamp)
                image = document_root / pattern.lstrip("/")
                image.parent.mkdir(parents=True, exist_ok=True)
                _ = image.write_bytes(b"\x89PNG fake " + self.stamp.encode())


__all__ = ["FakeSmartSprites"]
