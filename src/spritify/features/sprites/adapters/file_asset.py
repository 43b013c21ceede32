"""File-backed asset used when no pipeline supplies one."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spritify.config.file_ops import write_bytes_file


@dataclass(slots=True)
class FileAsset:
    """An asset loaded from ``source_root / source_path``."""

    source_root: Path
    source_path: str
    content: bytes = b""
    target_path: str | None = None

    @classmethod
    def load(cls, source_root: Path, source_path: str) -> "FileAsset":
        root = source_root.resolve()
        return cls(
            source_root=root,
            source_path=source_path,
            content=(root / source_path).read_bytes(),
        )

    def dump(self, target_dir: Path) -> Path:
        """Write the content to ``target_dir`` at the target path, or the source path if unset."""

        relative = (self.target_path or self.source_path).lstrip("/")
        destination = target_dir / relative
        write_bytes_file(destination, self.content)
        return destination


__all__ = ["FileAsset"]
