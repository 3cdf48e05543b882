"""Filesystem access used by the scanning engine."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class DirEntry:
    """A single directory listing entry."""

    name: str
    is_dir: bool
    is_file: bool


class FileSystem(ABC):
    """Contract for the read-only filesystem operations the engine relies on."""

    @abstractmethod
    def list_directory(self, path: Path) -> List[DirEntry]:
        """Return the direct entries of `path`, raising OSError when it cannot be listed."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True when `path` exists."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Return True when `path` exists and is a directory."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk. Symlinks are not followed while listing."""

    def list_directory(self, path: Path) -> List[DirEntry]:
        with os.scandir(path) as iterator:
            return [
                DirEntry(
                    name=entry.name,
                    is_dir=entry.is_dir(follow_symlinks=False),
                    is_file=entry.is_file(follow_symlinks=False),
                )
                for entry in iterator
            ]

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()


__all__ = ["DirEntry", "FileSystem", "LocalFileSystem"]
