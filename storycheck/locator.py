"""Discovery of `components` container directories and the components they hold."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .config import NamingConfig, TraversalConfig
from .fs import DirEntry, FileSystem, LocalFileSystem
from .logging import get_logger
from .models import Component, ContainerDirectory, ContainerMap, FileEntry
from .naming import NamingClassifier


class TraversalError(RuntimeError):
    """Raised when a directory in the scanned tree cannot be listed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Unable to list directory {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ContainerLocator:
    """Walks a source tree depth-first and collects checkable components per container.

    Sibling entries are visited in name order so that reports are reproducible
    regardless of the order the operating system lists them in.
    """

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        naming: NamingConfig | None = None,
        traversal: TraversalConfig | None = None,
    ) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.naming = naming or NamingConfig()
        self.traversal = traversal or TraversalConfig()
        self.classifier = NamingClassifier(self.naming)
        self.logger = get_logger("locator")

    def locate(self, root_dir: Path) -> ContainerMap:
        """Return a mapping of container path to the components found directly inside it."""
        found: Dict[Path, List[Component]] = {}
        # Absolute so a root given as "." still carries its directory name.
        pending: List[Path] = [Path(root_dir).absolute()]
        visited = 0

        while pending:
            current = pending.pop()
            visited += 1
            entries = self._list(current)

            if current.name == self.naming.container_name:
                container = self._collect(current, entries)
                if container.components:
                    found[container.path] = container.components
                    self.logger.debug(
                        "Container %s holds %d component(s)", current, len(container.components)
                    )

            subdirs = [entry.name for entry in entries if entry.is_dir]
            if self.traversal.skip_stories_dirs:
                subdirs = [name for name in subdirs if name != self.naming.stories_dir_name]
            # Reverse so the stack pops siblings in name order.
            pending.extend(current / name for name in reversed(subdirs))

        self.logger.debug("Visited %d directories, found %d containers", visited, len(found))
        return found

    def containers(self, root_dir: Path) -> List[ContainerDirectory]:
        """Return the same result as `locate`, as `ContainerDirectory` objects in walk order."""
        return [
            ContainerDirectory(path=path, components=list(components))
            for path, components in self.locate(root_dir).items()
        ]

    def _list(self, path: Path) -> List[DirEntry]:
        try:
            entries = self.filesystem.list_directory(path)
        except OSError as exc:
            raise TraversalError(path, exc) from exc
        return sorted(entries, key=lambda entry: entry.name)

    def _collect(self, path: Path, entries: List[DirEntry]) -> ContainerDirectory:
        container = ContainerDirectory(path=path)
        for entry in entries:
            if not entry.is_file:
                continue
            if not self.classifier.is_checkable_component(entry.name):
                continue
            file_entry = FileEntry.from_name(entry.name)
            container.components.append(
                Component(
                    name=file_entry.base_name,
                    source_path=path / entry.name,
                    extension=file_entry.extension,
                )
            )
        return container


__all__ = ["ContainerLocator", "TraversalError"]
