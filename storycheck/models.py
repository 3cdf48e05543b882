"""Core data models shared across storycheck components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FileEntry:
    """A file name split into the parts the naming rules look at."""

    name: str
    extension: str
    base_name: str

    @classmethod
    def from_name(cls, name: str) -> "FileEntry":
        # Mirrors path.extname: a leading dot alone does not start an extension.
        stem, dot, suffix = name.rpartition(".")
        if not dot or not stem:
            return cls(name=name, extension="", base_name=name)
        return cls(name=name, extension=f".{suffix}", base_name=stem)


@dataclass(frozen=True)
class Component:
    """A checkable component definition file inside a container directory."""

    name: str
    source_path: Path
    extension: str


@dataclass
class ContainerDirectory:
    """A `components` directory and the components it directly holds."""

    path: Path
    components: List[Component] = field(default_factory=list)


ContainerMap = Dict[Path, List[Component]]


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of looking up the story for one component."""

    component: Component
    has_story: bool
    story_path: Optional[Path] = None


@dataclass
class Report:
    """Summary of a scan: how many components were checked and which lack stories."""

    total_components: int = 0
    container_count: int = 0
    missing_entries: List[str] = field(default_factory=list)
    missing_components: List[Component] = field(default_factory=list)

    @property
    def missing_count(self) -> int:
        return len(self.missing_entries)

    @property
    def satisfied_count(self) -> int:
        return self.total_components - self.missing_count

    @property
    def passed(self) -> bool:
        return self.missing_count == 0

    @property
    def is_empty(self) -> bool:
        return self.total_components == 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "passed": self.passed,
            "total_components": self.total_components,
            "missing_count": self.missing_count,
            "container_count": self.container_count,
            "missing_entries": list(self.missing_entries),
        }
