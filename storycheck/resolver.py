"""Lookup of story files for discovered components."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import NamingConfig
from .fs import FileSystem, LocalFileSystem
from .models import Component, ResolutionResult


class StoryResolver:
    """Probes `<container>/stories/` for `{name}.stories.{ext}` in configured order."""

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        naming: NamingConfig | None = None,
    ) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.naming = naming or NamingConfig()

    def candidates(self, component_name: str) -> List[str]:
        """Return candidate story filenames in priority order."""
        marker = self.naming.story_marker.rstrip(".")
        return [f"{component_name}{marker}{ext}" for ext in self.naming.story_extensions]

    def find_story(self, container_dir: Path, component_name: str) -> Optional[Path]:
        stories_dir = Path(container_dir) / self.naming.stories_dir_name
        if not self.filesystem.is_dir(stories_dir):
            return None
        for candidate in self.candidates(component_name):
            story_path = stories_dir / candidate
            if self.filesystem.exists(story_path):
                return story_path
        return None

    def has_story(self, container_dir: Path, component_name: str) -> bool:
        return self.find_story(container_dir, component_name) is not None

    def resolve(self, container_dir: Path, component: Component) -> ResolutionResult:
        story_path = self.find_story(container_dir, component.name)
        return ResolutionResult(
            component=component,
            has_story=story_path is not None,
            story_path=story_path,
        )


__all__ = ["StoryResolver"]
