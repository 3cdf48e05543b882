"""Configuration loading for storycheck (.storycheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".storycheck.yml"

DEFAULT_SOURCE_DIR = "src"
DEFAULT_CONTAINER_NAME = "components"
DEFAULT_STORIES_DIR_NAME = "stories"
DEFAULT_COMPONENT_EXTENSIONS = (".tsx", ".jsx")
# Probe order matters: the first match is reported as the resolved story.
DEFAULT_STORY_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")
DEFAULT_STORY_MARKER = ".stories."
DEFAULT_TEST_MARKERS = (".test.", ".spec.")
DEFAULT_INDEX_NAME = "index"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class NamingConfig:
    """File and directory naming conventions."""

    container_name: str = DEFAULT_CONTAINER_NAME
    stories_dir_name: str = DEFAULT_STORIES_DIR_NAME
    component_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_COMPONENT_EXTENSIONS)
    )
    story_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_STORY_EXTENSIONS))
    story_marker: str = DEFAULT_STORY_MARKER
    test_markers: List[str] = field(default_factory=lambda: list(DEFAULT_TEST_MARKERS))
    index_name: str = DEFAULT_INDEX_NAME


@dataclass
class TraversalConfig:
    """Directory walk options."""

    skip_stories_dirs: bool = False


@dataclass
class StoryCheckConfig:
    """Represents the settings defined in .storycheck.yml."""

    root: Path
    source_dir: str = DEFAULT_SOURCE_DIR
    naming: NamingConfig = field(default_factory=NamingConfig)
    traversal: TraversalConfig = field(default_factory=TraversalConfig)

    @property
    def source_path(self) -> Path:
        return (self.root / self.source_dir).resolve()


def load_config(config_path: Path) -> StoryCheckConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StoryCheckConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    naming = NamingConfig()
    naming_data = _as_dict(data.get("naming"))
    if naming_data:
        naming.container_name = _as_str(naming_data.get("container_name")) or naming.container_name
        naming.stories_dir_name = (
            _as_str(naming_data.get("stories_dir_name")) or naming.stories_dir_name
        )
        naming.component_extensions = (
            _as_extensions(naming_data.get("component_extensions"))
            or naming.component_extensions
        )
        naming.story_extensions = (
            _as_extensions(naming_data.get("story_extensions")) or naming.story_extensions
        )
        naming.story_marker = _as_str(naming_data.get("story_marker")) or naming.story_marker
        naming.test_markers = _as_markers(naming_data.get("test_markers")) or naming.test_markers
        naming.index_name = _as_str(naming_data.get("index_name")) or naming.index_name

    traversal = TraversalConfig()
    traversal_data = _as_dict(data.get("traversal"))
    if traversal_data:
        skip = _as_bool(traversal_data.get("skip_stories_dirs"))
        if skip is not None:
            traversal.skip_stories_dirs = skip

    source_dir = _as_str(data.get("source_dir")) or DEFAULT_SOURCE_DIR

    return StoryCheckConfig(
        root=root,
        source_dir=source_dir,
        naming=naming,
        traversal=traversal,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _as_markers(value: Any) -> List[str]:
    # A blank marker would match every filename.
    return [item.strip() for item in _as_str_list(value) if item.strip()]


def _as_extensions(value: Any) -> List[str]:
    extensions: List[str] = []
    for item in _as_str_list(value):
        item = item.strip()
        if not item:
            continue
        extensions.append(item if item.startswith(".") else f".{item}")
    return extensions


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "NamingConfig",
    "StoryCheckConfig",
    "TraversalConfig",
    "load_config",
]
