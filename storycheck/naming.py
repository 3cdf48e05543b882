"""Filename conventions that decide which files are components and which are stories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .config import NamingConfig
from .models import FileEntry

Rule = Callable[[FileEntry], bool]


@dataclass(frozen=True)
class Classification:
    """Which naming predicates a single filename satisfies."""

    is_checkable_component: bool
    is_story: bool
    is_test: bool
    is_index: bool

    @property
    def is_excluded(self) -> bool:
        return self.is_story or self.is_test or self.is_index


class NamingClassifier:
    """Applies the exclusion table and the accepted-extension rule to filenames."""

    def __init__(self, naming: NamingConfig | None = None) -> None:
        self.naming = naming or NamingConfig()
        self.component_extensions = frozenset(self.naming.component_extensions)
        self.rules: Dict[str, Rule] = _build_exclusion_rules(self.naming)

    def classify(self, file_name: str) -> Classification:
        entry = FileEntry.from_name(file_name)
        matched = {name: rule(entry) for name, rule in self.rules.items()}
        excluded = any(matched.values())
        return Classification(
            is_checkable_component=entry.extension in self.component_extensions and not excluded,
            is_story=matched["story"],
            is_test=matched["test"],
            is_index=matched["index"],
        )

    def is_checkable_component(self, file_name: str) -> bool:
        return self.classify(file_name).is_checkable_component


def _build_exclusion_rules(naming: NamingConfig) -> Dict[str, Rule]:
    story_marker = naming.story_marker
    test_markers: Tuple[str, ...] = tuple(marker for marker in naming.test_markers if marker)
    index_name = naming.index_name
    return {
        "story": lambda entry: story_marker in entry.name,
        "test": lambda entry: any(marker in entry.name for marker in test_markers),
        "index": lambda entry: entry.base_name == index_name,
    }


_DEFAULT_CLASSIFIER = NamingClassifier()


def classify(file_name: str) -> Classification:
    """Classify `file_name` using the default naming conventions."""
    return _DEFAULT_CLASSIFIER.classify(file_name)


__all__ = ["Classification", "NamingClassifier", "classify"]
