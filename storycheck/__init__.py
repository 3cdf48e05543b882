"""Check that UI components ship with story files."""

from .checker import StoryChecker
from .config import ConfigError, StoryCheckConfig, load_config
from .locator import ContainerLocator, TraversalError
from .models import Component, ContainerDirectory, FileEntry, Report, ResolutionResult
from .naming import Classification, NamingClassifier, classify
from .report import ReportAggregator
from .resolver import StoryResolver

__all__ = [
    "Classification",
    "Component",
    "ConfigError",
    "ContainerDirectory",
    "ContainerLocator",
    "FileEntry",
    "NamingClassifier",
    "Report",
    "ReportAggregator",
    "ResolutionResult",
    "StoryCheckConfig",
    "StoryChecker",
    "StoryResolver",
    "TraversalError",
    "classify",
    "load_config",
]
