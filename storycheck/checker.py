"""Runs a full story check: locate containers, resolve stories, aggregate the report."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from .config import StoryCheckConfig
from .fs import FileSystem, LocalFileSystem
from .locator import ContainerLocator
from .logging import get_logger
from .models import Report
from .report import ReportAggregator
from .resolver import StoryResolver


class StoryChecker:
    """Coordinates the scanning engine for a single, stateless run."""

    def __init__(
        self,
        config: StoryCheckConfig | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.config = config or StoryCheckConfig(root=Path.cwd())
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = get_logger("checker")

    def run(self, root: Path | str | None = None, *, relative_to: Optional[Path] = None) -> Report:
        """Scan `root` (defaults to the configured source directory) and return the report."""
        root_path = Path(root) if root is not None else self.config.source_path
        if not self.filesystem.exists(root_path):
            raise FileNotFoundError(f"Source directory not found: {root_path}")
        if not self.filesystem.is_dir(root_path):
            raise NotADirectoryError(f"Source path is not a directory: {root_path}")

        naming = self.config.naming
        locator = ContainerLocator(self.filesystem, naming, self.config.traversal)
        aggregator = ReportAggregator(StoryResolver(self.filesystem, naming), relative_to)

        self.logger.info("Scanning %s for components", root_path)
        started = time.perf_counter()
        container_map = locator.locate(root_path)
        report = aggregator.aggregate(container_map)
        elapsed = time.perf_counter() - started

        self.logger.debug(
            "Checked %d component(s) in %d container(s) in %.3fs",
            report.total_components,
            report.container_count,
            elapsed,
        )
        return report


__all__ = ["StoryChecker"]
