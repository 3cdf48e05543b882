"""Aggregation of story lookups into a pass/fail report, plus its text rendering."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from .config import NamingConfig
from .logging import get_logger
from .models import Component, ContainerMap, Report
from .resolver import StoryResolver


class ReportAggregator:
    """Resolves every discovered component and accumulates the outcome."""

    def __init__(self, resolver: StoryResolver, relative_to: Optional[Path] = None) -> None:
        self.resolver = resolver
        self.relative_to = relative_to
        self.logger = get_logger("report")

    def aggregate(self, container_map: ContainerMap) -> Report:
        report = Report(container_count=len(container_map))
        for container_path, components in container_map.items():
            for component in components:
                report.total_components += 1
                result = self.resolver.resolve(container_path, component)
                if result.has_story:
                    self.logger.debug("Story for %s: %s", component.name, result.story_path)
                    continue
                report.missing_components.append(component)
                report.missing_entries.append(self.display_path(component))
        return report

    def display_path(self, component: Component) -> str:
        if self.relative_to is None:
            return component.source_path.as_posix()
        try:
            return component.source_path.relative_to(self.relative_to).as_posix()
        except ValueError:
            return component.source_path.as_posix()


def render_text(report: Report, naming: NamingConfig | None = None) -> List[str]:
    """Return the human-readable report as a list of output lines."""
    naming = naming or NamingConfig()
    lines = ["Checking for missing story files...", ""]

    if report.is_empty:
        lines.append("No component files found.")
        return lines

    lines.extend(f"[missing] Missing story for: {entry}" for entry in report.missing_entries)
    if report.missing_entries:
        lines.append("")
    lines.extend(
        [
            "Summary:",
            f"   Total components: {report.total_components}",
            f"   Missing stories: {report.missing_count}",
            "",
        ]
    )

    if report.passed:
        lines.append("All components have story files!")
        return lines

    marker = naming.story_marker.rstrip(".")
    convention = f"ComponentName{marker}"
    if naming.story_extensions:
        first, *others = naming.story_extensions
        convention += first
        if others:
            alternatives = ", ".join(others)
            convention += f" (or {alternatives})"
    lines.extend(
        [
            "Story check failed! Please create story files for all components.",
            "",
            "Expected story file naming convention:",
            f"   {naming.stories_dir_name}/{convention}",
        ]
    )
    return lines


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2)


__all__ = ["ReportAggregator", "render_json", "render_text"]
