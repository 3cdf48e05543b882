"""Tests for storycheck.locator."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from storycheck.config import TraversalConfig
from storycheck.locator import ContainerLocator, TraversalError
from tests._fixtures.memory_fs import MemoryFileSystem


def _names(components) -> list[str]:
    return [component.name for component in components]


def test_locate_returns_empty_mapping_without_containers() -> None:
    fs = MemoryFileSystem(["/src/App.tsx", "/src/utils/format.ts", "/src/widgets/Card.tsx"])

    assert ContainerLocator(fs).locate(Path("/src")) == {}


def test_locate_collects_direct_component_files() -> None:
    fs = MemoryFileSystem(
        [
            "/src/components/Button.tsx",
            "/src/components/Card.jsx",
            "/src/components/Button.stories.tsx",
            "/src/components/Button.test.tsx",
            "/src/components/index.tsx",
            "/src/components/helpers.ts",
            "/src/components/stories/Button.stories.tsx",
        ]
    )

    found = ContainerLocator(fs).locate(Path("/src"))

    assert list(found) == [Path("/src/components")]
    components = found[Path("/src/components")]
    assert _names(components) == ["Button", "Card"]
    assert components[0].source_path == Path("/src/components/Button.tsx")
    assert components[0].extension == ".tsx"
    assert components[1].extension == ".jsx"


def test_container_without_checkable_components_is_not_registered() -> None:
    fs = MemoryFileSystem(["/src/components/index.tsx", "/src/components/types.ts"])

    assert ContainerLocator(fs).locate(Path("/src")) == {}


def test_nested_containers_are_evaluated_independently() -> None:
    fs = MemoryFileSystem(
        [
            "/src/components/Button.tsx",
            "/src/components/forms/components/Field.tsx",
            "/src/components/components/Inner.tsx",
            "/src/features/cart/components/CartItem.tsx",
        ]
    )

    found = ContainerLocator(fs).locate(Path("/src"))

    assert set(found) == {
        Path("/src/components"),
        Path("/src/components/components"),
        Path("/src/components/forms/components"),
        Path("/src/features/cart/components"),
    }
    assert _names(found[Path("/src/components")]) == ["Button"]
    assert _names(found[Path("/src/components/components")]) == ["Inner"]
    assert _names(found[Path("/src/components/forms/components")]) == ["Field"]
    all_names = [name for components in found.values() for name in _names(components)]
    assert sorted(all_names) == ["Button", "CartItem", "Field", "Inner"]


def test_root_named_components_is_a_container() -> None:
    fs = MemoryFileSystem(["/components/Button.tsx"])

    found = ContainerLocator(fs).locate(Path("/components"))

    assert _names(found[Path("/components")]) == ["Button"]


def test_directories_are_not_components_even_with_component_names() -> None:
    fs = MemoryFileSystem(["/src/components/Modal.tsx/inner.txt"])

    assert ContainerLocator(fs).locate(Path("/src")) == {}


def test_traversal_order_does_not_depend_on_listing_order() -> None:
    files = [
        "/src/b/components/Zeta.tsx",
        "/src/a/components/Beta.tsx",
        "/src/a/components/Alpha.tsx",
    ]
    forward = ContainerLocator(MemoryFileSystem(files)).locate(Path("/src"))
    backward = ContainerLocator(MemoryFileSystem(files, listing_order="reversed")).locate(
        Path("/src")
    )

    assert list(forward) == [Path("/src/a/components"), Path("/src/b/components")]
    assert list(forward) == list(backward)
    assert _names(forward[Path("/src/a/components")]) == ["Alpha", "Beta"]


def test_stories_directories_are_traversed_by_default() -> None:
    fs = MemoryFileSystem(
        ["/src/components/Button.tsx", "/src/components/stories/Button.stories.tsx"]
    )

    ContainerLocator(fs).locate(Path("/src"))

    assert "/src/components/stories" in fs.listed


def test_stories_directories_can_be_skipped() -> None:
    fs = MemoryFileSystem(
        [
            "/src/components/Button.tsx",
            "/src/components/stories/Button.stories.tsx",
            "/src/components/stories/components/Demo.tsx",
        ]
    )
    locator = ContainerLocator(fs, traversal=TraversalConfig(skip_stories_dirs=True))

    found = locator.locate(Path("/src"))

    assert "/src/components/stories" not in fs.listed
    assert list(found) == [Path("/src/components")]


def test_unlistable_directory_aborts_the_scan() -> None:
    fs = MemoryFileSystem(["/src/components/Button.tsx", "/src/private/components/Secret.tsx"])
    fs.unreadable.add("/src/private")

    with pytest.raises(TraversalError) as excinfo:
        ContainerLocator(fs).locate(Path("/src"))

    assert excinfo.value.path == Path("/src/private")
    assert isinstance(excinfo.value.cause, PermissionError)


def test_missing_root_raises_traversal_error() -> None:
    with pytest.raises(TraversalError):
        ContainerLocator(MemoryFileSystem()).locate(Path("/nowhere"))


def test_containers_wraps_mapping() -> None:
    fs = MemoryFileSystem(["/src/components/Button.tsx"])

    containers = ContainerLocator(fs).containers(Path("/src"))

    assert len(containers) == 1
    assert containers[0].path == Path("/src/components")
    assert _names(containers[0].components) == ["Button"]


def test_locate_on_disk(tmp_path: Path) -> None:
    components = tmp_path / "src" / "components"
    (components / "stories").mkdir(parents=True)
    (components / "Button.tsx").write_text("export {};\n", encoding="utf-8")
    (components / "index.tsx").write_text("export {};\n", encoding="utf-8")

    found = ContainerLocator().locate(tmp_path / "src")

    assert _names(found[components]) == ["Button"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinked_files_are_not_components(tmp_path: Path) -> None:
    components = tmp_path / "src" / "components"
    components.mkdir(parents=True)
    target = tmp_path / "Real.tsx"
    target.write_text("export {};\n", encoding="utf-8")
    try:
        (components / "Linked.tsx").symlink_to(target)
    except OSError:
        pytest.skip("cannot create symlinks")

    assert ContainerLocator().locate(tmp_path / "src") == {}


def test_relative_root_named_components_is_a_container(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    components = tmp_path / "components"
    components.mkdir()
    (components / "Button.tsx").write_text("export {};\n", encoding="utf-8")
    monkeypatch.chdir(components)

    found = ContainerLocator().locate(Path("."))

    assert list(found) == [Path.cwd()]
    assert _names(found[Path.cwd()]) == ["Button"]
