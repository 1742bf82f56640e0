"""Shared pytest configuration, marker assignment and file fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


type FileFactory = Callable[[Path, dict[str, bytes]], list[Path]]


@pytest.fixture
def make_files() -> FileFactory:
    """Create files under a directory from a ``{name: content}`` mapping."""

    def _make(directory: Path, files: dict[str, bytes]) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        for name, content in files.items():
            path = directory / name
            path.write_bytes(content)
            created.append(path)
        return created

    return _make
