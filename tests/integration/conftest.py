"""Fixtures for integration tests."""

from pathlib import Path

import pytest

from dotnet_build_test.testing.fake_dotnet import FakeDotnet


@pytest.fixture
def fake_dotnet(tmp_path: Path) -> FakeDotnet:
    """Create a fake dotnet executable."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    return FakeDotnet.create(bin_dir)


@pytest.fixture
def solution(tmp_path: Path) -> Path:
    """Create a solution file in its own directory."""
    solution_dir = tmp_path / "repo"
    solution_dir.mkdir()
    path = solution_dir / "App.sln"
    path.write_text("")
    return path
