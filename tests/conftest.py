from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    """Path to the project's rules.yaml."""
    return project_root / "rules.yaml"


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, Any], Path]:
    """
    Write data as YAML into tmp_path and return the file path.
    """

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.safe_dump(data, f)
        return path

    return _write
