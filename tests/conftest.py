import json
from pathlib import Path
from typing import Iterable

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def write_customers(tmp_path: Path):
    """Write customer lines (dicts are dumped as JSON, strings kept as is) to a temp file."""

    def _write(lines: Iterable[object], name: str = "customers.txt") -> Path:
        path = tmp_path / name
        rendered = [json.dumps(line) if isinstance(line, dict) else str(line) for line in lines]
        path.write_text("\n".join(rendered) + ("\n" if rendered else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_data_file() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "customers.txt"
