"""Loader call fixtures"""

import re
import typing as t
from pathlib import Path

import pytest
from _pytest.fixtures import SubRequest

from actionkit import exceptions

# Get all sample files list
SAMPLES_DIR: Path = Path(__file__).parent / "samples"
SAMPLES: t.List[Path] = sorted(item for item in SAMPLES_DIR.iterdir() if item.is_file())

PRAGMA_MATCHER_TEMPLATE: str = r"^\s*#\s*{}:\s*(.*)$"


@pytest.fixture(params=SAMPLES, ids=[item.stem for item in SAMPLES])
def sample_snapshot(request: SubRequest) -> t.Tuple[Path, t.Optional[t.Type[Exception]], t.Optional[str]]:
    """Return sample snapshot file path with (maybe) exception handling instructions"""
    file_path: Path = request.param
    expected_exception_type: t.Optional[t.Type[Exception]] = None
    expected_exception_match: t.Optional[str] = None
    exception_type_pattern: t.Pattern = re.compile(PRAGMA_MATCHER_TEMPLATE.format("exception"))
    exception_match_pattern: t.Pattern = re.compile(PRAGMA_MATCHER_TEMPLATE.format("match"))
    with file_path.open(encoding="utf-8") as f:
        for line in f:
            for match in exception_type_pattern.finditer(line):
                expected_exception_type = getattr(exceptions, match.group(1))
                break
            for match in exception_match_pattern.finditer(line):
                expected_exception_match = match.group(1)
                break
    return file_path, expected_exception_type, expected_exception_match
