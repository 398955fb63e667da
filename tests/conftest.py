import pytest
from pathlib import Path

from ourairports_json.kinds import RecordKind


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def test_csv_dir(test_assets_dir) -> Path:
    """Return the directory holding one sample CSV per OurAirports table."""
    return test_assets_dir / 'csv'


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def table_text(test_csv_dir):
    """Return a function reading the sample table of a record kind."""
    def read(kind: RecordKind) -> str:
        return (test_csv_dir / f"{kind.table}.csv").read_text(encoding='utf-8')
    return read
