"""Pytest configuration and fixtures."""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

# Keep records written during the test run out of backend/data.
os.environ.setdefault("MODELHUB_STORAGE_DIR", tempfile.mkdtemp(prefix="modelhub-tests-"))


@pytest.fixture
def sample_csv_bytes():
    """A small tabular dataset with a label column and one missing value."""
    return (
        b"sepal_length,sepal_width,species,label\n"
        b"5.1,3.5,setosa,0\n"
        b"4.9,,setosa,0\n"
        b"6.2,2.9,versicolor,1\n"
    )

