# This file is run before any tests are run in order to configure tests

import logging
from pathlib import Path

import dotenv
import pytest

from sample_statistics.logging_setup import initialize_logging
from tests.mock_data_maker import write_sample_file

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    dotenv.load_dotenv()
    initialize_logging()


@pytest.fixture(scope="function")
def samples_directory(tmp_path: Path) -> Path:
    write_sample_file(
        tmp_path,
        "a_raw_values",
        {
            "values": [2, 4, 4, 4, 5, 5, 7, 9],
            "params": {"variance": 4.5714285714},
            "confidence": 0.95,
            "meanConfidenceIntervalWithKnownVariance": True,
            "meanConfidenceIntervalWithUnknownVariance": True,
            "varianceConfidenceInterval": True,
        },
    )
    write_sample_file(
        tmp_path,
        "b_frequency_table",
        {
            "variationalSeries": {"1": 2, "2": 2, "3": 2},
            "confidence": 0.9,
            "varianceConfidenceInterval": True,
        },
    )
    write_sample_file(
        tmp_path,
        "c_parameters_only",
        {"params": {"sampleSize": 100, "mean": 23.6, "standardDeviation": 7}},
    )
    (tmp_path / "notes.txt").write_text("not a sample")
    return tmp_path
