import logging
import os
import sys

import dotenv
from pydantic import ValidationError

from sample_statistics.build_report import build_report
from sample_statistics.display_report import format_report
from sample_statistics.errors import SampleSelectionError, SampleStatisticsError
from sample_statistics.load_sample import (
    choose_sample_file,
    list_sample_files,
    load_sample,
)
from sample_statistics.logging_setup import initialize_logging

logger = logging.getLogger(__name__)


def main() -> None:
    dotenv.load_dotenv()
    initialize_logging()
    samples_directory = os.getenv("SAMPLES_DIRECTORY", "samples")

    try:
        sample_files = list_sample_files(samples_directory)
        print("Available samples:")
        for i, sample_file in enumerate(sample_files):
            print(f"[{i + 1}] {sample_file.stem}")

        sample_file = choose_sample_file(sample_files, _read_sample_number())
        dataset = load_sample(sample_file)
        report = build_report(dataset, sample_file.stem)
    except (SampleStatisticsError, ValidationError, FileNotFoundError) as e:
        logger.error(f"Could not build report: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    print(format_report(report))


def _read_sample_number() -> int:
    raw_number = input("Choose sample: ").strip()
    try:
        return int(raw_number)
    except ValueError as e:
        raise SampleSelectionError(f"'{raw_number}' is not a sample number") from e


if __name__ == "__main__":
    main()
