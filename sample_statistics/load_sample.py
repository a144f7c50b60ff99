import logging
from pathlib import Path

from sample_statistics.data_structures.data_models import SampleDataset
from sample_statistics.errors import SampleSelectionError

logger = logging.getLogger(__name__)


def list_sample_files(samples_directory: str | Path) -> list[Path]:
    directory = Path(samples_directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Samples directory '{directory}' does not exist")
    sample_files = sorted(directory.glob("*.json"))
    logger.info(f"Found {len(sample_files)} samples in {directory}")
    return sample_files


def choose_sample_file(sample_files: list[Path], sample_number: int) -> Path:
    """`sample_number` is 1-based, matching the numbers shown to the user"""
    if not 1 <= sample_number <= len(sample_files):
        raise SampleSelectionError(
            f"Sample number must be between 1 and {len(sample_files)}, got {sample_number}"
        )
    return sample_files[sample_number - 1]


def load_sample(sample_file: str | Path) -> SampleDataset:
    path = Path(sample_file)
    logger.info(f"Loading sample from {path}")
    dataset = SampleDataset.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded sample '{path.stem}' in {dataset.form.value} form")
    return dataset
