import logging
import os
import sys
from pathlib import Path

import dotenv
import pandas as pd
import streamlit as st
import typeguard

current_dir = os.path.dirname(os.path.abspath(__file__))
top_level_dir = os.path.abspath(os.path.join(current_dir, "../"))
sys.path.append(top_level_dir)

from sample_statistics.build_report import SampleReport, build_report
from sample_statistics.display_report import PARAMETER_NAMES, STATISTIC_NAMES
from sample_statistics.errors import SampleStatisticsError
from sample_statistics.load_sample import list_sample_files, load_sample
from sample_statistics.logging_setup import initialize_logging

logger = logging.getLogger(__name__)


def main():
    dotenv.load_dotenv()
    initialize_logging()
    samples_directory = os.getenv("SAMPLES_DIRECTORY", "samples")

    st.title("Sample Statistics")
    sample_files = list_sample_files(samples_directory)
    if not sample_files:
        st.warning(f"No samples found in '{samples_directory}'.")
        return

    selected = st.selectbox(
        "Choose sample", sample_files, format_func=lambda path: path.stem
    )
    sample_file = typeguard.check_type(selected, Path)

    try:
        report = build_report(load_sample(sample_file), sample_file.stem)
    except SampleStatisticsError as e:
        st.error(f"Could not build report for '{sample_file.stem}': {e}")
        return

    display_report(report)


def display_report(report: SampleReport) -> None:
    st.subheader("Known parameters")
    display_known_values(report.params.model_dump(), PARAMETER_NAMES)
    st.subheader("Known statistics")
    display_known_values(report.statistics.model_dump(), STATISTIC_NAMES)

    st.subheader("Confidence intervals")
    if not report.intervals:
        st.write("No confidence intervals were requested.")
        return
    data = [
        {
            "interval": interval.type.display_name,
            "lower_bound": interval.lower_bound,
            "upper_bound": interval.upper_bound,
            "confidence": interval.confidence,
        }
        for interval in report.intervals
    ]
    st.dataframe(pd.DataFrame(data), use_container_width=True, hide_index=True)


def display_known_values(values: dict, display_names: dict[str, str]) -> None:
    data = [
        {"name": display_name, "value": values[field]}
        for field, display_name in display_names.items()
        if values.get(field) is not None
    ]
    if not data:
        st.write("None")
        return
    st.dataframe(pd.DataFrame(data), use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
