from sample_statistics.build_report import SampleReport

PARAMETER_NAMES = {
    "sample_size": "Sample size",
    "mean": "Mean",
    "variance": "Variance",
    "standard_deviation": "Standard deviation",
}

STATISTIC_NAMES = {
    "mean": "Mean",
    "biased_variance": "Biased variance",
    "unbiased_variance": "Unbiased variance",
    "biased_standard_deviation": "Biased standard deviation",
    "unbiased_standard_deviation": "Unbiased standard deviation",
}


def format_report(report: SampleReport) -> str:
    lines = ["Known parameters:"]
    lines += _format_known_values(report.params.model_dump(), PARAMETER_NAMES)
    lines += ["", "Known statistics:"]
    lines += _format_known_values(report.statistics.model_dump(), STATISTIC_NAMES)
    lines += ["", ""]
    for interval in report.intervals:
        lines.append(
            f"{interval.type.display_name}: ({interval.lower_bound:.8f}, {interval.upper_bound:.8f}), confidence = {interval.confidence:.2f}"
        )
    return "\n".join(lines)


def _format_known_values(values: dict, display_names: dict[str, str]) -> list[str]:
    return [
        f"{display_name}: {values[field]:.8f}"
        for field, display_name in display_names.items()
        if values.get(field) is not None
    ]
