from sample_statistics.build_report import build_report
from sample_statistics.data_structures.data_models import KnownParameters
from sample_statistics.display_report import format_report
from tests.mock_data_maker import make_parameters_only_dataset, make_raw_dataset


def test_format_full_report():
    dataset = make_raw_dataset(
        params=KnownParameters(variance=4.5714285714),
        known_variance=True,
        variance=True,
    )
    text = format_report(build_report(dataset, "spread_out"))
    lines = text.splitlines()

    assert lines[0] == "Known parameters:"
    assert "Sample size: 8.00000000" in lines
    assert "Variance: 4.57142857" in lines
    assert "Known statistics:" in lines
    assert "Mean: 5.00000000" in lines
    assert "Biased variance: 4.00000000" in lines
    assert "Unbiased variance: 4.57142857" in lines
    assert "Biased standard deviation: 2.00000000" in lines
    assert lines[-2].startswith("Mean confidence interval (with known variance): (3.518")
    assert lines[-2].endswith("), confidence = 0.95")
    assert lines[-1].startswith("Variance confidence interval: (")


def test_format_parameters_only_report():
    dataset = make_parameters_only_dataset(
        KnownParameters(sample_size=100, mean=23.6, standard_deviation=7)
    )
    text = format_report(build_report(dataset, "parameters"))

    assert "Mean: 23.60000000" in text
    assert "Standard deviation: 7.00000000" in text
    assert "Variance: 49.00000000" in text
    statistics_section = text.split("Known statistics:")[1]
    assert statistics_section.strip() == ""
    assert "confidence interval" not in text
