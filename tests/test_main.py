from pathlib import Path

import pytest

from sample_statistics.main import main
from tests.mock_data_maker import write_sample_file


def test_main_prints_chosen_sample(
    samples_directory: Path, monkeypatch: pytest.MonkeyPatch, capsys
):
    monkeypatch.setenv("SAMPLES_DIRECTORY", str(samples_directory))
    monkeypatch.setattr("builtins.input", lambda prompt: "2")

    main()

    output = capsys.readouterr().out
    assert "Available samples:" in output
    assert "[1] a_raw_values" in output
    assert "[2] b_frequency_table" in output
    assert "Unbiased variance: 0.80000000" in output
    assert "Variance confidence interval: (" in output


@pytest.mark.parametrize("answer", ["0", "4", "two"])
def test_main_bad_sample_number_exits(
    samples_directory: Path, monkeypatch: pytest.MonkeyPatch, capsys, answer: str
):
    monkeypatch.setenv("SAMPLES_DIRECTORY", str(samples_directory))
    monkeypatch.setattr("builtins.input", lambda prompt: answer)

    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_main_malformed_sample_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
):
    write_sample_file(
        tmp_path, "both_forms", {"values": [1, 2], "variationalSeries": {"1": 1}}
    )
    monkeypatch.setenv("SAMPLES_DIRECTORY", str(tmp_path))
    monkeypatch.setattr("builtins.input", lambda prompt: "1")

    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_main_missing_samples_directory_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
):
    monkeypatch.setenv("SAMPLES_DIRECTORY", str(tmp_path / "does_not_exist"))

    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 1
    assert "Error:" in capsys.readouterr().out
