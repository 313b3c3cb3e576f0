import pytest

from philosophers.cli import format_config, main
from philosophers.config import parse_args


def test_format_config_layout():
    config = parse_args(["5", "800", "200", "300", "7"])
    lines = format_config(config, False).splitlines()
    assert lines[0] == "Data:"
    assert len(lines) == 8
    assert lines[1] == "\tNumber of philosophers     : 5"
    assert lines[5] == "\tMinimum meals per philos   : 7"
    assert lines[7] == "\tSimulation ended?          : no"


def test_format_config_colons_aligned():
    config = parse_args(["2", "10", "20", "30"])
    lines = format_config(config, True).splitlines()[1:]
    assert len({line.index(":") for line in lines}) == 1
    assert lines[-1].endswith(": yes")


def test_format_config_shows_scaled_times():
    config = parse_args(["2", "10", "20", "30"])
    text = format_config(config, False)
    assert f"Time to die (ms)           : {config.time_to_die}\n" in text


@pytest.mark.parametrize("argv", [[], ["5"], ["1", "2", "3", "4", "5", "6"]])
def test_main_rejects_wrong_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Invalid args count\n"


def test_main_rejects_bad_number(capsys):
    assert main(["5", "800", "x", "200"]) == 1
    assert capsys.readouterr().out == "Invalid Number\n"


def test_main_success_prints_summary(capsys):
    assert main(["3", "800", "200", "200", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Data:\n")
    assert "\tNumber of philosophers     : 3\n" in out