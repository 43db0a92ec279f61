import pytest

from philo.cli import main


def test_wrong_number_of_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().err == "Wrong number of arguments\n"


@pytest.mark.parametrize(
    "args, message",
    [
        (["0", "100", "50", "50"], "Invalid philosophers number\n"),
        (["251", "100", "50", "50"], "Invalid philosophers number\n"),
        (["2", "abc", "50", "50"], "Invalid time to die\n"),
        (["2", "100", "0", "50"], "Invalid time to eat\n"),
        (["2", "100", "50", "-5"], "Invalid time to sleep\n"),
        (["2", "100", "50", "50", "-1"], "Invalid number of times each philo must eat\n"),
    ],
)
def test_invalid_arguments(capsys, args, message):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == message
    assert captured.out == ""


def test_single_philosopher_run(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("philosopher 1 has taken a fork")
    assert lines[-1].endswith("philosopher 1 died")


def test_run_with_meal_limit(capsys):
    assert main(["2", "800", "50", "50", "1"]) == 0
    out = capsys.readouterr().out
    assert "philosopher 1 is eating" in out
    assert "philosopher 2 is eating" in out
    assert "died" not in out


def test_zero_meals_finishes_without_eating(capsys):
    assert main(["2", "800", "50", "50", "0"]) == 0
    out = capsys.readouterr().out
    assert "is eating" not in out
    assert "died" not in out