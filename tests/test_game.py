import pytest

from dsakit.game import Outcome, judge_guess, main, play


def test_judge_guess():
    assert judge_guess(50, 50) is Outcome.WIN
    assert judge_guess(50, 10) is Outcome.TOO_LOW
    assert judge_guess(50, 90) is Outcome.TOO_HIGH


def test_win_on_first_guess_stops_the_game():
    rounds = list(play(42, [42, 1, 2], 5))
    assert [outcome for outcome, _ in rounds] == [Outcome.WIN]


def test_losing_uses_every_turn():
    rounds = list(play(50, [10, 90, 20], 3))
    assert [outcome for outcome, _ in rounds] == [
        Outcome.TOO_LOW,
        Outcome.TOO_HIGH,
        Outcome.LOSE,
    ]
    assert [left for _, left in rounds] == list(range(2, -1, -1))


def test_win_on_last_turn_is_a_win():
    rounds = list(play(7, [1, 7], 2))
    assert rounds[-1][0] is Outcome.WIN
    assert len(rounds) == 2


def test_single_turn_wrong_guess_loses():
    assert list(play(7, [3], 1)) == [(Outcome.LOSE, 0)]


def test_no_turns_rejected():
    with pytest.raises(ValueError):
        play(7, [7], 0)


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_main_win(monkeypatch, capsys):
    _feed(monkeypatch, ["10", "42"])
    assert main(["--secret", "42"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Too low You have 4 turns left", "YOU WIN!"]


def test_main_lose(monkeypatch, capsys):
    _feed(monkeypatch, ["99"] * 5)
    main(["--secret", "42"])
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "You lose! The number was 42"
    assert out.count("Too high") == 4