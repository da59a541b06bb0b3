"""
Tests for the terminal host.
"""

import builtins
from turnduel import console


def test_basic_attacks_beat_goblin(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "0")

    assert console.main(["knight", "goblin", "--fast"]) == 0

    output = capsys.readouterr().out
    assert "Knight faces Goblin!" in output
    assert "You are victorious!" in output
    assert "Match result: Won" in output


def test_invalid_choice_is_reprompted(monkeypatch, capsys):
    answers = iter(["9", "abc"] + ["0"] * 20)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert console.main(["knight", "goblin", "--fast"]) == 0
    assert "Enter a number from 0 to 3" in capsys.readouterr().out


def test_end_of_input_abandons(monkeypatch, capsys):
    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", closed_stdin)

    assert console.main(["knight", "goblin", "--fast"]) == 1


def test_unknown_combatant(capsys):
    assert console.main(["dragon", "goblin", "--fast"]) == 2
    assert "Available combatants" in capsys.readouterr().out
