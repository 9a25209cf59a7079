"""Tests for the Typer CLI."""

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


class TestEquityCommand:

    def test_equity_table(self):
        result = runner.invoke(app, ["equity", "As", "Ah", "-n", "500", "--seed", "1"])
        assert result.exit_code == 0
        assert "Equity" in result.output
        assert "Hero: As Ah" in result.output

    def test_duplicate_exits(self):
        result = runner.invoke(app, ["equity", "As", "As"])
        assert result.exit_code == 1
        assert "identical" in result.output

    def test_bad_board_exits(self):
        result = runner.invoke(app, ["equity", "As", "Kd", "--board", "2c 3c"])
        assert result.exit_code == 1


class TestAdviseCommand:

    def test_advise(self):
        result = runner.invoke(app, [
            "advise", "As", "3d", "--board", "KsQsJsTs2h", "--to-call", "0",
            "-n", "500", "--seed", "2",
        ])
        assert result.exit_code == 0
        assert "River: Value Bet / Raise" in result.output

    def test_iteration_floor(self):
        result = runner.invoke(app, ["advise", "As", "Kd", "-n", "100"])
        assert result.exit_code == 1
        assert "at least" in result.output


class TestEvaluateCommand:

    def test_evaluate(self):
        result = runner.invoke(app, ["evaluate", "As", "Ks", "Qs", "Js", "Ts"])
        assert result.exit_code == 0
        assert "Straight Flush" in result.output

    def test_too_few(self):
        result = runner.invoke(app, ["evaluate", "As", "Ks"])
        assert result.exit_code == 1


def test_cards_lists_deck():
    result = runner.invoke(app, ["cards"])
    assert result.exit_code == 0
    assert "AS (Spades)" in result.output
