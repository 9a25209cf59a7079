"""Hold'em Advisor CLI: Typer-based command line interface."""

import logging
import random
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from holdem_advisor import config
from holdem_advisor.errors import HoldemAdvisorError

app = typer.Typer(
    name="holdem-advisor",
    help="Texas Hold'em equity simulator and move advisor",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Texas Hold'em equity simulator and move advisor."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _board_codes(board: str) -> List[str]:
    from holdem_advisor.models.card import split_codes
    return split_codes(board)


def _rng(seed: Optional[int]) -> Optional[random.Random]:
    if seed is None:
        seed = config.SEED
    return random.Random(seed) if seed is not None else None


def _fail(error: Exception) -> None:
    console.print(f"[red]{error}[/red]")
    raise typer.Exit(1)


@app.command()
def equity(
    hero1: str = typer.Argument(..., help="First hole card, e.g. As"),
    hero2: str = typer.Argument(..., help="Second hole card, e.g. Kh"),
    board: str = typer.Option("", "--board", "-b",
                              help="Known community cards, e.g. 'Qs Jd 2c'"),
    opponents: int = typer.Option(config.DEFAULT_OPPONENTS, "--opponents", "-o",
                                  help="Number of random opponents (1-8)"),
    iterations: int = typer.Option(config.DEFAULT_ITERATIONS, "--iterations", "-n",
                                   help="Monte Carlo trials"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible runs"),
):
    """Estimate win/tie/loss and equity against random hands."""
    from holdem_advisor.formatters.table import TableFormatter
    from holdem_advisor.simulation.equity import EquitySimulator, validate_cards

    try:
        hero, known = validate_cards([hero1, hero2], _board_codes(board))
        result = EquitySimulator(_rng(seed)).simulate(hero, known, opponents, iterations)
    except HoldemAdvisorError as e:
        _fail(e)

    fmt = TableFormatter(console)
    fmt.print_result(result, hero, known)


@app.command()
def advise(
    hero1: str = typer.Argument(..., help="First hole card, e.g. As"),
    hero2: str = typer.Argument(..., help="Second hole card, e.g. Kh"),
    board: str = typer.Option("", "--board", "-b",
                              help="Known community cards, e.g. 'Qs Jd 2c'"),
    opponents: int = typer.Option(config.DEFAULT_OPPONENTS, "--opponents", "-o",
                                  help="Number of opponents (1-8)"),
    position: str = typer.Option(config.DEFAULT_POSITION, "--position", "-p",
                                 help="early, middle, late, blind (or BTN, UTG, ...)"),
    pot: float = typer.Option(config.DEFAULT_POT, "--pot", help="Pot size before acting"),
    to_call: float = typer.Option(config.DEFAULT_TO_CALL, "--to-call",
                                  help="Amount to call; 0 if not facing a bet"),
    stack_bb: float = typer.Option(config.DEFAULT_STACK_BB, "--stack-bb",
                                   help="Effective stack in big blinds"),
    iterations: int = typer.Option(config.DEFAULT_ITERATIONS, "--iterations", "-n",
                                   help=f"Monte Carlo trials (at least {config.MIN_ITERATIONS})"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible runs"),
):
    """Simulate the spot and suggest a baseline move."""
    from holdem_advisor.analysis.spot import SpotAnalyzer
    from holdem_advisor.formatters.table import TableFormatter
    from holdem_advisor.models.simulation import SpotRequest

    try:
        request = SpotRequest(
            hero_cards=[hero1, hero2],
            board_cards=_board_codes(board),
            opponents=opponents,
            position=position,
            pot_size=pot,
            to_call=to_call,
            stack_bb=stack_bb,
            iterations=iterations,
        )
        analysis = SpotAnalyzer().analyze(request, rng=_rng(seed))
    except HoldemAdvisorError as e:
        _fail(e)

    fmt = TableFormatter(console)
    fmt.print_analysis(analysis)


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5 to 7 cards, e.g. As Ks Qs Js Ts"),
):
    """Show the best five-card hand among the given cards."""
    from holdem_advisor.formatters.table import TableFormatter
    from holdem_advisor.models.card import parse_cards
    from holdem_advisor.simulation.evaluator import HandEvaluator

    try:
        parsed = parse_cards(cards)
        score = HandEvaluator.evaluate_best(parsed)
    except HoldemAdvisorError as e:
        _fail(e)

    fmt = TableFormatter(console)
    fmt.print_hand(parsed, score)


@app.command()
def cards():
    """List every card code with its label."""
    from holdem_advisor.formatters.table import TableFormatter
    from holdem_advisor.models.card import card_options

    fmt = TableFormatter(console)
    fmt.print_card_options(card_options())


if __name__ == "__main__":
    app()
