"""Rich table formatting for terminal output."""

from typing import List, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from holdem_advisor.models.card import Card, format_cards
from holdem_advisor.models.simulation import Recommendation, SimulationResult, SpotAnalysis
from holdem_advisor.simulation.evaluator import HandEvaluator, HandScore


class TableFormatter:
    """Format simulator output as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_result(self, result: SimulationResult, hero: Sequence[Card],
                     board: Sequence[Card]) -> None:
        """Print win/tie/loss/equity percentages."""
        table = Table(title=f"Hero: {format_cards(hero)} | Board: {format_cards(board) or 'Unknown'}",
                      min_width=48)
        table.add_column("Outcome", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Percent", justify="right", style="green")

        table.add_row("Win", str(result.wins), f"[green]{result.win_pct:.1f}%[/green]")
        table.add_row("Tie", str(result.ties), f"{result.tie_pct:.1f}%")
        table.add_row("Loss", str(result.losses), f"[red]{result.loss_pct:.1f}%[/red]")
        table.add_row("", "", "")
        table.add_row("Equity", "", f"[bold]{result.equity_pct:.1f}%[/bold]")

        self.console.print(table)

    def print_recommendation(self, recommendation: Recommendation, iterations: int) -> None:
        """Print the suggested move in a panel."""
        body = (
            f"[bold]{recommendation.street.value}: {recommendation.action}[/bold]\n"
            f"{recommendation.reason}\n"
            f"[dim]Based on {iterations:,} Monte Carlo iterations and current pot setup.[/dim]"
        )
        self.console.print(Panel(body, title="Proper Move (Baseline)", border_style="yellow"))

    def print_analysis(self, analysis: SpotAnalysis) -> None:
        self.print_result(analysis.result, analysis.hero_cards, analysis.board_cards)
        self.console.print()
        self.print_recommendation(analysis.recommendation, analysis.result.iterations)

    def print_hand(self, cards: Sequence[Card], score: HandScore) -> None:
        """Print the category and tiebreak ranks of an evaluated hand."""
        table = Table(title=f"Cards: {format_cards(cards)}")
        table.add_column("Hand", style="cyan")
        table.add_column("Category", justify="right")
        table.add_column("Tiebreak", justify="right", style="green")
        table.add_row(
            HandEvaluator.get_rank_name(score),
            str(int(score[0])),
            " ".join(str(v) for v in score[1:]),
        )
        self.console.print(table)

    def print_card_options(self, options: List[Tuple[str, str]]) -> None:
        table = Table(title="Cards")
        table.add_column("Code", style="cyan")
        table.add_column("Label")
        for code, label in options:
            table.add_row(code, label)
        self.console.print(table)
