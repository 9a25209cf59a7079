"""Monte Carlo equity simulation for a hero hand against random opponents."""

import logging
import random
import time
from typing import List, Optional, Sequence, Tuple

from holdem_advisor import config
from holdem_advisor.errors import (
    DuplicateCardError, InvalidBoardSizeError, InvalidCardError,
    InvalidIterationsError, InvalidOpponentCountError,
)
from holdem_advisor.models.action import BOARD_SIZES
from holdem_advisor.models.card import Card, CardLike, format_cards, parse_cards
from holdem_advisor.models.simulation import SimulationResult
from holdem_advisor.simulation.deck import Deck
from holdem_advisor.simulation.evaluator import HandEvaluator

logger = logging.getLogger(__name__)


def validate_cards(hero_cards: Sequence[CardLike],
                   board_cards: Sequence[CardLike]) -> Tuple[List[Card], List[Card]]:
    """Parse and check hero and board cards.

    Raises:
        InvalidCardError: A code does not parse, or hero does not hold two cards.
        DuplicateCardError: A card appears twice across hero and board.
        InvalidBoardSizeError: Board is not 0, 3, 4 or 5 cards.
    """
    hero = parse_cards(hero_cards)
    board = parse_cards(board_cards)

    if len(hero) != 2:
        raise InvalidCardError(f"Hero must hold exactly 2 cards, got {len(hero)}")
    if hero[0] == hero[1]:
        raise DuplicateCardError(f"Hero cards are identical: {hero[0].code}")

    known = hero + board
    if len(set(known)) != len(known):
        seen = set()
        dupes = []
        for card in known:
            if card in seen:
                dupes.append(card.code)
            seen.add(card)
        raise DuplicateCardError(f"Duplicate cards selected: {', '.join(dupes)}")

    if len(board) not in BOARD_SIZES:
        raise InvalidBoardSizeError(
            f"Board must have 0, 3, 4, or 5 cards, got {len(board)}")
    return hero, board


class EquitySimulator:
    """Estimates win/tie/loss rates by dealing out random completions."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the simulator.

        Args:
            rng: Random source. Pass a seeded ``random.Random`` for
                reproducible results; defaults to an unseeded one.
        """
        if rng is None:
            rng = random.Random(config.SEED) if config.SEED is not None else random.Random()
        self.rng = rng

    def simulate(self, hero_cards: Sequence[CardLike],
                 board_cards: Sequence[CardLike] = (),
                 opponents: int = config.DEFAULT_OPPONENTS,
                 iterations: int = config.DEFAULT_ITERATIONS) -> SimulationResult:
        """Run ``iterations`` independent trials.

        Each trial completes the board, deals two cards to every opponent and
        credits the hero a full pot for an outright win or 1/n of it for an
        n-way chop.

        Args:
            hero_cards: The hero's two hole cards (codes or Cards).
            board_cards: Known community cards: 0, 3, 4 or 5.
            opponents: Number of random opponents, 1 to 8.
            iterations: Number of trials, at least 1.

        Returns:
            SimulationResult with the tallies.
        """
        hero, board = validate_cards(hero_cards, board_cards)
        if not config.MIN_OPPONENTS <= opponents <= config.MAX_OPPONENTS:
            raise InvalidOpponentCountError(
                f"Opponent count must be between {config.MIN_OPPONENTS} "
                f"and {config.MAX_OPPONENTS}, got {opponents}")
        if iterations < 1:
            raise InvalidIterationsError(f"Iterations must be at least 1, got {iterations}")
        return self.run_trials(hero, board, opponents, iterations)

    def run_trials(self, hero: List[Card], board: List[Card],
                   opponents: int, iterations: int) -> SimulationResult:
        """Trial loop for inputs that ``simulate`` or a caller already validated."""
        logger.debug("Simulating %s | %s vs %d opponent(s), %d iterations",
                     format_cards(hero), format_cards(board) or "-", opponents, iterations)
        started = time.perf_counter()

        deck = Deck(dead=hero + board, rng=self.rng)
        as_pair = {c: (c.rank.numeric_value, c.suit.value) for c in deck.live}
        hero_pairs = [(c.rank.numeric_value, c.suit.value) for c in hero]
        known_board = [(c.rank.numeric_value, c.suit.value) for c in board]
        board_needed = 5 - len(board)
        draw_count = board_needed + 2 * opponents
        best_of = HandEvaluator._best_of

        wins = ties = losses = 0
        equity_share = 0.0

        for _ in range(iterations):
            drawn = [as_pair[c] for c in deck.shuffled()[:draw_count]]
            full_board = known_board + drawn[:board_needed]

            hero_score = best_of(hero_pairs + full_board)
            best = hero_score
            winners = 1
            hero_best = True
            for p in range(opponents):
                base = board_needed + 2 * p
                score = best_of(drawn[base:base + 2] + full_board)
                if score > best:
                    best = score
                    winners = 1
                    hero_best = False
                elif score == best:
                    winners += 1

            if not hero_best:
                losses += 1
            elif winners == 1:
                wins += 1
                equity_share += 1
            else:
                ties += 1
                equity_share += 1 / winners

        result = SimulationResult(
            wins=wins,
            ties=ties,
            losses=losses,
            iterations=iterations,
            equity_share=equity_share,
        )
        logger.debug("Finished in %.2fs: win %.1f%% tie %.1f%% loss %.1f%% equity %.1f%%",
                     time.perf_counter() - started, result.win_pct, result.tie_pct,
                     result.loss_pct, result.equity_pct)
        return result


def simulate(hero_cards: Sequence[CardLike],
             board_cards: Sequence[CardLike] = (),
             opponents: int = config.DEFAULT_OPPONENTS,
             iterations: int = config.DEFAULT_ITERATIONS,
             rng: Optional[random.Random] = None) -> SimulationResult:
    """Convenience wrapper around ``EquitySimulator.simulate``."""
    return EquitySimulator(rng).simulate(hero_cards, board_cards, opponents, iterations)
