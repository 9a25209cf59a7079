"""Full advice flow for one spot: validate, simulate, recommend."""

import logging
import random
from typing import List, Optional, Tuple

from holdem_advisor import config
from holdem_advisor.advice.recommender import MoveRecommender
from holdem_advisor.errors import (
    InvalidBoardSizeError, InvalidIterationsError,
    InvalidOpponentCountError, InvalidTableContextError,
)
from holdem_advisor.models.action import BOARD_SIZES
from holdem_advisor.models.card import Card
from holdem_advisor.models.position import Position
from holdem_advisor.models.simulation import SpotAnalysis, SpotRequest
from holdem_advisor.simulation.equity import EquitySimulator, validate_cards

logger = logging.getLogger(__name__)


class SpotAnalyzer:
    """Validates a SpotRequest the way an input form does, then runs the core."""

    def __init__(self, min_iterations: int = config.MIN_ITERATIONS,
                 recommender: Optional[MoveRecommender] = None):
        self.min_iterations = min_iterations
        self.recommender = recommender or MoveRecommender()

    def validate(self, request: SpotRequest) -> Tuple[List[Card], List[Card], Position]:
        """Reject the request before any trial runs.

        Board size is checked before the cards themselves, matching the
        order an input form reports problems in.

        Returns:
            Parsed hero cards, board cards and position.

        Raises:
            HoldemAdvisorError: The matching subclass for the first bad field.
        """
        if len(request.board_cards) not in BOARD_SIZES:
            raise InvalidBoardSizeError("Board must have 0, 3, 4, or 5 cards.")
        hero, board = validate_cards(request.hero_cards, request.board_cards)
        if not config.MIN_OPPONENTS <= request.opponents <= config.MAX_OPPONENTS:
            raise InvalidOpponentCountError(
                f"Opponent count must be between {config.MIN_OPPONENTS} "
                f"and {config.MAX_OPPONENTS}.")
        if request.iterations < self.min_iterations:
            raise InvalidIterationsError(
                f"Use at least {self.min_iterations} simulation iterations.")
        position = Position.parse(request.position)
        if request.pot_size < 0 or request.to_call < 0 or request.stack_bb <= 0:
            raise InvalidTableContextError(
                "Pot, call amount, and stack BB must be valid positive numbers.")
        return hero, board, position

    def analyze(self, request: SpotRequest,
                rng: Optional[random.Random] = None) -> SpotAnalysis:
        hero, board, position = self.validate(request)

        if rng is None and request.seed is not None:
            rng = random.Random(request.seed)
        result = EquitySimulator(rng).run_trials(
            hero, board, request.opponents, request.iterations)

        recommendation = self.recommender.recommend(
            equity_pct=result.equity_pct,
            opponents=request.opponents,
            position=position,
            pot_size=request.pot_size,
            to_call=request.to_call,
            stack_bb=request.stack_bb,
            board_count=len(board),
        )
        logger.info("%s -> %s", position.value, recommendation)
        return SpotAnalysis(
            hero_cards=hero,
            board_cards=board,
            result=result,
            recommendation=recommendation,
        )


def analyze_spot(request: SpotRequest, rng: Optional[random.Random] = None) -> SpotAnalysis:
    return SpotAnalyzer().analyze(request, rng)
