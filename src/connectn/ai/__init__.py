"""Computer opponent for connect-N boards."""

from .evaluation import score_board
from .opponent import AIOpponent, choose_index, create_ai_opponent, select_move
from .policies import POLICIES, MinimaxPolicy, MovePolicy, PositionalPolicy, policy_for
from .search import SearchNode, best_move, candidate_moves, minimax

__all__ = [
    "score_board",
    "AIOpponent",
    "choose_index",
    "create_ai_opponent",
    "select_move",
    "POLICIES",
    "MinimaxPolicy",
    "MovePolicy",
    "PositionalPolicy",
    "policy_for",
    "SearchNode",
    "best_move",
    "candidate_moves",
    "minimax",
]
