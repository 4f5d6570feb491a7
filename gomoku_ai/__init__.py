"""
Gomoku AI: alpha-beta search with threat-based evaluation.
"""

from .board import Board
from .config import BLACK, EMPTY, OUT_OF_BOUNDS, WHITE, ConfigError
from .core_api import GomokuCoreAPI
from .difficulty import SearchConfig, get_search_config, load_search_configs
from .evaluate import Evaluator, find_immediate_threat
from .minmax import EvaluationResult, SearchEngine, SearchEvent, SearchTimeout
from .moves import Move, generate_moves
from .shape import THREAT_COST, ThreatType, classify, combination_bonus, extract_line

__all__ = [
    'Board', 'BLACK', 'WHITE', 'EMPTY', 'OUT_OF_BOUNDS', 'ConfigError',
    'GomokuCoreAPI', 'SearchConfig', 'get_search_config', 'load_search_configs',
    'Evaluator', 'find_immediate_threat', 'EvaluationResult', 'SearchEngine',
    'SearchEvent', 'SearchTimeout', 'Move', 'generate_moves', 'THREAT_COST', 'ThreatType',
    'classify', 'combination_bonus', 'extract_line',
]
