"""
Game Configuration
Centralized settings for the Suit Counter quiz
"""
import os


class GameConfig:
    """Core game configuration"""

    # Deck settings
    HAND_SIZE = 13
    SUIT_SIZE = 13
    MIN_ANSWER = 0
    MAX_ANSWER = 13

    # Round types
    ROUND_SINGLE = 'single'
    ROUND_DOUBLE = 'double'
    ROUND_SUM = 'sum'

    # Round selection thresholds (10% sum, 20% double, 70% single)
    SUM_ROUND_THRESHOLD = 0.10
    DOUBLE_ROUND_THRESHOLD = 0.30

    # Answer option offsets
    CLOSE_OFFSETS = [-2, -1, 1, 2]
    DUPLICATE_OFFSETS = [-1, 0, 1]
    OPTION_COUNT = 3

    # Sessions idle longer than this (seconds) are dropped
    SESSION_TTL = int(os.getenv('SESSION_TTL', 3600))

    # Round outcomes
    OUTCOME_CORRECT = 'correct'
    OUTCOME_INCORRECT = 'incorrect'
    OUTCOME_TIMEOUT = 'timeout'

    RESULT_MESSAGES = {
        OUTCOME_CORRECT: "Correct! Well done!",
        OUTCOME_INCORRECT: "Wrong answer. Try again!",
        OUTCOME_TIMEOUT: "Time's up! Be faster next time!",
    }

    @staticmethod
    def clamp_answer(value):
        """Clamp a candidate answer into the valid 0..13 range"""
        return max(GameConfig.MIN_ANSWER, min(GameConfig.MAX_ANSWER, value))


class TimerConfig:
    """Adaptive countdown configuration (seconds)"""
    BASE_TIME = 7.0
    MIN_TIME = 2.0
    MAX_TIME = 15.0
    STEP = 0.1
    STREAK_LENGTH = 2
    TICK_INTERVAL = 0.1
    WARNING_THRESHOLD = 1.5


class StorageConfig:
    """Statistics storage configuration"""
    STATS_KEY = 'cardGameStats'
    BACKEND = os.getenv('STATS_BACKEND', 'redis')
    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD = os.getenv('REDIS_PASSWORD', None)
    CONNECT_TIMEOUT = 2

    # Combination grades on the statistics report (win rate %)
    GRADE_SUCCESS = 70
    GRADE_WARNING = 50
    WORST_LIMIT = 5
