import uuid
import time

from config import GameConfig
from game.engine import QuizEngine
from game.stats import StatsAggregator
from game.store import create_store
from utils import log


class GameManager:
    """
    Responsible for creating, storing, and ending quiz sessions.
    All sessions share one statistics aggregator.

    Sessions untouched for longer than session_ttl seconds are evicted
    whenever a new game is created or the sessions are listed.
    """

    def __init__(self, store=None, autostart=True, session_ttl=None):
        self.store = store if store is not None else create_store()
        self.stats = StatsAggregator(self.store)
        self.autostart = autostart
        self.session_ttl = GameConfig.SESSION_TTL if session_ttl is None else session_ttl
        # game_id -> session data
        self.games = {}

    # -----------------------------
    # CREATE GAME
    # -----------------------------

    def create_game(self):
        """
        Creates a new quiz session and returns (game_id, engine).
        """
        self.evict_stale()

        game_id = str(uuid.uuid4())

        engine = QuizEngine(stats=self.stats, autostart=self.autostart)

        now = time.time()
        self.games[game_id] = {
            "engine": engine,
            "created_at": now,
            "last_seen": now,
            "status": "active"
        }

        log("MANAGER", f"Created game {game_id}")

        return game_id, engine

    # -----------------------------
    # GET GAME
    # -----------------------------

    def get_game(self, game_id):
        session = self.games.get(game_id)

        if not session:
            raise KeyError(f"Game {game_id} not found")

        session["last_seen"] = time.time()
        return session["engine"]

    # -----------------------------
    # DELETE GAME
    # -----------------------------

    def delete_game(self, game_id):
        session = self.games.pop(game_id, None)
        if session:
            session["engine"].end()
            log("MANAGER", f"Deleted game {game_id}")
        return session is not None

    # -----------------------------
    # EVICTION
    # -----------------------------

    def evict_stale(self, now=None):
        """Drop idle sessions. Returns the evicted game ids."""
        if not self.session_ttl or self.session_ttl <= 0:
            return []

        now = time.time() if now is None else now
        stale = [
            gid for gid, data in self.games.items()
            if now - data["last_seen"] > self.session_ttl
        ]

        for gid in stale:
            session = self.games.pop(gid, None)
            if session:
                session["engine"].end()

        if stale:
            log("MANAGER", f"Evicted {len(stale)} idle game(s)")

        return stale

    # -----------------------------
    # LIST GAMES (DEBUG / ADMIN)
    # -----------------------------

    def list_games(self):
        self.evict_stale()
        now = time.time()
        return {
            gid: {
                "status": data["status"],
                "score": data["engine"].score,
                "base_time": data["engine"].timer.base_time,
                "age": now - data["created_at"],
                "idle": now - data["last_seen"],
            }
            for gid, data in self.games.items()
        }
