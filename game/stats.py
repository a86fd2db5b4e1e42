"""
Statistics Aggregator
Win/loss record per hand combination, written through to a key-value store
"""
import json
import threading

import redis

from config import StorageConfig
from game.rules import combination_signature
from utils import log


def default_stats():
    return {
        "totalGames": 0,
        "totalWins": 0,
        "combinations": {},
    }


def win_rate(wins, games):
    """Percentage with one decimal place, 0 when nothing was played"""
    if games <= 0:
        return 0
    return round(wins / games * 100, 1)


def _is_count(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _validate(data):
    """Raise ValueError unless data has the persisted stats shape."""
    if not isinstance(data, dict):
        raise ValueError("stats record is not an object")
    if not _is_count(data.get("totalGames")) or not _is_count(data.get("totalWins")):
        raise ValueError("stats totals are missing or invalid")

    combinations = data.get("combinations")
    if not isinstance(combinations, dict):
        raise ValueError("stats combinations is not an object")
    for signature, entry in combinations.items():
        if not isinstance(entry, dict) or not _is_count(entry.get("games")) or not _is_count(entry.get("wins")):
            raise ValueError(f"invalid combination entry for {signature}")
    return data


class StatsAggregator:
    """
    Loads the stats record once, mutates it after every resolved round and
    flushes the whole structure back immediately. If a write fails the
    in-memory record stays authoritative.
    """

    def __init__(self, store, key=StorageConfig.STATS_KEY):
        self.store = store
        self.key = key
        self._lock = threading.Lock()
        self.data = self._load()

    # -----------------------------
    # PERSISTENCE
    # -----------------------------

    def _load(self):
        try:
            raw = self.store.get(self.key)
        except (redis.RedisError, OSError, UnicodeDecodeError) as e:
            log("STATS", f"Error loading stats: {e}")
            return default_stats()

        if raw is None:
            return default_stats()

        try:
            return _validate(json.loads(raw))
        except (ValueError, TypeError) as e:
            log("STATS", f"Malformed stats record, starting fresh: {e}")
            return default_stats()

    def _persist(self):
        try:
            self.store.set(self.key, json.dumps(self.data))
        except (redis.RedisError, OSError) as e:
            log("STATS", f"Failed to save stats: {e}")

    # -----------------------------
    # OPERATIONS
    # -----------------------------

    def record_game(self, counts, is_correct):
        signature = combination_signature(counts)

        with self._lock:
            self.data["totalGames"] += 1
            entry = self.data["combinations"].setdefault(signature, {"games": 0, "wins": 0})
            entry["games"] += 1

            if is_correct:
                self.data["totalWins"] += 1
                entry["wins"] += 1

            self._persist()

        log("STATS", f"Recorded {'win' if is_correct else 'loss'} for {signature}")
        return signature

    def get_stats(self):
        with self._lock:
            total_games = self.data["totalGames"]
            total_wins = self.data["totalWins"]
            return {
                "totalGames": total_games,
                "totalWins": total_wins,
                "winRate": win_rate(total_wins, total_games),
                "combinations": {
                    signature: dict(entry)
                    for signature, entry in self.data["combinations"].items()
                },
            }

    def reset_stats(self):
        with self._lock:
            self.data = default_stats()
            self._persist()
        log("STATS", "Statistics reset")

    # -----------------------------
    # REPORTING
    # -----------------------------

    def combination_report(self, limit=StorageConfig.WORST_LIMIT):
        """
        Totals plus per-combination rows: the `limit` worst win rates and the
        full list ordered by games played.
        """
        stats = self.get_stats()

        rows = []
        for signature, entry in stats["combinations"].items():
            rate = win_rate(entry["wins"], entry["games"])
            rows.append({
                "combination": signature,
                "games": entry["games"],
                "wins": entry["wins"],
                "losses": entry["games"] - entry["wins"],
                "winRate": rate,
                "grade": grade(rate),
            })

        return {
            "totalGames": stats["totalGames"],
            "totalWins": stats["totalWins"],
            "totalLosses": stats["totalGames"] - stats["totalWins"],
            "winRate": stats["winRate"],
            "worst": sorted(rows, key=lambda r: r["winRate"])[:limit],
            "all": sorted(rows, key=lambda r: r["games"], reverse=True),
        }


def grade(rate):
    if rate >= StorageConfig.GRADE_SUCCESS:
        return 'success'
    if rate >= StorageConfig.GRADE_WARNING:
        return 'warning'
    return 'danger'
