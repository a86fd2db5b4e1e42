from flask import jsonify

from utils import log


class FlaskQuizController:
    def __init__(self, engine):
        self.engine = engine

    def get_state(self):
        return jsonify(self.engine.get_state())

    def start_round(self, round_type=None):
        log("FLASK_CTRL", f"Round request - type: {round_type or 'random'}")
        state = self.engine.start_round(round_type=round_type)
        return jsonify({**state, "ui_log": self.engine.consume_ui_log()})

    def answer(self, value):
        outcome = self.engine.submit_answer(value)

        if outcome is None:
            log("FLASK_CTRL", f"Answer {value} ignored, round already resolved")

        return jsonify({
            "accepted": outcome is not None,
            "outcome": outcome,
            "state": self.engine.get_state(),
            "ui_log": self.engine.consume_ui_log(),
        })


class FlaskStatsController:
    def __init__(self, stats):
        self.stats = stats

    def summary(self):
        return jsonify({**self.stats.get_stats(), "report": self.stats.combination_report()})

    def reset(self):
        self.stats.reset_stats()
        return jsonify(self.stats.get_stats())
