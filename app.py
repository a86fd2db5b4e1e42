from flask import Flask, request, jsonify

from game.manager import GameManager
from controllers.flask_controller import FlaskQuizController, FlaskStatsController

app = Flask(__name__)

# -----------------------------
# GAME MANAGER (GLOBAL)
# -----------------------------

manager = GameManager()

# -----------------------------
# ERRORS
# -----------------------------

@app.errorhandler(KeyError)
def game_not_found(e):
    return jsonify({"error": str(e.args[0]) if e.args else "Game not found"}), 404


@app.errorhandler(ValueError)
def bad_request(e):
    return jsonify({"error": str(e)}), 400


# -----------------------------
# GAME LIFECYCLE
# -----------------------------

@app.route("/api/game/create", methods=["POST"])
def create_game():
    game_id, engine = manager.create_game()
    return jsonify({
        "game_id": game_id,
        "score": engine.score,
        "base_time": engine.timer.base_time,
    })


@app.route("/api/game/<game_id>", methods=["DELETE"])
def delete_game(game_id):
    if not manager.delete_game(game_id):
        raise KeyError(f"Game {game_id} not found")
    return jsonify({"deleted": game_id})


@app.route("/api/games")
def list_games():
    return jsonify(manager.list_games())


# -----------------------------
# ROUND ACTIONS
# -----------------------------

def json_body():
    """Request JSON as a dict; an absent body is empty, anything else is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def parse_answer(value):
    """Whole numbers only: ints, or digit strings like "7"."""
    if isinstance(value, bool):
        raise ValueError("Answer value must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ValueError("Answer value must be an integer")


@app.route("/api/game/<game_id>/round", methods=["POST"])
def start_round(game_id):
    engine = manager.get_game(game_id)
    controller = FlaskQuizController(engine)

    data = json_body()
    return controller.start_round(data.get("round_type"))


@app.route("/api/game/<game_id>/state")
def game_state(game_id):
    engine = manager.get_game(game_id)
    return FlaskQuizController(engine).get_state()


@app.route("/api/game/<game_id>/answer", methods=["POST"])
def answer(game_id):
    engine = manager.get_game(game_id)
    controller = FlaskQuizController(engine)

    data = json_body()
    if "value" not in data:
        raise ValueError("Missing answer value")

    return controller.answer(parse_answer(data["value"]))


# -----------------------------
# STATISTICS
# -----------------------------

@app.route("/api/stats")
def stats():
    return FlaskStatsController(manager.stats).summary()


@app.route("/api/stats/reset", methods=["POST"])
def reset_stats():
    return FlaskStatsController(manager.stats).reset()


if __name__ == "__main__":
    app.run(debug=True)
