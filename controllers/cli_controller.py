from config import GameConfig
from game.models import SUITS, SUIT_DATA
from utils import safe_print


class CLIController:
    def __init__(self, engine, input_fn=input):
        self.engine = engine
        self.input_fn = input_fn

    # -----------------------------
    # DISPLAY HELPERS
    # -----------------------------

    def show_round(self, state):
        safe_print("\n===== ROUND =====")
        safe_print(f"Type: {state['round_type']}   Score: {state['score']}   Time: {state['remaining']:.1f}s")

        if state["round_type"] == GameConfig.ROUND_SINGLE:
            for suit in SUITS:
                cards = state["cards"][suit]
                safe_print(f"{SUIT_DATA[suit]['symbol']} {' '.join(cards)}")

        for name, counts in state["hands"].items():
            tallies = []
            for suit in SUITS:
                count = counts[suit]
                tallies.append(f"{SUIT_DATA[suit]['symbol']}:{'?' if count is None else count}")
            safe_print(f"{name.capitalize():>6} | {'  '.join(tallies)}")

        safe_print(f"How many {state['hidden_suit_symbol']} {state['hidden_suit_name']}?")
        safe_print("Options: " + "   ".join(self.format_option(o) for o in state["options"]))
        safe_print("=================\n")

    @staticmethod
    def format_option(option):
        if isinstance(option, dict):
            return option["display"]
        return str(option)

    def show_result(self, state):
        safe_print(state["message"])
        safe_print(f"Answer: {state['correct_answer']}   Next time: {state['base_time']:.1f}s")

    # -----------------------------
    # MAIN GAME LOOP
    # -----------------------------

    def run(self, rounds=None):
        safe_print("=== SUIT COUNTER CLI ===")
        safe_print("Type the number of cards, or q to quit.")

        played = 0
        while rounds is None or played < rounds:
            state = self.engine.start_round()
            self.show_round(state)

            if not self.handle_answer(state):
                break

            self.show_result(self.engine.get_state())
            played += 1

        self.engine.end()
        safe_print(f"\nGAME OVER. Score: {self.engine.score}")

    # -----------------------------
    # ANSWER
    # -----------------------------

    def handle_answer(self, state):
        """Read answers until one resolves the round. False means quit."""
        values = [o["value"] if isinstance(o, dict) else o for o in state["options"]]

        while True:
            choice = self.input_fn("> ").strip().lower()

            if choice == "q":
                return False

            if self.engine.round.resolved:
                # Timer ran out while waiting for input
                return True

            if not choice.isdigit() or int(choice) not in values:
                safe_print("Pick one of the options.")
                continue

            self.engine.submit_answer(int(choice))
            return True
