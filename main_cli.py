from game.engine import QuizEngine
from game.stats import StatsAggregator
from game.store import create_store
from controllers.cli_controller import CLIController

stats = StatsAggregator(create_store())
engine = QuizEngine(stats=stats)

cli = CLIController(engine)
cli.run()
