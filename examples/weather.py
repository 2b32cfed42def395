import logging
import os

import markov


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "weather.yaml")

# "storm" has no outgoing transitions, so a forecast ends there.
chain = markov.load_chain(CONFIG_PATH)

for state in sorted(chain.get_all_states()):
	if chain.get_total(state):
		probabilities = chain.get_transition_probabilities(state)
		logger.info(state + ": " + ", ".join(f"{target} {p:.2f}" for target, p in sorted(probabilities.items())))

forecast = list(chain.walk("sunny", steps=14))
logger.info(f"Forecast: {' -> '.join(forecast)}")

data = chain.to_json()
print(data.decode("utf-8"))

restored = markov.Chain.from_json(data)
logger.info(f"Restored chain matches: {restored.to_dict() == chain.to_dict()}")
