import logging
from pathlib import Path

from troubleshoot_kb.app import TroubleshootApp
from troubleshoot_kb.config import TroubleshootConfig
from evaluation.cases import EVAL_CASES
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation

logging.basicConfig(level=logging.WARNING)

# Step 1: Evaluation config (bundled KB, no unknown-query log)
config = TroubleshootConfig(
    kb_path=str(Path(__file__).parent.parent / "data" / "kb.json"),
    log_unknown_queries=False,
)

# Step 2: Build the engine
app = TroubleshootApp(config)
app.initialize()

# Step 3: Run cases
results = run_evaluation(app, EVAL_CASES)

for r in results:
    print(f"Query: {r['question']}")
    print(f"Processed: {r['processed_query']}")
    print(f"Result: {r['error']} ({r['confidence']:.2f}, {r['strategy']}) in {r['latency_ms']}ms")
    print("-" * 50)

# Step 4: Metrics
print(calculate_metrics(results, EVAL_CASES))
