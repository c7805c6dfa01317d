from time import time


def run_evaluation(app, eval_cases):
    results = []

    for case in eval_cases:
        start = time()
        decision = app.ask(case["question"])
        latency_ms = int((time() - start) * 1000)

        candidate = decision.candidate

        results.append({
            "id": case["id"],
            "question": case["question"],
            "refused": not decision.found,
            "confidence": candidate.confidence if candidate else 0.0,
            "error": candidate.entry.error if candidate else None,
            "strategy": candidate.strategy.value if candidate else None,
            "processed_query": decision.processed_query,
            "latency_ms": latency_ms,
        })

    return results
