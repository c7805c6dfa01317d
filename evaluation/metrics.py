def calculate_metrics(results, eval_cases):
    case_map = {c["id"]: c for c in eval_cases}

    match_correct = 0
    match_total = 0
    refusal_correct = 0
    refusal_total = 0
    overconfident = 0

    for r in results:
        expected = case_map[r["id"]]

        if expected["should_refuse"]:
            refusal_total += 1
            if r["refused"]:
                refusal_correct += 1
            continue

        match_total += 1
        if r["error"] == expected["expected_error"]:
            match_correct += 1
        elif r["confidence"] > 0.7:
            # Wrong entry returned with high confidence
            overconfident += 1

    return {
        "match_accuracy": match_correct / match_total if match_total else 1.0,
        "refusal_accuracy": refusal_correct / refusal_total if refusal_total else 1.0,
        "overconfidence_count": overconfident,
        "total_cases": len(results),
    }
