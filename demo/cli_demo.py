#!/usr/bin/env python3
"""
Interactive CLI demo for the Troubleshoot KB Service.

Type a problem description and get the best-matching known issue with
its remediation steps.
"""
import sys

from dotenv import load_dotenv

# Imports assume PYTHONPATH=src is set (e.g., PYTHONPATH=src python demo/cli_demo.py)
from troubleshoot_kb.app import TroubleshootApp
from troubleshoot_kb.config import resolve_service_path
from troubleshoot_kb.config_loader import load_config_from_env
from troubleshoot_kb.security import ValidationError
from troubleshoot_kb.utils.unknown_query_log import UnknownQueryLog

# Load environment variables
load_dotenv()


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Troubleshoot KB Service - Interactive CLI Demo")
    print("=" * 60)
    print("\nDescribe your problem, e.g.:")
    print("  • wifi not working")
    print("  • error 404 on the intranet")
    print("  • my comp is realy slow")
    print("\nType ':unknowns' to list unanswered queries.")
    print("Type 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_decision(decision, query):
    """Print formatted decision."""
    result = decision.to_dict()
    print(f"\n🔍 Query: {query}")
    print(f"🔄 Processed: {result['processedQuery']}")

    if decision.found:
        print(f"✅ Issue: {result['error']} "
              f"(confidence {result['confidence']:.2f}, {result['matchStrategy']})")
    else:
        print(f"❌ {result['error']}")

    for number, step in enumerate(result["solution"], start=1):
        print(f"   {number}. {step}")

    print("-" * 60)


def print_unknowns(config):
    """Print queries recorded in the unknown-query log."""
    entries = list(UnknownQueryLog(resolve_service_path(config.unknown_queries_log_path)).read())
    if not entries:
        print("\nNo unanswered queries logged.\n")
        return

    print(f"\n{len(entries)} unanswered queries:")
    for entry in entries:
        print(f"  [{entry.get('timestamp')}] {entry.get('query')}")
    print("-" * 60)


def main():
    """Main CLI loop."""
    print_banner()

    try:
        config = load_config_from_env()
        app = TroubleshootApp(config)
        app.initialize()
    except Exception as e:
        print(f"\n❌ Failed to initialize service: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    # Interactive loop
    while True:
        try:
            query = input("You: ").strip()

            if not query:
                continue

            # Check for exit commands
            if query.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!\n")
                break

            if query == ":unknowns":
                print_unknowns(config)
                continue

            try:
                decision = app.ask(query)
                print_decision(decision, query)
            except ValidationError as e:
                print(f"\n❌ Invalid query: {e}")
                print("-" * 60)

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
