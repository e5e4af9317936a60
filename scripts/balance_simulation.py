#!/usr/bin/env python3
"""
Game Balance Simulation for Cold War Terminal

Runs seeded batches of headless games with each scripted strategy through the
real GameEngine and prints how the games end.

Endings:
- nuclear_war: global tension reached 1.0
- government_collapse: domestic stability reached 0.0
- reality_failure: the secret weapon project completed
- max_turns: the operator survived to the turn cap

Strategies:
1. random - any directive, random targets
2. hawk - always escalate
3. dove - contain, leak or stand down
4. analyst - decrypt, trace and consult before acting
"""

import json
import logging

from coldwar.config import configure_logging, get_max_turns
from coldwar.engine.endings import EndingType
from coldwar.testing import STRATEGIES, run_batch, summarize_results


def print_summary_table(summaries: dict, num_games: int):
    """Print formatted summary table."""
    print("\n" + "=" * 100)
    print("COLD WAR TERMINAL BALANCE SIMULATION RESULTS")
    print(f"Games per strategy: {num_games}")
    print("=" * 100)

    ending_names = [e.value for e in EndingType]
    header = f"\n{'Strategy':<12}" + "".join(f"{name:>22}" for name in ending_names)
    print(header + f"{'Avg Len':>10} {'Mole %':>8} {'Overrides':>10}")
    print("-" * 120)

    for name, summary in summaries.items():
        games = summary["games"] or 1
        cells = "".join(
            f"{summary['endings'].get(ending, 0) / games * 100:>21.1f}%" for ending in ending_names
        )
        print(
            f"{name:<12}{cells}{summary['avg_turns']:>10.1f} "
            f"{summary['mole_exposed_rate'] * 100:>7.1f}% {summary['avg_overrides']:>10.2f}"
        )

    print("-" * 120)


def main():
    """Run the full simulation."""
    import argparse

    parser = argparse.ArgumentParser(description="Run Cold War Terminal balance simulation")
    parser.add_argument("--games", type=int, default=200,
                        help="Number of games per strategy (default: 200)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Base seed; game i uses seed + i (default: 0)")
    parser.add_argument("--max-turns", type=int, default=None,
                        help="Turn cap (default: COLDWAR_MAX_TURNS or 20)")
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), action="append",
                        help="Strategy to run (repeatable; default: all)")
    parser.add_argument("--json", action="store_true",
                        help="Print the summaries as JSON instead of a table")
    parser.add_argument("--verbose", action="store_true",
                        help="Log each game's ending")
    args = parser.parse_args()

    configure_logging(level=logging.DEBUG if args.verbose else None)
    max_turns = args.max_turns or get_max_turns()
    names = args.strategy or list(STRATEGIES)

    print(f"Running simulation with {args.games} games per strategy...")
    summaries = {}
    for name in names:
        results = run_batch(
            STRATEGIES[name],
            games=args.games,
            base_seed=args.seed,
            max_turns=max_turns,
            strategy_name=name,
        )
        summaries[name] = summarize_results(results)

    if args.json:
        print(json.dumps(summaries, indent=2))
    else:
        print_summary_table(summaries, args.games)


if __name__ == "__main__":
    main()
