#!/usr/bin/env python3
"""
Next Word Prediction Script

Predict the next words of a phrase from the n-gram data files.

Usage:
    python predict.py "thank you for the" --data-dir data
    python predict.py --mode resident --scoring paired --interactive
    python predict.py --config predictor.json --stats
"""

import argparse
import sys

from wordpredictor import (
    EngineConfig, MemoryMode, ScoringMethod, PredictionEngine, Ranked, NoPrediction, Invalid
)
from wordpredictor.console import (
    configure_logging, console, interactive_demo, predict_cli, show_stats
)
from wordpredictor.errors import ConfigError


def build_config(args) -> EngineConfig:
    config = EngineConfig.from_json(args.config) if args.config else EngineConfig()
    return config.with_overrides(
        data_dir=args.data_dir,
        seed=args.seed,
        max_backoff_seconds=args.timeout,
        memory_mode=MemoryMode(args.mode) if args.mode else None,
        scoring_method=ScoringMethod.from_name(args.scoring) if args.scoring else None,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Predict the next word of a phrase using n-gram backoff",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "thank you for the"
  %(prog)s "at the end of the" --mode resident --seed 7
  %(prog)s --interactive --scoring paired

Memory modes:
  ephemeral - read each n-gram file on demand and discard it (default)
  resident  - keep each n-gram file in memory once read

Scoring methods:
  single - product of individual term frequencies (default)
  paired - each term's frequency plus its left neighbour's
        """
    )

    parser.add_argument('phrase', nargs='?', default=None, help='Word or phrase to continue')
    parser.add_argument('-d', '--data-dir', type=str, default=None,
                        help='Directory with the n-gram and term frequency files')
    parser.add_argument('-m', '--mode', choices=['resident', 'ephemeral'], default=None,
                        help='Memory mode (default: ephemeral)')
    parser.add_argument('-s', '--scoring', choices=['single', 'paired'], default=None,
                        help='Scoring method (default: single)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible sampling')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Give up after this many seconds of backoff')
    parser.add_argument('-c', '--config', type=str, default=None,
                        help='JSON configuration file')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Prompt for phrases until quit')
    parser.add_argument('--stats', action='store_true',
                        help='Show store and frequency table statistics')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Trace every backoff state')

    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ConfigError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return 2

    engine = PredictionEngine(config)
    status = 0

    if args.phrase is not None:
        result = predict_cli(engine, args.phrase)
        if isinstance(result, Invalid):
            status = 1
        elif not isinstance(result, (Ranked, NoPrediction)):
            status = 2

    if args.interactive:
        interactive_demo(engine)
    elif args.phrase is None and not args.stats:
        parser.print_help()

    if args.stats:
        show_stats(engine)

    return status


if __name__ == '__main__':
    sys.exit(main())
