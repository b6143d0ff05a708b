import os
import sys
import logging
import argparse
from typing import List, Optional

from core.config_loader import load_config
from core.cache import BaselineCacheService
from core.scorer import ScoringService
from core.utils import format_score
from pipeline.runner import BatchRunResult, run_batch

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hash Code mentorship & teamwork score calculator")
    parser.add_argument('--mode', type=str, choices=['file', 'serve'], default='file',
                        help='file: score plan files (default), serve: run the scoring API')
    parser.add_argument('-i', '--input', nargs='+', default=[],
                        help='instance file path(s)')
    parser.add_argument('-o', '--output', nargs='+', default=[],
                        help='plan file path(s), one per instance file')
    parser.add_argument('--disable-checks', action='store_true',
                        help='disable checks (worker skill levels)')
    parser.add_argument('--cache', action='store_true',
                        help='read and write baseline cache files (.bin files)')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='path to config.yaml')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the per-job timeline and enable debug logging')
    return parser


def print_results(result: BatchRunResult, verbose: bool = False):
    for pair in result.pairs:
        if not pair.success:
            print(f"{pair.plan_path} error: {pair.error}")
            continue
        print(f"{pair.plan_path} score: {format_score(pair.score)}")
        if verbose and pair.report:
            for job in pair.report.jobs:
                print(
                    f"  {job.name}: start {job.start}, end {job.end}, "
                    f"late {job.lateness}, score {job.contribution}"
                )
    if len(result.pairs) > 1:
        print(f"total score: {format_score(result.total_score)}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.mode == 'serve':
        os.environ["SCORER_CONFIG"] = args.config
        from web.backend.app import main as serve
        serve()
        return 0

    config = load_config(args.config)

    if not args.input:
        parser.error("at least one input file is required")
    if len(args.input) != len(args.output):
        parser.error(f"{len(args.output)} output files provided but expected {len(args.input)}")

    if args.disable_checks:
        config.scorer.disable_checks = True
    scoring_service = ScoringService(config.scorer)
    cache = BaselineCacheService.from_config(config.cache) if args.cache else None

    result = run_batch(list(zip(args.input, args.output)), scoring_service, cache)
    print_results(result, verbose=args.verbose)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
