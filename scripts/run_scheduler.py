"""
Command-line entry point for the Round-Robin Tournament Scheduler.
Runs the complete scheduling workflow and prints the result.
"""

import sys
import argparse
from datetime import datetime
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import RANDOM_SEED
from app.core.logging_config import setup_logging
from app.services.tournament import TournamentScheduler
from app.services.validator import ValidationError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Tournament Scheduler - Generate a balanced round-robin schedule'
    )
    parser.add_argument('--teams', nargs='+', required=True, help='Team names')
    parser.add_argument('--venues', nargs='+', required=True, help='Venue names')
    parser.add_argument('--start-date', required=True, help='First match day (YYYY-MM-DD)')
    parser.add_argument('--seed', type=int, default=RANDOM_SEED, help='Random seed for reproducible runs')
    parser.add_argument(
        '--legacy-sort',
        action='store_true',
        help='Re-predict on every comparison when ordering (noisy, not reproducible)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Generate the schedule, order it by balance, and print matches,
    predictions and a schedule report.
    """
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    print("\n" + "=" * 80)
    print("TOURNAMENT SCHEDULER")
    print("=" * 80)
    print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 80)

    scheduler = TournamentScheduler(seed=args.seed, resample_per_comparison=args.legacy_sort)

    try:
        run = scheduler.run(args.teams, args.venues, args.start_date)
    except ValidationError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"\n[STEP 1] Balanced schedule ({len(run.matches)} matches):")
    for match in run.matches:
        print(f"  {match.label:<40s} {match.display_date} at {match.time_label}  {match.venue}")

    print("\n[STEP 2] Match predictions:")
    for prediction in run.predictions:
        score = prediction.predicted_score
        print(f"  {prediction.match_label:<40s} "
              f"{prediction.home_win_pct:5.1f}% - {prediction.away_win_pct:5.1f}%  "
              f"(score {score.home}-{score.away})")

    print("\n[STEP 3] Schedule report:")
    summary = scheduler.report_builder.summarize(run.predictions)
    print(scheduler.validator.generate_schedule_report(run, summary))

    if not run.validation.is_valid:
        print("\nWARNING: Schedule has hard constraint violations!")
        for violation in run.validation.hard_constraint_violations[:10]:
            print(f"  - {violation.constraint_type}: {violation.description}")

    print(f"\nCompleted in {run.generation_time:.3f}s")
    return 0


if __name__ == '__main__':
    sys.exit(main())
