#!/usr/bin/env python3
"""Sample match harness for end-to-end validation.

Ranks every job in a dataset for every candidate and prints a summary table
plus the per-candidate breakdown, without going through the CLI report.

Usage:
    # Run against the bundled sample dataset
    python scripts/run_sample_match.py

    # Custom dataset and a pinned reference year
    python scripts/run_sample_match.py --data my_dataset.yaml --current-year 2025
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from jobfit.logging.config import configure_logging
from jobfit.matching import MatchEngine, format_breakdown
from jobfit.persistence import PersistenceError, load_dataset


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print candidate / best job / score rows as a boxed table."""
    print_header("Best Match per Candidate")

    headers = ("Candidate", "Best Job", "Score", "Good Fits")
    widths = [
        max(len(headers[i]), *(len(str(row[i])) for row in rows)) if rows else len(headers[i])
        for i in range(len(headers))
    ]

    def line(left, mid, right):
        return left + mid.join("─" * (w + 2) for w in widths) + right

    print(line("┌", "┬", "┐"))
    print("│" + "│".join(f" {h:<{w}} " for h, w in zip(headers, widths)) + "│")
    print(line("├", "┼", "┤"))
    for row in rows:
        print("│" + "│".join(f" {str(v):<{w}} " for v, w in zip(row, widths)) + "│")
    print(line("└", "┴", "┘"))


def main():
    """Main entry point for the sample match harness."""
    parser = argparse.ArgumentParser(
        description="Rank a sample dataset and print the results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=Path("docs/sample_dataset.yaml"),
        help="Dataset file (default: docs/sample_dataset.yaml)",
    )
    parser.add_argument(
        "--current-year",
        type=int,
        default=None,
        help="Reference year for ongoing experience (default: current UTC year)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()
    load_dotenv()
    configure_logging(level=args.log_level, environment="validation")

    print_header("jobfit - Sample Match Harness")
    print(f"Dataset: {args.data}")

    try:
        dataset = load_dataset(args.data)
    except PersistenceError as e:
        print(f"\n❌ Error: {e}")
        return 1

    jobs = dataset.job_repository().list_active()
    print(f"✓ Loaded {len(dataset.candidates)} candidates and {len(jobs)} active jobs")

    engine = MatchEngine(current_year=args.current_year)
    print(f"✓ Reference year: {engine.current_year}")

    rows = []
    for candidate in dataset.candidates:
        ranked = engine.rank_jobs(candidate, jobs)
        best = ranked[0] if ranked else None
        rows.append((
            candidate.display_name,
            best.job_title if best else "-",
            best.match_score if best else "-",
            sum(1 for r in ranked if r.is_good_fit),
        ))

        print(f"\n{candidate.display_name} ({candidate.candidate_id})")
        for result in ranked:
            marker = "★" if result.is_good_fit else " "
            print(f"  {marker} {format_breakdown(result)}")

    print_summary_table(rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
