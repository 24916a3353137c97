"""Command-line entry point for the jobfit matching engine."""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from jobfit.config.environment import EnvironmentConfig
from jobfit.config.exceptions import ConfigurationError
from jobfit.config.loader import load_config
from jobfit.config.models import AppConfig
from jobfit.logging import get_logger
from jobfit.logging.config import configure_logging
from jobfit.logging.context import log_context, new_run_id
from jobfit.matching.engine import MatchEngine
from jobfit.matching.utils import build_match_payload
from jobfit.persistence import (
    PersistenceError,
    RecordNotFoundError,
    load_dataset,
)
from jobfit.reporting import ReportError, ReportRenderer, render_json

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN_CANDIDATE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobfit",
        description="jobfit - rank job postings for candidates by weighted profile fit",
    )
    parser.add_argument(
        "--data",
        type=Path,
        required=True,
        help="Dataset file (YAML or JSON) with 'candidates' and 'jobs' lists",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: jobfit.yaml or config/jobfit.yaml if present)",
    )
    parser.add_argument(
        "--candidate",
        default=None,
        help="Only rank jobs for this candidate id",
    )
    parser.add_argument(
        "--best",
        action="store_true",
        help="Report only the best job per candidate",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Report only the N best jobs per candidate (overrides config)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default=None,
        choices=["text", "json"],
        help="Report format (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load and prepare runtime configuration.

    Resolves the effective log level and reference year, with priority
    CLI > environment > config file > default.

    Args:
        config_path: Path to configuration file (None searches default locations)
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with log_level always set

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    else:
        env_config.log_level = app_config.logging.level

    if env_config.current_year is None:
        env_config.current_year = app_config.ranking.current_year

    return app_config, env_config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for jobfit.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 success, 1 configuration or dataset error, 2 unknown candidate)
    """
    load_dotenv()
    start_time = time.time()
    args = build_parser().parse_args(argv)

    if args.top is not None and args.top < 1:
        print("Configuration Error: --top must be at least 1", file=sys.stderr)
        return EXIT_ERROR

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        output_format = args.output_format or app_config.output.format
        top_n = 1 if args.best else (args.top or app_config.ranking.top_n)

        with log_context(run_id=new_run_id()):
            logger.info(
                "jobfit starting",
                extra={
                    "event": "run.starting",
                    "data_path": str(args.data),
                    "config_path": str(args.config) if args.config else None,
                    "log_level": env_config.log_level,
                    "output_format": output_format,
                },
            )

            dataset = load_dataset(args.data)
            profiles = dataset.profile_repository()
            jobs_repo = dataset.job_repository()

            if args.candidate:
                candidates = [profiles.get(args.candidate)]
            else:
                candidates = profiles.list_all()

            if app_config.ranking.include_inactive_jobs:
                jobs = jobs_repo.list_all()
            else:
                jobs = jobs_repo.list_active()

            engine = MatchEngine(current_year=env_config.current_year)
            payloads: List[dict] = []
            for candidate in candidates:
                with log_context(candidate_id=candidate.candidate_id):
                    results = engine.rank_jobs(candidate, jobs)
                    payloads.append(
                        build_match_payload(
                            candidate,
                            results,
                            top_n=top_n,
                            good_fits_only=app_config.ranking.good_fits_only,
                        )
                    )

            if output_format == "json":
                report = render_json(payloads)
            else:
                report = ReportRenderer().render_text(payloads)

            print(report)

            logger.info(
                "jobfit finished",
                extra={
                    "event": "run.completed",
                    "candidate_count": len(candidates),
                    "job_count": len(jobs),
                    "duration_seconds": round(time.time() - start_time, 3),
                },
            )
        return EXIT_OK

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except RecordNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"Unknown record: {e}",
            extra={"event": "run.failed", "error_type": type(e).__name__},
        )
        return EXIT_UNKNOWN_CANDIDATE
    except (PersistenceError, ReportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"Run failed: {e}",
            extra={"event": "run.failed", "error_type": type(e).__name__},
        )
        return EXIT_ERROR


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
