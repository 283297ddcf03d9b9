"""
Command-line interface for the CSV automation pipeline.

Usage:
    csv-automation run [--config <path>] [options]
    csv-automation watch [--config <path>] [--max-runs N] [--metrics-port PORT]
    csv-automation check-config [--config <path>]
"""

import argparse
import json
import sys
import time

from pydantic import ValidationError

from csv_automation.batch.pipeline import AutomationPipeline
from csv_automation.core.config import PipelineConfigLoader
from csv_automation.core.models import PipelineConfig, RunContext
from csv_automation.observability.logger import configure_logging, get_logger
from csv_automation.observability.metrics import start_metrics_server


logger = get_logger(__name__)


def load_config(args) -> PipelineConfig:
    """
    Load configuration from file, environment and command-line flags.

    Args:
        args: Command-line arguments

    Returns:
        Validated PipelineConfig
    """
    overrides = {
        "input_dir": getattr(args, "input_dir", None),
        "output_dir": getattr(args, "output_dir", None),
    }
    if getattr(args, "no_dedupe", False):
        overrides["remove_duplicates"] = False
    if getattr(args, "no_clean", False):
        overrides["enable_cleaning"] = False
    if getattr(args, "no_archive", False):
        overrides["auto_archive"] = False
    if getattr(args, "no_report", False):
        overrides["generate_report"] = False

    loader = PipelineConfigLoader(args.config, env_file=args.env_file)
    config = loader.load(overrides)
    configure_logging(config.log_level, config.log_format)
    return config


def log_summary(context: RunContext) -> None:
    logger.info("=" * 60)
    if context.succeeded:
        logger.info("AUTOMATION COMPLETE")
    else:
        logger.warning(f"AUTOMATION INCOMPLETE (stage: {context.stage.value})")
    logger.info("=" * 60)
    logger.info(f"Records read: {context.records_read}")
    logger.info(f"Duplicates removed: {context.duplicates_removed}")
    logger.info(f"Invalid records removed: {context.invalid_removed}")
    logger.info(f"Categories: {len(context.categories)}")
    logger.info(f"Files archived: {len(context.archived_files)}")
    logger.info(f"Total records processed: {context.processed_count}")
    if context.report_path:
        logger.info(f"Report: {context.report_path}")
    logger.info("=" * 60)


def run_command(args) -> int:
    """
    Execute a single pipeline run.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        config = load_config(args)
        context = AutomationPipeline(config).run()
    except (FileNotFoundError, ValueError, ValidationError, OSError) as e:
        logger.error(f"Error during automation run: {e}", exc_info=True)
        return 1

    log_summary(context)
    return 0 if context.succeeded else 1


def watch_command(args) -> int:
    """
    Run the pipeline repeatedly, pausing process_interval_seconds between runs.

    Stops on the first failed run or after --max-runs runs.
    """
    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.metrics_port:
        start_metrics_server(args.metrics_port)
        logger.info(f"Metrics server listening on port {args.metrics_port}")

    pipeline = AutomationPipeline(config)
    runs = 0
    while True:
        try:
            context = pipeline.run()
        except (ValueError, OSError) as e:
            logger.error(f"Error during automation run: {e}", exc_info=True)
            return 1

        log_summary(context)
        if not context.succeeded:
            return 1

        runs += 1
        if args.max_runs and runs >= args.max_runs:
            return 0

        logger.info(f"Next run in {config.process_interval_seconds}s")
        time.sleep(config.process_interval_seconds)


def check_config_command(args) -> int:
    """Validate configuration and print the effective settings as JSON."""
    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print(json.dumps(config.model_dump(), indent=2))
    return 0


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to pipeline YAML configuration file"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file with CSV_BOT_* settings"
    )


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    _add_config_arguments(parser)
    parser.add_argument("--input-dir", default=None, help="Input directory to scan")
    parser.add_argument("--output-dir", default=None, help="Directory for category files and reports")
    parser.add_argument("--no-dedupe", action="store_true", help="Disable duplicate removal")
    parser.add_argument("--no-clean", action="store_true", help="Disable required-field validation")
    parser.add_argument("--no-archive", action="store_true", help="Leave input files in place")
    parser.add_argument("--no-report", action="store_true", help="Skip the JSON run report")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-automation",
        description="Sort record files into per-category CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process everything in ./data/input once
  csv-automation run

  # Use a config file and keep the inputs where they are
  csv-automation run --config config/pipeline.yaml --no-archive

  # Poll the input directory, exposing Prometheus metrics
  csv-automation watch --config config/pipeline.yaml --metrics-port 8000

  # Show the effective configuration
  csv-automation check-config --config config/pipeline.yaml
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Run the pipeline once")
    _add_run_arguments(run_parser)

    watch_parser = subparsers.add_parser("watch", help="Run the pipeline on an interval")
    _add_run_arguments(watch_parser)
    watch_parser.add_argument(
        "--max-runs",
        type=int,
        default=None,
        help="Stop after this many runs (default: run forever)"
    )
    watch_parser.add_argument(
        "--metrics-port",
        type=int,
        default=None,
        help="Expose Prometheus metrics on this port"
    )

    check_parser = subparsers.add_parser("check-config", help="Validate configuration")
    _add_config_arguments(check_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "run": run_command,
        "watch": watch_command,
        "check-config": check_config_command,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
