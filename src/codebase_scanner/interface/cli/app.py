from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, optional JSON file, command-line overrides), scan execution,
and result reporting with process exit codes.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from codebase_scanner.core.pipeline.engine import run_scan
from codebase_scanner.core.pipeline.validator import validate_config
from codebase_scanner.domain.config import get_default_config, load_config_file
from codebase_scanner.domain.pipeline_models import ScanResult
from codebase_scanner.infra.logging import LoggingConfig, configure_logging, get_logger
from codebase_scanner.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (raised to DEBUG later if the config file asks for it)
    _setup_logging(args.verbose, args.log_file)

    # 3. Configuration layering
    raw_conf: Dict[str, Any] = get_default_config()
    if args.config_file:
        try:
            raw_conf.update(load_config_file(args.config_file))
        except (OSError, ValueError) as e:
            logger.error(f"Cannot load config file '{args.config_file}': {e}")
            print(f"ERROR: Cannot load config file '{args.config_file}': {e}", file=sys.stderr)
            return EXIT_BAD_INPUT

    base_ignored = raw_conf.get("ignored_directory_names")
    overrides = cli_args.args_to_overrides(
        args, base_ignored=base_ignored if isinstance(base_ignored, list) else None
    )
    raw_conf.update(overrides)

    # 4. Validation
    config, warnings = validate_config(raw_conf, strict=False)
    if config.verbose and not args.verbose:
        _setup_logging(True, args.log_file, force=True)
        logger.debug("Verbose logging enabled by configuration file.")
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pre-flight input verification
    if not os.path.isdir(config.root_path):
        msg = f"Input directory does not exist: {config.root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 6. Scan
    try:
        result = run_scan(config, write=not args.stdout)
    except KeyboardInterrupt:
        print("Scan interrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Error generating documentation: {e}", exc_info=True)
        print(f"ERROR: Error generating documentation: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output
    if args.stdout and result.ok:
        sys.stdout.write(result.markdown)
        sys.stdout.flush()
    elif args.json_output:
        print(json.dumps(result.summary(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

def _setup_logging(verbose: bool, log_file: Optional[str], force: bool = False) -> None:
    level = "DEBUG" if verbose else "INFO"
    configure_logging(LoggingConfig(level=level, console=True, log_file=log_file), force=force)

# -----------------------------------------------------------------------------
# RESULT RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScanResult) -> None:
    """Print the scan outcome as a short terminal report."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Documentation generated successfully at {result.output_path}")
    print(f"Files documented: {result.file_count}")
    print(f"Directories listed: {result.directory_count}")
    if result.solution_count:
        print(f"Solutions analyzed: {result.solution_count}")
    if result.token_count > 0:
        print(f"Estimated tokens: {result.token_count:,}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
