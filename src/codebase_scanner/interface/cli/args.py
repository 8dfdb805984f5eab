from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from codebase_scanner.domain.constants import APP_NAME, APP_VERSION, DEFAULT_IGNORED_DIRS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the scanner CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate markdown documentation from your codebase.",
    )

    # --- Paths ---
    p.add_argument(
        "-i", "--input",
        dest="root_path",
        default=None,
        help="Input directory path (default: current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Output markdown file path (default: codebase-documentation.md).",
    )
    p.add_argument(
        "--stdout",
        action="store_true",
        help="Print the document to stdout instead of writing a file.",
    )

    # --- Filtering ---
    p.add_argument(
        "--ignore",
        dest="ignore_dirs",
        default=None,
        help="Comma-separated directory names to ignore, added to the defaults.",
    )
    p.add_argument(
        "--extensions",
        dest="extensions",
        default=None,
        help="Comma-separated file extensions to include, replacing the defaults.",
    )
    p.add_argument(
        "--no-solution",
        action="store_true",
        help="Skip solution file analysis.",
    )

    # --- Runtime ---
    p.add_argument(
        "--workers",
        dest="max_workers",
        type=int,
        default=None,
        help="Number of parallel file readers (default: 1).",
    )
    p.add_argument(
        "--count-tokens",
        action="store_true",
        help="Estimate the token size of the generated document.",
    )
    p.add_argument(
        "--model",
        dest="token_model",
        default=None,
        help="Model identifier used for token estimation (default: gpt-4o).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the scan summary as JSON.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace, base_ignored: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Ignore entries extend ``base_ignored`` (the defaults unless a config
    file supplied its own); extensions replace the configured set.

    Args:
        args: Parsed command-line arguments.
        base_ignored: Ignore list the CLI entries are appended to.

    Returns:
        Dict[str, Any]: Overrides containing only values that were given.
    """
    overrides: Dict[str, Any] = {}

    if args.root_path:
        overrides["root_path"] = args.root_path
    if args.output_path:
        overrides["output_path"] = args.output_path

    ignore = _split_csv(args.ignore_dirs)
    if ignore:
        base = list(base_ignored) if base_ignored is not None else sorted(DEFAULT_IGNORED_DIRS)
        overrides["ignored_directory_names"] = base + [d for d in ignore if d not in base]

    extensions = _split_csv(args.extensions)
    if extensions:
        overrides["included_extensions"] = extensions

    if args.no_solution:
        overrides["skip_manifest_analysis"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    if args.count_tokens:
        overrides["count_tokens"] = True
    if args.token_model:
        overrides["token_model"] = args.token_model

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> List[str]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return []
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
