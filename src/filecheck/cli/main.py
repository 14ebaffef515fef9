"""Command-line interface for filecheck."""
from pathlib import Path
from typing import Optional
import logging

import typer
from pydantic import ValidationError

from filecheck.config import Config, HasherConfig, set_config
from filecheck.errors import StoreError, TraversalError
from filecheck.indexer.index_manager import IndexManager
from .console import ConsoleReporter


app = typer.Typer(
    name="filecheck",
    help="Hash every file under a directory and report what changed since the last baseline.",
    add_completion=False,
)

USAGE = "Usage: filecheck <directory> <mode>\nModes: w - write mode, r - read mode"


def setup_logging(verbose: bool = False, level_name: str = "WARNING"):
    """Configure logging."""
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(
    config_path: Optional[Path],
    baseline: Optional[Path],
    workers: Optional[str],
) -> Config:
    """Load config and apply command-line overrides."""
    config = Config.load(config_path)
    if workers is not None:
        config.hasher = HasherConfig(**{**config.hasher.model_dump(), "workers": workers})
    if baseline is not None:
        config.store.checksum_file = str(baseline)
    return config


@app.command()
def check(
    directory: Optional[Path] = typer.Argument(None, help="Directory to scan"),
    mode: Optional[str] = typer.Argument(None, help="w = write baseline, r = compare with baseline"),
    baseline: Optional[Path] = typer.Option(None, "--baseline", "-b", help="Baseline file (default: checksums.json)"),
    workers: Optional[str] = typer.Option(None, "--workers", "-w", help="Worker threads or 'auto'"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    json_output: bool = typer.Option(False, "--json", help="Print only the report as JSON"),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Write or verify a checksum baseline for DIRECTORY.

    Mode w hashes every file and writes the baseline.
    Mode r hashes every file again and lists moved, renamed,
    modified, added and removed files.
    """
    reporter = ConsoleReporter(quiet=json_output)
    if not no_banner:
        reporter.banner()

    if directory is None or mode is None:
        reporter.error(USAGE)
        raise typer.Exit(1)

    mode_flag = mode[:1]
    if mode_flag not in ("w", "r"):
        reporter.error("Invalid mode. Use 'w' for write or 'r' for read.")
        raise typer.Exit(1)
    read_mode = mode_flag == "r"

    try:
        config = _load_config(config_path, baseline, workers)
    except (OSError, ValueError) as e:
        # ValidationError and TOML decode errors are both ValueErrors
        message = str(e) if not isinstance(e, ValidationError) else f"Invalid configuration: {e}"
        reporter.error(message)
        raise typer.Exit(1)

    set_config(config)
    setup_logging(verbose, config.general.log_level)

    manager = IndexManager(directory, config)

    previous = None
    if read_mode:
        reporter.info(f"Loading existing checksums from {manager.store.path}")
        previous = manager.load_baseline()
        if not previous:
            reporter.warning(f"No usable baseline at {manager.store.path}; all files will show as Added")

    reporter.info(f"Scanning directory: {directory}")
    try:
        files = manager.scan()
    except TraversalError as e:
        reporter.error(f"Filesystem error: {e}")
        files = []

    if not files:
        reporter.error("No files found in directory")
        raise typer.Exit(1)

    reporter.success(f"Found {len(files)} files. Computing hashes...")
    with reporter.progress(len(files)) as advance:
        inventory = manager.build_inventory(on_result=advance)
    reporter.show_failures(inventory.failed_paths())

    if not read_mode:
        reporter.info(f"Writing checksums to {manager.store.path}")
        try:
            written = manager.write_baseline(inventory)
        except StoreError as e:
            reporter.error(str(e))
            raise typer.Exit(1)
        reporter.success(f"Successfully wrote {written} bytes to {manager.store.path}")
        return

    report = manager.compare(inventory, previous)
    if json_output:
        typer.echo(report.to_json())
    else:
        reporter.show_report(report)


if __name__ == "__main__":
    app()
