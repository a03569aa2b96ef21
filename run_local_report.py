#!/usr/bin/env python3
# run_local_report.py
"""
CLI for the locality pipeline: address -> district -> representatives -> bills.

Usage:
    python run_local_report.py --address "1600 Pennsylvania Avenue NW, Washington DC"

Output:
    - Console panel and tables for the local report
    - Optional JSON file with the complete report
"""
import argparse
import json
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from polar_core.config import api_key_status, load_config
from polar_core.exceptions import InvalidAddressError, ReportCompilationError
from polar_core.locality.service import build_locality_service
from polar_core.reports.display import display_key_status, display_report

load_dotenv()
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point for local reports."""
    parser = argparse.ArgumentParser(
        description="Build a local political report for an address",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_local_report.py --address "1600 Pennsylvania Avenue NW, Washington DC"
    python run_local_report.py --address "Austin, TX 78701" --output report.json
    python run_local_report.py --check-keys
        """
    )
    parser.add_argument("--address", help="Free-text address to resolve")
    parser.add_argument("--config", default="config.yaml",
                        help="Config file (default: config.yaml)")
    parser.add_argument("--output", help="Write the report as JSON to this path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--check-keys", action="store_true",
                        help="Show which API keys are configured and exit")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.check_keys:
        display_key_status(api_key_status(), out=console)
        return 0

    if not args.address:
        parser.error("--address is required unless --check-keys is given")

    config = load_config(args.config)
    service = build_locality_service(config)

    console.print(f"\n[cyan]Resolving {args.address}...[/cyan]")

    try:
        report = service.get_local_political_data(args.address)
    except InvalidAddressError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except ReportCompilationError as e:
        console.print(f"[red]Error: report could not be compiled: {e}[/red]")
        return 1

    display_report(report, out=console)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2)
        console.print(f"\n[green]✓ Report saved to {args.output}[/green]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
