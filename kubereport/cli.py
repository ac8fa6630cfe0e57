"""Command line interface for kubereport.

Sub-commands:
    generate NAMESPACE   health check report for one namespace
    test                 sample report rendered without contacting the API
    templates DIR        write the default page templates
    kinds                list the report kinds
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from kubereport import __version__
from kubereport.constants.values import APP_NAME
from kubereport.models.state.settings import ConfigError, ReportSettings, load_settings
from kubereport.report.errors import ReportError
from kubereport.report.orchestrator import REPORT_KINDS, ReportGenerator
from kubereport.report.templates import write_default_templates

logger = logging.getLogger(__name__)

console = Console()

TOKEN_ENV_VAR = "KUBEREPORT_TOKEN"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate PDF health check reports for Kubernetes namespaces",
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {__version__}")
    parser.add_argument("--config", metavar="PATH", help="YAML settings file")
    parser.add_argument("--report-dir", metavar="DIR", help="directory receiving reports")
    parser.add_argument("--template-dir", metavar="DIR", help="directory holding page templates")
    parser.add_argument("--font-path", metavar="PATH", help="TrueType font file for stamped text")
    parser.add_argument("--api-host", metavar="HOST", help="host of the read API")
    parser.add_argument("--api-port", type=int, metavar="PORT", help="port of the read API")
    parser.add_argument(
        "--secure",
        action="store_true",
        default=None,
        help="talk to the read API over https",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    generate = subparsers.add_parser("generate", help="generate a health check report")
    generate.add_argument("namespace", help="namespace to report on")
    generate.add_argument(
        "--token",
        help=f"bearer token for the read API (default: ${TOKEN_ENV_VAR})",
    )

    subparsers.add_parser("test", help="generate a sample report without contacting the API")

    templates = subparsers.add_parser("templates", help="write the default page templates")
    templates.add_argument("directory", help="target directory")

    subparsers.add_parser("kinds", help="list report kinds")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=verbose)],
        force=True,
    )


def _settings_from_args(args: argparse.Namespace) -> ReportSettings:
    return load_settings(
        args.config,
        report_dir=args.report_dir,
        template_dir=args.template_dir,
        api_host=args.api_host,
        api_port=args.api_port,
        secure=args.secure,
        font_path=args.font_path,
    )


def _print_kinds() -> None:
    table = Table(title="Report kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    for kind, display_name in REPORT_KINDS.items():
        table.add_row(kind, display_name)
    console.print(table)


def run(args: argparse.Namespace) -> int:
    if args.command == "kinds":
        _print_kinds()
        return 0

    if args.command == "templates":
        written = write_default_templates(args.directory)
        console.print(f"[green]Wrote {len(written)} templates to {args.directory}[/green]")
        return 0

    settings = _settings_from_args(args)
    generator = ReportGenerator(settings)
    if args.command == "generate":
        token = args.token or os.environ.get(TOKEN_ENV_VAR)
        file_name = generator.generate_health_check_report(args.namespace, bearer_token=token)
    else:
        file_name = generator.generate_test_report()

    console.print(f"[green]Report written:[/green] {settings.report_dir}/{file_name}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args)
    except (ReportError, ConfigError) as exc:
        logger.debug("Run failed", exc_info=True)
        console.print(f"[red]Error:[/red] {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
