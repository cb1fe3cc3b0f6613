"""Main CLI entry point for webxml-params."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from webxml_params import __version__
from webxml_params.config import WebXmlParamsConfig, load_config
from webxml_params.exceptions import WebXmlParamsError
from webxml_params.extraction import ContextParamExtractor
from webxml_params.models import ExtractionResult, OutputFormat, ScanReport
from webxml_params.orchestration import DescriptorScanner
from webxml_params.utils.logging import setup_logging

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MALFORMED = 2

app = typer.Typer(
    name="webxml-params",
    help="Extract context parameters from Java web deployment descriptors (web.xml).",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"webxml-params version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """web.xml context parameter extractor.

    Lists every context-param declared in a deployment descriptor.
    """
    pass


# Common options used across commands
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file (JSON or YAML).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

FormatOption = Annotated[
    Optional[OutputFormat],
    typer.Option(
        "--format",
        "-F",
        help="Output format.",
        case_sensitive=False,
    ),
]

StrictOption = Annotated[
    Optional[bool],
    typer.Option(
        "--strict/--no-strict",
        help="Exit with code 2 when malformed context-param blocks are found.",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        help="Verbosity level (0=warnings, 1=info, 2=debug, 3=debug with locals).",
        min=0,
        max=3,
        count=True,
    ),
]

LogFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--log-file",
        help="Also write DEBUG logs to this file.",
        dir_okay=False,
    ),
]


def _load(
    config: Optional[Path],
    output_format: Optional[OutputFormat],
    strict: Optional[bool],
    verbose: int,
    log_file: Optional[Path],
    **overrides,
) -> WebXmlParamsConfig:
    """Load configuration and set up logging, exiting on config errors."""
    try:
        cfg = load_config(
            config_path=config,
            output_format=output_format.value if output_format else None,
            strict=strict,
            verbose=verbose or None,
            log_file=log_file,
            **overrides,
        )
    except WebXmlParamsError as e:
        err_console.print(
            f"[bold red]Configuration error:[/bold red] {escape(str(e))}",
            soft_wrap=True,
        )
        raise typer.Exit(code=EXIT_ERROR)

    setup_logging(verbosity=cfg.output.verbosity, log_file=cfg.output.log_file)
    return cfg


def _print_params(result: ExtractionResult, title: str) -> None:
    """Print a table of context parameters."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Line", justify="right", style="dim")

    for name, value in result.params.items():
        line = next(
            (entry.line for entry in reversed(result.entries) if entry.name == name),
            None,
        )
        table.add_row(escape(name), escape(value), str(line) if line is not None else "")

    console.print(table)


def _print_warnings(result: ExtractionResult) -> None:
    """Print skipped blocks to stderr."""
    if not result.had_malformed_entries:
        return
    label = result.source or "document"
    err_console.print(
        f"[yellow]Warning:[/yellow] {escape(label)} has {len(result.malformed)} "
        "not well formed context-param element(s)",
        soft_wrap=True,
    )
    for warning in result.warnings:
        err_console.print(f"  - {escape(warning)}", soft_wrap=True)


def _print_scan_summary(report: ScanReport) -> None:
    """Print a summary table for a scan."""
    table = Table(title="Scan Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Descriptors", str(report.total_descriptors))
    table.add_row("Extracted", str(len(report.results)))
    table.add_row("Failed", str(len(report.failures)))
    table.add_row(
        "With malformed blocks",
        str(sum(1 for result in report.results if result.had_malformed_entries)),
    )
    if report.duration_seconds is not None:
        table.add_row("Duration", f"{report.duration_seconds:.2f} seconds")

    console.print(table)


@app.command()
def extract(
    path: Annotated[
        Path,
        typer.Argument(
            help="Deployment descriptor (web.xml) to read.",
        ),
    ],
    output_format: FormatOption = None,
    strict: StrictOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    log_file: LogFileOption = None,
) -> None:
    """List the context parameters of one deployment descriptor.

    Example:
        webxml-params extract src/main/webapp/WEB-INF/web.xml --format json
    """
    cfg = _load(config, output_format, strict, verbose, log_file)
    extractor = ContextParamExtractor(parser_config=cfg.parser)

    try:
        result = extractor.extract(path)
    except WebXmlParamsError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        if cfg.output.verbosity >= 2:
            err_console.print_exception()
        raise typer.Exit(code=EXIT_ERROR)

    if cfg.output.format == OutputFormat.JSON:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _print_params(result, title=f"Context parameters: {path}")

    _print_warnings(result)

    if cfg.output.strict and result.had_malformed_entries:
        raise typer.Exit(code=EXIT_MALFORMED)


@app.command()
def scan(
    root: Annotated[
        Path,
        typer.Argument(
            help="Directory to search for deployment descriptors.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
        ),
    ],
    pattern: Annotated[
        Optional[str],
        typer.Option(
            "--pattern",
            "-p",
            help="Glob used to find descriptors (default: **/WEB-INF/web.xml).",
        ),
    ] = None,
    concurrency: Annotated[
        Optional[int],
        typer.Option(
            "--concurrency",
            help="Maximum descriptors read at once.",
            min=1,
            max=64,
        ),
    ] = None,
    output_format: FormatOption = None,
    strict: StrictOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    log_file: LogFileOption = None,
) -> None:
    """Extract context parameters from every descriptor below a directory.

    Example:
        webxml-params scan ./services --pattern "**/web.xml"
    """
    cfg = _load(
        config,
        output_format,
        strict,
        verbose,
        log_file,
        pattern=pattern,
        concurrency=concurrency,
    )
    scanner = DescriptorScanner(
        extractor=ContextParamExtractor(parser_config=cfg.parser),
        scan_config=cfg.scan,
    )

    try:
        report = asyncio.run(scanner.scan(root))
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Scan interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_ERROR)

    if cfg.output.format == OutputFormat.JSON:
        typer.echo(report.model_dump_json(indent=2))
    else:
        for result in report.results:
            _print_params(result, title=f"Context parameters: {result.source}")
        _print_scan_summary(report)

    for result in report.results:
        _print_warnings(result)
    for failure in report.failures:
        err_console.print(f"[bold red]Error:[/bold red] {escape(failure.message)}", soft_wrap=True)

    if report.has_failures:
        raise typer.Exit(code=EXIT_ERROR)
    if cfg.output.strict and report.had_malformed_entries:
        raise typer.Exit(code=EXIT_MALFORMED)
