"""CLI interface for the WAVE client.

Analyze a URL or an HTML document with the WebAIM WAVE API:

    wave-client url https://example.com
    wave-client source page.html
"""

import asyncio
import sys
from contextlib import nullcontext
from typing import Optional

import aiofiles
import click
from rich.table import Table
from rich import box

from wave_client import __version__
from wave_client.core.client import WaveClient
from wave_client.core.config import (
    AnalysisOptions,
    ClientConfig,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    OutputFormat,
    ReportConfig,
    ReportType,
)
from wave_client.core.exceptions import (
    InvalidArgumentError,
    RemoteRejectionError,
    TransportFailureError,
    WaveException,
)
from wave_client.core.models import AnalysisResult, CATEGORY_NAMES
from wave_client.analysis.reporter import Reporter, CATEGORY_TITLES
from wave_client.utils.logging import setup_logging, console


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Sample Page for WAVE Testing</title>
    <style>
        .low-contrast { color: #777; background: #999; }
    </style>
</head>
<body>
    <header>
        <nav aria-label="Main navigation">
            <ul>
                <li><a href="#home">Home</a></li>
                <li><a href="#about">About</a></li>
            </ul>
        </nav>
    </header>
    <main>
        <h1>Welcome to Our Accessibility Test Page</h1>
        <img src="example.jpg" alt="A descriptive alt text for the image">
        <form>
            <label for="email">Email Address:</label>
            <input type="email" id="email" name="email" required>
            <button type="submit">Subscribe</button>
        </form>

        <img src="problem.jpg">
        <p class="low-contrast">This text has poor contrast ratio.</p>
        <form>
            <input type="text" placeholder="Name">
            <button>Submit</button>
        </form>
        <h3></h3>
    </main>
</body>
</html>
"""

STATUS_HINTS = {
    400: "Check that the URL is valid and accessible",
    401: "Check your API key is correct",
    402: "Insufficient credits - purchase more at https://wave.webaim.org/api/",
}


def common_options(func):
    """Options shared by the ``url`` and ``source`` commands."""
    options = [
        click.option(
            "--api-key",
            envvar="WAVE_API_KEY",
            help="WAVE API key (default: $WAVE_API_KEY)",
        ),
        click.option(
            "--base-url",
            envvar="WAVE_BASE_URL",
            default=DEFAULT_BASE_URL,
            show_default=True,
            help="WAVE API base URL",
        ),
        click.option(
            "--timeout",
            type=float,
            default=DEFAULT_TIMEOUT,
            show_default=True,
            help="Request timeout in seconds",
        ),
        click.option(
            "--report-type", "-r",
            type=click.IntRange(1, 4),
            default=None,
            help="Report depth (1=statistics, 2=items, 3=selectors, 4=contrast data)",
        ),
        click.option(
            "--format", "-f",
            type=click.Choice(["text", "markdown", "json"]),
            default="text",
            help="Output format",
        ),
        click.option(
            "--output", "-o",
            type=click.Path(dir_okay=False),
            help="Write the report to a file",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Verbose output"),
        click.option("--quiet", "-q", is_flag=True, help="Quiet mode (report only)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="wave-client")
def cli():
    """wave-client: WebAIM WAVE accessibility analysis from the command line."""
    pass


@cli.command()
@click.argument("target", default="https://example.com")
@common_options
def url(target: str, **kwargs):
    """Analyze the page at TARGET.

    Examples:

      wave-client url https://example.com

      wave-client url https://example.com -r 4 -f markdown -o report.md
    """
    if not target.startswith(("http://", "https://")):
        target = f"https://{target}"

    _run(lambda client, options: client.analyze(target, options), f"Analyzing URL: {target}", **kwargs)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False), required=False)
@common_options
def source(file: Optional[str], **kwargs):
    """Analyze the HTML document in FILE (a sample page if omitted).

    The document is served through a temporary ngrok tunnel, so
    NGROK_AUTHTOKEN must be set.
    """
    async def analyze(client: WaveClient, options: AnalysisOptions):
        if file:
            async with aiofiles.open(file, "r", encoding="utf-8") as f:
                html = await f.read()
        else:
            html = SAMPLE_HTML
        return await client.analyze_source(html, options)

    description = f"Analyzing HTML from file: {file}" if file else "Analyzing sample HTML source"
    _run(analyze, description, **kwargs)


def _run(
    action,
    description: str,
    api_key: Optional[str],
    base_url: str,
    timeout: float,
    report_type: Optional[int],
    format: str,
    output: Optional[str],
    verbose: bool,
    quiet: bool,
):
    setup_logging(level="DEBUG" if verbose else "WARNING", quiet=quiet)

    try:
        client = WaveClient(ClientConfig(api_key=api_key or "", base_url=base_url, timeout=timeout))
    except InvalidArgumentError as e:
        console.print(f"[red]Configuration error:[/red] {e.message}")
        console.print("Get your API key at: https://wave.webaim.org/api/")
        console.print("Then run: export WAVE_API_KEY=your_key_here")
        sys.exit(2)

    options = AnalysisOptions(
        reporttype=ReportType(report_type) if report_type else None,
    )

    if not quiet:
        console.print(f"[info]{description}[/info]")

    try:
        with console.status("Waiting for WAVE...", spinner="dots") if not quiet else nullcontext():
            result = asyncio.run(action(client, options))
    except RemoteRejectionError as e:
        console.print(f"[red]Error:[/red] {e.message}" + (f" ({e.code})" if e.code else ""))
        sys.exit(1)
    except TransportFailureError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        hint = STATUS_HINTS.get(e.status_code)
        if hint:
            console.print(hint)
        sys.exit(1)
    except WaveException as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    reporter = Reporter(ReportConfig(format=OutputFormat(format), output_file=output))
    content = reporter.generate(result)

    if output:
        reporter.save(result, output, OutputFormat(format))
        if not quiet:
            console.print(f"\n[green]Report saved to:[/green] {output}")
    elif format == "json":
        console.print_json(content)
    else:
        console.print(content, markup=False, highlight=False)

    if not quiet:
        _print_summary(result)

    sys.exit(1 if result.issue_types("error") else 0)


def _print_summary(result: AnalysisResult):
    """Print category summary table."""
    console.print()

    table = Table(title="Accessibility Summary", box=box.ROUNDED)
    table.add_column("Category", style="cyan")
    table.add_column("Types", justify="right")
    table.add_column("Instances", justify="right")

    for name in CATEGORY_NAMES:
        table.add_row(
            f"[{name}]{CATEGORY_TITLES[name]}[/{name}]",
            str(result.issue_types(name)),
            str(result.instance_count(name)),
        )

    console.print(table)

    if result.report_url:
        console.print(f"\nView full report: {result.report_url}")


if __name__ == "__main__":
    cli()
