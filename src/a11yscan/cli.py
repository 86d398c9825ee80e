"""a11yscan CLI - browser-driven accessibility auditing."""

import json
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from a11yscan.config import load_settings
from a11yscan.modules.scan.models import Standard
from a11yscan.tools import ToolContext, ToolResponse, dispatch_tool, get_all_tools
from a11yscan.utils.async_utils import safe_async_run
from a11yscan.utils.debug import set_debug_enabled
from a11yscan.utils.logger import init_logger

app = typer.Typer(
    name="a11yscan",
    help="Browser-driven accessibility auditing",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

WAIT_HELP = "Milliseconds to wait after load before scanning"
STANDARD_HELP = f"Single standard to test against: {', '.join(Standard.values())}"
RULE_HELP = "Enable or disable a rule, e.g. color-contrast=off (repeatable)"


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level logging"),
    debug: bool = typer.Option(False, "--debug", help="Trace tool dispatch"),
) -> None:
    """Configure logging and debug tracing for every command."""
    settings = load_settings()
    init_logger(verbose=verbose or settings.verbose)
    set_debug_enabled(debug)


def build_context() -> ToolContext:
    """Create the tool context from the resolved runtime settings."""
    return ToolContext(settings=load_settings())


def run_tool(name: str, params: dict[str, Any]) -> ToolResponse:
    """Dispatch a tool, print its content blocks and exit 1 on error responses."""
    response = safe_async_run(dispatch_tool(name, params, build_context()))
    if response.is_error:
        err_console.print(response.content[0], style="red", markup=False, highlight=False)
        for block in response.content[1:]:
            typer.echo(block)
        raise typer.Exit(1)
    for block in response.content:
        typer.echo(block)
    return response


def parse_rule_flags(rules: list[str] | None) -> dict[str, dict[str, bool]]:
    """Turn ``id=on|off`` flags into an axe ``rules`` mapping."""
    parsed: dict[str, dict[str, bool]] = {}
    for item in rules or []:
        rule_id, sep, state = item.partition("=")
        state = state.strip().lower()
        if not sep or not rule_id.strip() or state not in {"on", "off", "true", "false"}:
            raise typer.BadParameter(f"Expected RULE=on|off, got '{item}'", param_hint="--rule")
        parsed[rule_id.strip()] = {"enabled": state in {"on", "true"}}
    return parsed


def scan_params(
    wait: int | None,
    width: int | None,
    height: int | None,
    standard: str | None,
    rules: list[str] | None,
    include_html: bool,
    max_results: int | None,
) -> dict[str, Any]:
    """Collect CLI scan options into tool parameters, omitting unset values."""
    params: dict[str, Any] = {"includeHtml": include_html}
    if wait is not None:
        params["waitForPageLoad"] = wait
    viewport = {
        key: value for key, value in (("width", width), ("height", height)) if value is not None
    }
    if viewport:
        params["viewport"] = viewport
    axe_options: dict[str, Any] = {}
    if standard:
        axe_options["runOnly"] = standard
    rule_map = parse_rule_flags(rules)
    if rule_map:
        axe_options["rules"] = rule_map
    if axe_options:
        params["axeOptions"] = axe_options
    if max_results is not None:
        params["maxResults"] = max_results
    return params


def load_violations(path: Path) -> list[Any]:
    """Read violations from a JSON file holding a list or a scan result."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read violations from {path}: {exc}") from exc
    if isinstance(data, dict) and "violations" in data:
        return data["violations"]
    return data


@app.command("scan-url")
def scan_url(
    url: str = typer.Argument(..., help="Page URL (http or https)"),
    wait: int | None = typer.Option(None, "--wait", help=WAIT_HELP),
    width: int | None = typer.Option(None, "--width", help="Viewport width"),
    height: int | None = typer.Option(None, "--height", help="Viewport height"),
    standard: str | None = typer.Option(None, "--standard", "-s", help=STANDARD_HELP),
    rule: list[str] | None = typer.Option(None, "--rule", help=RULE_HELP),
    include_html: bool = typer.Option(False, "--include-html", help="Keep node HTML snippets"),
    max_results: int | None = typer.Option(None, "--max-results", help="Violations to return"),
) -> None:
    """Scan a URL for accessibility violations."""
    params = scan_params(wait, width, height, standard, rule, include_html, max_results)
    run_tool("scan-url", {"url": url, **params})


@app.command("scan-html")
def scan_html(
    source: str = typer.Argument("-", help="HTML file path, or - for stdin"),
    wait: int | None = typer.Option(None, "--wait", help=WAIT_HELP),
    width: int | None = typer.Option(None, "--width", help="Viewport width"),
    height: int | None = typer.Option(None, "--height", help="Viewport height"),
    standard: str | None = typer.Option(None, "--standard", "-s", help=STANDARD_HELP),
    rule: list[str] | None = typer.Option(None, "--rule", help=RULE_HELP),
    include_html: bool = typer.Option(False, "--include-html", help="Keep node HTML snippets"),
    max_results: int | None = typer.Option(None, "--max-results", help="Violations to return"),
) -> None:
    """Scan raw HTML content for accessibility violations."""
    if source == "-":
        html = sys.stdin.read()
    else:
        try:
            html = Path(source).read_text(encoding="utf-8")
        except OSError as exc:
            raise typer.BadParameter(f"Cannot read {source}: {exc}") from exc
    params = scan_params(wait, width, height, standard, rule, include_html, max_results)
    run_tool("scan-html", {"html": html, **params})


@app.command("scan-batch")
def scan_batch(
    urls: list[str] = typer.Argument(..., help="Up to 20 page URLs"),
    wait: int | None = typer.Option(None, "--wait", help=WAIT_HELP),
    width: int | None = typer.Option(None, "--width", help="Viewport width"),
    height: int | None = typer.Option(None, "--height", help="Viewport height"),
    standard: str | None = typer.Option(None, "--standard", "-s", help=STANDARD_HELP),
    rule: list[str] | None = typer.Option(None, "--rule", help=RULE_HELP),
    include_html: bool = typer.Option(False, "--include-html", help="Keep node HTML snippets"),
    max_results: int | None = typer.Option(None, "--max-results", help="Violations to return"),
) -> None:
    """Scan several URLs one after another."""
    params = scan_params(wait, width, height, standard, rule, include_html, max_results)
    run_tool("scan-batch", {"urls": list(urls), **params})


@app.command()
def summarize(
    violations_file: Path = typer.Argument(..., help="JSON file with violations"),
    output_format: str = typer.Option("default", "--format", "-f", help="Output format"),
) -> None:
    """Summarize violations by impact."""
    run_tool(
        "summarize-violations",
        {"violations": load_violations(violations_file), "format": output_format},
    )


@app.command("write-report")
def write_report(
    violations_file: Path = typer.Argument(..., help="JSON file with violations"),
    output_format: str = typer.Option("default", "--format", "-f", help="Output format"),
) -> None:
    """Summarize violations and save the report under the output directory."""
    run_tool(
        "write-violations-report",
        {"violations": load_violations(violations_file), "format": output_format},
    )


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name"),
    params: str = typer.Option("{}", "--params", "-p", help="Tool parameters as JSON"),
) -> None:
    """Invoke any tool with raw JSON parameters."""
    try:
        parsed = json.loads(params)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--params") from exc
    run_tool(name, parsed)


@app.command()
def tools() -> None:
    """List the available tools."""
    table = Table(title="a11yscan tools")
    table.add_column("Name", style="cyan")
    table.add_column("Required")
    table.add_column("Description")
    for tool in get_all_tools():
        required = ", ".join(tool["input_schema"].get("required", []))
        table.add_row(tool["name"], required, tool["description"])
    console.print(table)


@app.command()
def version() -> None:
    """Show the installed a11yscan version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("a11yscan")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"a11yscan {current_version}")


def main() -> None:
    """Console script entry point."""
    app()
