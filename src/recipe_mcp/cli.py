"""Command-line interface for the AI Recipes MCP Server.

Provides CLI commands for serving the catalog over MCP and for browsing
recipes and documentation from a terminal.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .catalog import Catalog
from .config import Settings, configure_logging, settings
from .dispatcher import QueryDispatcher
from .server import RecipeMCPServer

app = typer.Typer(
    name="recipe-mcp",
    help="AI Recipes MCP Server - Prompt recipes and documentation over the Model Context Protocol"
)
console = Console()

_state: dict[str, Settings] = {"settings": settings}


def _settings() -> Settings:
    return _state["settings"]


def _run(operation: str, **arguments: str | None) -> None:
    """Dispatch an operation and print its text, exiting 1 on failure."""
    config = _settings()
    dispatcher = QueryDispatcher(Catalog.from_settings(config), preview_length=config.preview_length)
    result = dispatcher.dispatch(operation, {k: v for k, v in arguments.items() if v is not None})
    if result.is_error:
        console.print(f"[bold red]{escape(result.text)}[/bold red]", soft_wrap=True)
        raise typer.Exit(code=1)
    console.print(result.text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.callback()
def main_callback(
    root: Path | None = typer.Option(None, "--root", "-r", help="Catalog root directory (overrides RECIPES_ROOT)"),
) -> None:
    """Browse and serve prompt recipes."""
    if root is not None:
        _state["settings"] = settings.model_copy(update={"recipes_root": root.expanduser()})
    else:
        _state["settings"] = settings


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Server host"),
    port: int | None = typer.Option(None, "--port", "-p", help="Server port"),
    transport: str = typer.Option("stdio", "--transport", "-t", help="Transport protocol (stdio, http, sse)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Start the AI Recipes MCP server."""
    config = _settings()
    if debug:
        config = config.model_copy(update={"debug": True})
    configure_logging(config)

    host = host or config.http_host
    port = port or config.http_port
    server = RecipeMCPServer(config)

    # stdout belongs to the MCP client on stdio
    err_console = Console(stderr=True)
    err_console.print("[bold green]Starting AI Recipes MCP Server[/bold green]")
    err_console.print(f"Transport: {transport}")

    if transport in {"http", "sse"}:
        err_console.print(f"HTTP Server: http://{host}:{port}")
        server.run(transport=transport, host=host, port=port)
    elif transport == "stdio":
        err_console.print("STDIO Transport: Ready for MCP client connection")
        server.run()
    else:
        err_console.print(f"[bold red]Unknown transport: {escape(transport)}[/bold red]")
        raise typer.Exit(code=2)


@app.command("list")
def list_recipes(
    category: str | None = typer.Option(None, "--category", "-c", help="Only list one category"),
) -> None:
    """List available recipes."""
    _run("list_recipes", category=category)


@app.command()
def show(name: str = typer.Argument(..., help="Recipe name, e.g. code-exploration")) -> None:
    """Print a recipe."""
    _run("get_recipe", name=name)


@app.command()
def search(keyword: str = typer.Argument(..., help="Keyword to search for")) -> None:
    """Search recipes by keyword."""
    _run("search_recipes", keyword=keyword)


@app.command()
def docs() -> None:
    """List available documentation."""
    _run("list_documentation")


@app.command()
def doc(topic: str = typer.Argument(..., help="Documentation topic, e.g. fundamentals")) -> None:
    """Print a documentation page."""
    _run("get_documentation", topic=topic)


@app.command()
def resources() -> None:
    """Show every addressable resource."""
    catalog = Catalog.from_settings(_settings())

    table = Table(title="Resources")
    table.add_column("URI", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Description", style="dim")

    items = catalog.resources()
    for info in items:
        table.add_row(info.uri, info.name, info.description)

    console.print(table)
    console.print(f"{len(items)} resource(s)")


@app.command()
def validate() -> None:
    """Validate the catalog layout."""
    config = _settings()
    catalog = Catalog.from_settings(config)
    console.print("[bold blue]Validating AI Recipes catalog[/bold blue]")

    issues = []
    warnings = []

    if not config.recipes_root.is_dir():
        issues.append(f"Catalog root missing: {config.recipes_root}")
    else:
        for category_id in catalog.taxonomy.recipe_category_ids:
            if not (config.recipes_root / category_id).is_dir():
                warnings.append(f"Recipe category directory missing: {category_id}")
        for category_id in catalog.taxonomy.doc_category_ids:
            if not (config.docs_root / category_id).is_dir():
                warnings.append(f"Documentation category directory missing: {config.docs_dirname}/{category_id}")

    if config.debug:
        warnings.append("Debug mode is enabled - disable for production")

    # Display results
    if not issues and not warnings:
        console.print("[bold green]✓ All validations passed[/bold green]")
    else:
        if issues:
            console.print("[bold red]Issues found:[/bold red]")
            for issue in issues:
                console.print(f"  ✗ {escape(issue)}")

        if warnings:
            console.print("[bold yellow]Warnings:[/bold yellow]")
            for warning in warnings:
                console.print(f"  ⚠ {escape(warning)}")

    if issues:
        raise typer.Exit(code=1)


@app.command()
def config() -> None:
    """Show current configuration."""
    current = _settings()
    console.print("[bold blue]AI Recipes MCP Server Configuration[/bold blue]")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan", min_width=25)
    table.add_column("Value", style="green")

    table.add_row("App Name", current.app_name)
    table.add_row("App Version", current.app_version)
    table.add_row("Debug Mode", str(current.debug))
    table.add_row("MCP Server Name", current.mcp_server_name)
    table.add_row("MCP Server Version", current.mcp_server_version)
    table.add_row("Recipes Root", str(current.recipes_root))
    table.add_row("Docs Root", str(current.docs_root))
    table.add_row("Markdown Extension", current.markdown_extension)
    table.add_row("Preview Length", str(current.preview_length))
    table.add_row("Log Level", current.log_level)

    console.print(table)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
