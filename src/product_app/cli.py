"""Command line entry point for running and managing the product service."""

import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from src.product_app.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="product-api",
    help="Product API - run the HTTP service and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to config)"),
    reload: bool = typer.Option(False, help="Restart on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        Panel.fit(
            f"Serving on [bold]http://{bind_host}:{bind_port}[/bold]",
            title="product-api",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.product_app.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


@app.command("init-db")
def init_db_command(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create the database tables."""
    from src.product_app.runtime.init_db import init_db

    if drop and not typer.confirm("Drop all product data?"):
        raise typer.Abort()

    init_db(drop=drop)
    console.print(f"[green]Database ready:[/green] {get_config().database.url}")


@app.command("show-config")
def show_config() -> None:
    """Print the effective configuration."""
    rendered = json.dumps(get_config().model_dump(mode="json"), indent=2)
    console.print(Syntax(rendered, "json", theme="ansi_dark"))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
