"""Farmbook CLI application using Typer.

This module provides command-line utilities for the farmbook backend:
secret generation for deployment configuration, a configuration check
and running the API server.
"""

import secrets

import typer
from rich.console import Console

from farmbook_auth import ConfigurationError

app = typer.Typer(
    name="farmbook",
    help="Farmbook - farm bookkeeping backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for farmbook configuration.

    Generates two required secrets:
    - JWT_SECRET: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Farmbook Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file. JWT_EXPIRES_IN (e.g. 7d) is also "
        "required.[/dim]\n"
    )


@app.command("check")
def check_config() -> None:
    """Validate the token configuration without starting the server."""
    from farmbook.presentation.api.config import build_jwt_service
    from farmbook_config import get_settings

    try:
        jwt_service = build_jwt_service(get_settings())
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    console.print(
        "[green]Token configuration OK[/green] "
        f"(lifetime {jwt_service.expires_in_seconds}s)"
    )


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    from farmbook_config import get_settings

    settings = get_settings()
    uvicorn.run(
        "farmbook.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
