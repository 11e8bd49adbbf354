"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Read one supplier to prove both connectivity and credentials."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get("/api/suppliers", params={"pageNum": 1, "pageSize": 1})
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__
    if response.status_code == 401:
        return False, "HTTP 401 (run `login`)"
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="retail-admin Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", f"{settings.token_type} token configured")
    else:
        table.add_row("API token", "MISSING", "Run `retail-admin login <username>`")
    table.add_row("Page size", "OK", str(settings.page_size))
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    # Connectivity
    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command(name="setup-api")
def setup_api() -> None:
    """Interactive backend setup (stores config in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    page_size = typer.prompt("Page size", default=settings.page_size, type=int, show_default=True)

    if not base_url:
        raise typer.BadParameter("base_url is required")
    if page_size <= 0:
        raise typer.BadParameter("page size must be positive")

    env_path = write_user_env_vars(
        {
            "RETAIL_ADMIN_API_BASE_URL": base_url,
            "RETAIL_ADMIN_PAGE_SIZE": str(page_size),
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
