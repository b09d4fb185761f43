"""Main CLI application for User-Manager."""

import asyncio
import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from user_manager import __version__
from user_manager.application.container import open_use_cases
from user_manager.domain.entities.user import UserDetail
from user_manager.presentation.state.user_detail import UserDetailStateHolder
from user_manager.presentation.state.user_form import CreateUserStateHolder, EditUserStateHolder
from user_manager.presentation.state.user_list import UserListStateHolder
from user_manager.presentation.state.validation import UserForm
from user_manager.shared.config.settings import get_settings
from user_manager.shared.logging.setup import setup_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

app = typer.Typer(
    name="user-manager",
    help="Manage user records of the remote user service",
    add_completion=False,
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def _render_user(user: UserDetail) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold cyan")
    table.add_column()
    table.add_row("ID", user.id)
    table.add_row("Name", f"{user.title.capitalize()}. {user.full_name}" if user.title else user.full_name)
    table.add_row("Gender", user.gender)
    table.add_row("Email", user.email)
    table.add_row("Date of birth", user.date_of_birth)
    table.add_row("Phone", user.phone)
    if user.location:
        table.add_row("Location", str(user.location))
        table.add_row("Timezone", user.location.timezone)
    table.add_row("Registered", user.register_date)
    table.add_row("Updated", user.updated_date)
    table.add_row("Picture", user.picture)
    console.print(Panel(table, title=user.full_name, border_style="blue"))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Manage user records of the remote user service."""
    settings = get_settings()
    logging_settings = settings.logging
    if verbose:
        logging_settings = logging_settings.model_copy(update={"level": "DEBUG"})
    setup_logging(logging_settings)


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        Text(f"User-Manager v{__version__}\nUser records over the user service API", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def config():
    """Show current configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in get_settings().describe().items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command("list")
def list_users(
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
):
    """List users, loading as many pages as requested."""

    async def _run() -> UserListStateHolder:
        async with open_use_cases(get_settings()) as use_cases:
            holder = await UserListStateHolder.create(use_cases.get_all_users, use_cases.delete_user)
            for _ in range(pages - 1):
                if not holder.state.has_more_pages or holder.state.error:
                    break
                await holder.load_more()
            await holder.close()
            return holder

    holder = asyncio.run(_run())
    state = holder.state
    if state.error and not state.users:
        _fail(state.error)

    table = Table(title="Users")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    for user in state.users:
        table.add_row(user.id, user.display_name)
    console.print(table)

    shown_pages = holder.current_page + 1 if state.users else 0
    console.print(
        f"{len(state.users)} users, page {shown_pages} of {holder.total_pages}"
        + (" (more available)" if state.has_more_pages else "")
    )
    if state.error:
        console.print(f"[yellow]{state.error}[/yellow]")


@app.command()
def show(user_id: str = typer.Argument(..., help="User ID")):
    """Show one user."""

    async def _run() -> UserDetailStateHolder:
        async with open_use_cases(get_settings()) as use_cases:
            holder = UserDetailStateHolder(use_cases.get_user_detail, use_cases.delete_user)
            await holder.load(user_id)
            return holder

    state = asyncio.run(_run()).state
    if state.error or state.user is None:
        _fail(state.error or "User not found")
    _render_user(state.user)


@app.command()
def create(
    title: str = typer.Option(..., "--title", help="mr, ms, mrs or miss"),
    first_name: str = typer.Option(..., "--first-name"),
    last_name: str = typer.Option(..., "--last-name"),
    gender: str = typer.Option(..., "--gender", help="male or female"),
    email: str = typer.Option(..., "--email"),
    date_of_birth: str = typer.Option(..., "--dob", help="YYYY-MM-DD"),
    phone: str = typer.Option(..., "--phone"),
    picture: str = typer.Option("", "--picture", help="Picture URL"),
):
    """Create a user."""
    form = UserForm(
        title=title,
        first_name=first_name,
        last_name=last_name,
        gender=gender,
        email=email,
        date_of_birth=date_of_birth,
        phone=phone,
        picture=picture,
    )

    async def _run() -> CreateUserStateHolder:
        async with open_use_cases(get_settings()) as use_cases:
            holder = CreateUserStateHolder(use_cases.create_user)
            await holder.submit(form)
            return holder

    state = asyncio.run(_run()).state
    if not state.is_success or state.user is None:
        _fail(state.error or "User was not created")
    console.print(f"[bold green]Created user[/bold green] {state.user.id}")
    _render_user(state.user)


@app.command()
def update(
    user_id: str = typer.Argument(..., help="User ID"),
    title: str = typer.Option(None, "--title"),
    first_name: str = typer.Option(None, "--first-name"),
    last_name: str = typer.Option(None, "--last-name"),
    gender: str = typer.Option(None, "--gender"),
    date_of_birth: str = typer.Option(None, "--dob"),
    phone: str = typer.Option(None, "--phone"),
    picture: str = typer.Option(None, "--picture"),
):
    """Update a user. The email address cannot be changed."""
    changes = {
        "title": title,
        "first_name": first_name,
        "last_name": last_name,
        "gender": gender,
        "date_of_birth": date_of_birth,
        "phone": phone,
        "picture": picture,
    }

    async def _run() -> EditUserStateHolder:
        async with open_use_cases(get_settings()) as use_cases:
            holder = EditUserStateHolder(use_cases.get_user_detail, use_cases.update_user)
            await holder.load(user_id)
            if holder.state.user is None:
                return holder
            form = holder.form()
            for name, value in changes.items():
                if value is not None:
                    setattr(form, name, value)
            await holder.submit(form)
            return holder

    state = asyncio.run(_run()).state
    if not state.is_success or state.user is None:
        _fail(state.error or "User was not updated")
    console.print(f"[bold green]Updated user[/bold green] {state.user.id}")
    _render_user(state.user)


@app.command()
def delete(
    user_id: str = typer.Argument(..., help="User ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a user."""
    if not yes and not typer.confirm(f"Delete user {user_id}?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit()

    async def _run() -> UserDetailStateHolder:
        async with open_use_cases(get_settings()) as use_cases:
            holder = UserDetailStateHolder(use_cases.get_user_detail, use_cases.delete_user)
            holder.request_delete()
            await holder.delete(user_id)
            return holder

    state = asyncio.run(_run()).state
    if not state.user_deleted:
        _fail(state.error or "User was not deleted")
    console.print(f"[bold green]Deleted user[/bold green] {user_id}")


if __name__ == "__main__":
    app()
