"""
Display utilities using Rich library for terminal output
"""
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from users_cli.models import UserData

console = Console()


def show_header(title: str):
    """Display a header panel"""
    console.print(Panel(f"[bold cyan]{title}[/bold cyan]", expand=False))


def show_error(message: str):
    """Display error message"""
    console.print(f"[bold red]Error:[/bold red] {message}")


def show_success(message: str):
    """Display success message"""
    console.print(f"[bold green]Success:[/bold green] {message}")


def show_info(message: str):
    """Display info message"""
    console.print(f"[cyan]{message}[/cyan]")


def display_users_table(users: List[UserData], title: str = "Users"):
    """Display users as a formatted table"""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="cyan")
    table.add_column("Age", justify="right", style="green")

    for user in users:
        table.add_row(str(user.id), user.name, str(user.age))

    console.print(table)
