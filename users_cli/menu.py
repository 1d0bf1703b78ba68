#!/usr/bin/env python3
"""
User Management CLI - Interactive menu over the users API
"""
import asyncio
import sys
from typing import Optional

import httpx
from pydantic import ValidationError
from rich.console import Console

from users_cli.api_client import APIClient, error_message
from users_cli.config import Config
from users_cli.display import (
    display_users_table,
    show_error,
    show_header,
    show_info,
    show_success,
)
from users_cli.models import UserWrite

console = Console()


def report_http_error(error: Exception, config: Config):
    """Show a failed API call in terms the user can act on"""
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        message = error_message(error.response)
        if status == 400:
            show_error(f"Validation error: {message}")
        elif status == 401:
            show_error("Unauthorized - check API_TOKEN")
        elif status == 404:
            show_error("User not found")
        elif status >= 500:
            show_error("Server error - please try again later")
        else:
            show_error(f"HTTP {status}: {message}")
    elif isinstance(error, httpx.ConnectError):
        show_error(f"Cannot connect to API at {config.api_base_url}")
        show_info("Make sure the API server is running (python -m users_api)")
    elif isinstance(error, httpx.TimeoutException):
        show_error("Request timed out - check API server")
    else:
        show_error(f"Unexpected error: {error}")


def prompt_user_id() -> Optional[int]:
    user_id = console.input("[cyan]Enter user ID:[/cyan] ").strip()
    if not user_id.isdigit():
        show_error("User ID must be a number")
        return None
    return int(user_id)


def prompt_user_fields() -> Optional[UserWrite]:
    name = console.input("[cyan]Name:[/cyan] ").strip()
    age = console.input("[cyan]Age:[/cyan] ").strip()

    try:
        return UserWrite(name=name, age=age)
    except ValidationError as e:
        show_error(f"Invalid input: {e.errors()[0]['msg']}")
        return None


async def list_users(client: APIClient, config: Config):
    """Show every user"""
    try:
        show_info("Fetching users...")
        users = await client.list_users()
        if not users:
            show_info("No users found.")
        else:
            display_users_table(users)
    except Exception as e:
        report_http_error(e, config)


async def view_user(client: APIClient, config: Config):
    """Show a single user"""
    user_id = prompt_user_id()
    if user_id is None:
        return

    try:
        user = await client.get_user(user_id)
        display_users_table([user], title=f"User {user.id}")
    except Exception as e:
        report_http_error(e, config)


async def create_user(client: APIClient, config: Config):
    """Create a user"""
    show_header("Create User")
    user = prompt_user_fields()
    if user is None:
        return

    try:
        created = await client.create_user(user)
        show_success(f"User created! ID: {created.id}")
    except Exception as e:
        report_http_error(e, config)


async def update_user(client: APIClient, config: Config):
    """Replace a user's name and age"""
    show_header("Update User")
    user_id = prompt_user_id()
    if user_id is None:
        return
    user = prompt_user_fields()
    if user is None:
        return

    try:
        await client.update_user(user_id, user)
        show_success(f"User {user_id} updated")
    except Exception as e:
        report_http_error(e, config)


async def delete_user(client: APIClient, config: Config):
    """Delete a user after confirmation"""
    user_id = prompt_user_id()
    if user_id is None:
        return

    confirm = console.input(f"[cyan]Delete user {user_id}? (y/n):[/cyan] ").strip().lower()
    if confirm != "y":
        show_info("Cancelled")
        return

    try:
        await client.delete_user(user_id)
        show_success(f"User {user_id} deleted")
    except Exception as e:
        report_http_error(e, config)


MENU_ACTIONS = {
    "1": ("List Users", list_users),
    "2": ("View User", view_user),
    "3": ("Create User", create_user),
    "4": ("Update User", update_user),
    "5": ("Delete User", delete_user),
}


async def main_menu():
    """Main menu loop"""
    config = Config.load()
    client = APIClient(config)

    while True:
        show_header("User Management - Main Menu")

        for key, (label, _) in MENU_ACTIONS.items():
            console.print(f"{key}. {label}")
        console.print("6. Exit")

        choice = console.input("\n[cyan]Select option:[/cyan] ").strip()

        if choice in MENU_ACTIONS:
            _, action = MENU_ACTIONS[choice]
            await action(client, config)
            console.print()  # Extra spacing
        elif choice == "6":
            console.print("[yellow]Goodbye![/yellow]")
            break
        else:
            show_error("Invalid option")


def main():
    try:
        asyncio.run(main_menu())
    except KeyboardInterrupt:
        console.print("\n[yellow]Goodbye![/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
