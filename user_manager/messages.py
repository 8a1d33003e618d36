from __future__ import annotations

from typing import Iterable, Optional

from user_manager.models import AuthOutcome, DeleteOutcome, RegisterOutcome, User

INVALID_CHOICE = "Invalid choice. Please try again."
EXIT_CHOSEN = "Thank you for using the system. Exiting..."
SESSION_ENDED = "Exiting program."


def format_register(outcome: RegisterOutcome) -> str:
    if outcome == RegisterOutcome.already_exists:
        return "Error: User with this username already exists."
    return "User registration successful!"


def format_login(outcome: AuthOutcome, *, username: str) -> str:
    # Same message whether the user is unknown or the password is wrong.
    if outcome == AuthOutcome.authenticated:
        return f"Login successful! Welcome, {username}."
    return "Login failed. Invalid username or password."


def format_user_list(usernames: Iterable[str]) -> list[str]:
    """Render the "Show All Users" listing.

    Contract:
    - Input: usernames in store order.
    - Output: one string per console line.
    - An empty store yields a single "no users" line instead of an empty header.
    """
    names = list(usernames)
    if not names:
        return ["No users registered in the system."]
    return ["--- Registered Users ---"] + [f"- {name}" for name in names]


def format_search(user: Optional[User]) -> str:
    if user is None:
        return "User not found."
    return f"User found: {user.username}"


def format_delete(outcome: DeleteOutcome, *, username: str) -> str:
    if outcome == DeleteOutcome.deleted:
        return f"User '{username}' deleted successfully."
    return "User not found. Could not delete."
