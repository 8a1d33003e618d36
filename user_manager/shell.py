from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.markup import escape

from user_manager import messages
from user_manager.models import RegisterOutcome
from user_manager.user_store import InMemoryUserStore

logger = logging.getLogger("user_manager")

MENU_LINES = [
    "===================================",
    "      USER MANAGEMENT SYSTEM       ",
    "===================================",
    "1. Register User",
    "2. Login",
    "3. Show All Users",
    "4. Search User",
    "5. Delete User",
    "6. Exit",
    "-----------------------------------",
]

EXIT_CHOICE = 6


class UserManagerShell:
    """Numbered text menu over an ``InMemoryUserStore``.

    The shell owns no user state of its own: it collects field values, calls one
    store operation per menu choice and prints the rendered outcome. Input comes
    from ``read`` (a prompt -> line callable) so tests can script a session.
    """

    def __init__(
        self,
        store: InMemoryUserStore,
        *,
        console: Optional[Console] = None,
        read: Optional[Callable[[str], str]] = None,
        indent: str = "\t\t",
    ):
        self.store = store
        self.console = console or Console()
        self._read = read or (lambda prompt: self.console.input(escape(prompt)))
        self.indent = indent
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.register,
            2: self.login,
            3: self.show_users,
            4: self.search,
            5: self.delete,
        }

    def _say(self, *lines: str) -> None:
        self.console.print()
        for line in lines:
            self.console.print(f"{self.indent}{line}", markup=False, highlight=False, soft_wrap=True)

    def _ask(self, prompt: str) -> str:
        return self._read(f"{self.indent}{prompt}")

    def show_menu(self) -> None:
        self.console.print("\n")
        for line in MENU_LINES:
            self.console.print(f"{self.indent}{line}", markup=False, highlight=False, soft_wrap=True)

    def register(self) -> None:
        username = self._ask("Enter User Name: ")
        # Refuse a taken name before asking for the password.
        if self.store.exists(username=username):
            self._say(messages.format_register(RegisterOutcome.already_exists))
            return
        password = self._ask("Enter Password: ")
        self._say(messages.format_register(self.store.register(username=username, password=password)))

    def login(self) -> None:
        username = self._ask("Enter Username: ")
        password = self._ask("Enter Password: ")
        outcome = self.store.authenticate(username=username, password=password)
        self._say(messages.format_login(outcome, username=username))

    def show_users(self) -> None:
        self._say(*messages.format_user_list(self.store.list_usernames()))

    def search(self) -> None:
        username = self._ask("Enter Username to Search: ")
        self._say(messages.format_search(self.store.find(username=username)))

    def delete(self) -> None:
        username = self._ask("Enter Username to Delete: ")
        self._say(messages.format_delete(self.store.delete(username=username), username=username))

    def handle_choice(self, raw: str) -> bool:
        """Run one menu choice. Returns True when the user chose Exit."""
        choice: Optional[int]
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = None

        if choice == EXIT_CHOICE:
            self._say(messages.EXIT_CHOSEN)
            return True

        action = self._actions.get(choice)
        if action is None:
            logger.debug("Invalid menu choice: %r", raw)
            self._say(messages.INVALID_CHOICE)
            return False

        action()
        return False

    def run(self) -> int:
        """Menu loop. Returns the process exit status."""
        try:
            while True:
                self.show_menu()
                if self.handle_choice(self._ask("Enter Your Choice: ")):
                    return 0

                self.console.print()
                answer = self._ask("Do You Want to Continue [Y/N]?: ")
                if answer.strip() not in ("y", "Y"):
                    break
        except EOFError:
            logger.debug("Input closed, ending session")

        self._say(messages.SESSION_ENDED)
        return 0
