from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/shell_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from user_manager.shell import UserManagerShell
from user_manager.user_store import InMemoryUserStore

SESSION = [
    "1", "alice", "pw1", "y",
    "1", "alice", "y",
    "2", "alice", "pw1", "y",
    "3", "y",
    "5", "alice", "y",
    "4", "alice", "y",
    "6",
]


def main() -> int:
    answers = iter(SESSION)

    def read(prompt: str) -> str:
        answer = next(answers)
        print(f"{prompt}{answer}")
        return answer

    store = InMemoryUserStore()
    status = UserManagerShell(store, read=read).run()
    print("exit status", status, "users left", store.list_usernames())
    return 0 if status == 0 and not store.list_usernames() else 1


if __name__ == "__main__":
    raise SystemExit(main())
