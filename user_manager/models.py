from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class User:
    username: str
    password: str = field(repr=False)


class RegisterOutcome(str, Enum):
    registered = "registered"
    already_exists = "already_exists"


class AuthOutcome(str, Enum):
    authenticated = "authenticated"
    rejected = "rejected"


class DeleteOutcome(str, Enum):
    deleted = "deleted"
    not_found = "not_found"
