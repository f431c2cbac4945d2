"""Password complexity rules.

The same five rules apply at registration and on password change, and
are checked before the identity service is contacted.
"""

import re
from dataclasses import dataclass
from typing import Callable

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~`"


@dataclass(frozen=True)
class PasswordRequirement:
    """A single named password rule."""

    label: str
    check: Callable[[str], bool]


PASSWORD_REQUIREMENTS: tuple[PasswordRequirement, ...] = (
    PasswordRequirement("At least 8 characters", lambda p: len(p) >= 8),
    PasswordRequirement("Lowercase letter (a-z)", lambda p: bool(re.search(r"[a-z]", p))),
    PasswordRequirement("Uppercase letter (A-Z)", lambda p: bool(re.search(r"[A-Z]", p))),
    PasswordRequirement("Number (0-9)", lambda p: bool(re.search(r"[0-9]", p))),
    PasswordRequirement(
        "Special character (!@#$%^&*)",
        lambda p: any(c in SPECIAL_CHARACTERS for c in p),
    ),
)


def unmet_requirements(password: str) -> list[str]:
    """Return labels of the rules the password fails, in rule order."""
    return [req.label for req in PASSWORD_REQUIREMENTS if not req.check(password)]
