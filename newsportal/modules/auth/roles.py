"""
Roles
=====

Two flat roles decoded once from the session's app metadata. An absent or
unrecognised role claim is represented as ``None``.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Role(str, Enum):
    EDITOR = 'editor'
    ADMIN = 'admin'

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def decode(cls, value) -> Optional['Role']:
        """Decode a raw metadata value; unknown values become None."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning(f"Ignoring unknown role claim: {value!r}")
        return None

    @classmethod
    def parse_requirement(cls, value) -> Optional['Role']:
        """Decode a required role strictly; unknown values raise ValueError."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown required role: {value!r}")


_RANKS = {Role.EDITOR: 1, Role.ADMIN: 2}


def satisfies(have: Optional[Role], need: Optional[Role]) -> bool:
    """Whether a user holding ``have`` meets a requirement of ``need``.

    No requirement is met by any authenticated user, admin meets every
    requirement, and a missing role meets none.
    """
    if need is None:
        return True
    if have is None:
        return False
    return have.rank >= need.rank
