"""
Identifier generation for stored resources.

Stores receive an `IdGenerator` at construction so tests can swap in a
deterministic sequence.
"""

import uuid
from typing import Callable

IdGenerator = Callable[[], str]

# Attempts before create() gives up on a generator that keeps colliding
MAX_ID_ATTEMPTS = 5


def random_id() -> str:
    """Random UUID4 in canonical string form."""
    return str(uuid.uuid4())
