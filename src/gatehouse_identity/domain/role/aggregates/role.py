"""Role data holder."""

from dataclasses import dataclass


@dataclass
class Role:
    """A named role. ``id`` is assigned by the repository on create."""

    name: str
    id: str = ""
