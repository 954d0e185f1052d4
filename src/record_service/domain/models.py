"""Domain models for the record service."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user row stored in the database."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation of the record."""
        return asdict(self)
