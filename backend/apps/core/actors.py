from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Caller identity resolved from an API key; recorded on documents and history."""

    name: str
    role: str

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name
