"""Validation error definitions."""

from dataclasses import dataclass


@dataclass
class ValidationError:
    """Represents a validation error with a user-facing title and message."""

    title: str
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.title}: {self.message}"
