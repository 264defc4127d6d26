"""Errors raised while building a configuration."""

from __future__ import annotations

from typing import Iterable


class ValidationError(ValueError):
    """Raised when a configuration violates one of its field constraints."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid configuration")
