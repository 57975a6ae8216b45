"""Exceptions raised by the descriptor generator."""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when descriptors for a module cannot be generated.

    Wraps the underlying template, rendering or I/O failure (available as
    ``__cause__``) so the host sees a single failure per run.
    """

    def __init__(self, module: str, message: str) -> None:
        self.module = module
        super().__init__(f"{module}: {message}")
