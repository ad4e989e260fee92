"""Produto domain exceptions.

Raised by the DTO and Service layers.  The API layer (Views) catches
these and translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Dict


class ProdutoNotFound(Exception):
    """The requested produto does not exist."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(f"Produto não encontrado com o ID: {id}")


class ProdutoValidationError(Exception):
    """One or more fields of an input payload violated their rules.

    ``errors`` maps each offending wire field name to a single message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
