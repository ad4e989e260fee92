"""Produto repository interface.

Narrows ``IRepository`` to the ``Produto`` entity with integer keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.produtos.models import Produto


class IProdutoRepository(IRepository["Produto", int]):
    """Repository contract for the Produto entity."""
