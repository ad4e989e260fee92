"""Produto service layer (Use Cases).

Orchestrates the Produto lifecycle, delegating persistence to the
injected ``IProdutoRepository``.

Rules enforced here:
- Update and delete require the produto to exist.
- Absence reported by the repository becomes ``ProdutoNotFound``.

Field rules are enforced earlier, by ``ProdutoInputDTO``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.produtos.exceptions import ProdutoNotFound

if TYPE_CHECKING:
    from modules.produtos.models import Produto
    from modules.produtos.repositories.interfaces import IProdutoRepository

logger = structlog.get_logger(__name__)


class ProdutoService:
    """Application service for Produto use-cases.

    Receives an ``IProdutoRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProdutoRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, produto: Produto) -> Produto:
        """Persist a new produto and return it with its assigned ``id``."""
        produto = self._repo.save(produto)
        logger.info("produto.created", produto_id=produto.id)
        return produto

    @transaction.atomic
    def update(self, produto: Produto) -> Produto:
        """Overwrite every field of an existing produto.

        Raises:
            ProdutoNotFound: if ``produto.id`` is not stored.
        """
        if not self._repo.exists_by_id(produto.id):
            logger.warning("produto.not_found", produto_id=produto.id)
            raise ProdutoNotFound(produto.id)

        produto = self._repo.save(produto)
        logger.info("produto.updated", produto_id=produto.id)
        return produto

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Permanently remove a produto.

        Raises:
            ProdutoNotFound: if the produto does not exist.
        """
        if not self._repo.exists_by_id(id):
            logger.warning("produto.not_found", produto_id=id)
            raise ProdutoNotFound(id)
        self._repo.delete_by_id(id)
        logger.info("produto.deleted", produto_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Produto]:
        """Return every produto in store order."""
        return self._repo.find_all()

    def get_by_id(self, id: int) -> Produto:
        """Retrieve a single produto by ID.

        Raises:
            ProdutoNotFound: if the produto does not exist.
        """
        produto = self._repo.find_by_id(id)
        if produto is None:
            logger.warning("produto.not_found", produto_id=id)
            raise ProdutoNotFound(id)
        logger.info("produto.retrieved", produto_id=id)
        return produto
