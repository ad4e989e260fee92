"""Django ORM implementation of the Produto repository.

Satisfies ``IProdutoRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising HTTP-level exceptions; the Service Layer
decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.produtos.models import Produto
from modules.produtos.repositories.interfaces import IProdutoRepository

logger = structlog.get_logger(__name__)


class ProdutoDjangoRepository(IProdutoRepository):
    """Concrete Produto repository backed by Django ORM."""

    @transaction.atomic
    def save(self, entity: Produto) -> Produto:
        """Persist (create or overwrite) a produto.

        An entity without ``id`` is inserted; one with ``id`` overwrites
        every column of that row.
        """
        entity.save()
        logger.info(
            "produto.saved",
            produto_id=entity.id,
            ncm=entity.ncm,
        )
        return entity

    def find_by_id(self, id: int) -> Optional[Produto]:
        """Retrieve a produto by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Produto.objects.filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def find_all(self) -> List[Produto]:
        """Return all produtos ordered by ``id``."""
        return list(Produto.objects.all())

    def exists_by_id(self, id: int) -> bool:
        try:
            return Produto.objects.filter(id=id).exists()
        except (TypeError, ValueError):
            return False

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Hard-delete a produto by ID.  Missing IDs are a no-op."""
        deleted, _ = Produto.objects.filter(id=id).delete()
        if deleted:
            logger.info("produto.deleted_from_store", produto_id=id)
