"""Conversions between the wire DTOs and the ``Produto`` model.

Both functions are pure: no database access, no logging.
"""

from __future__ import annotations

from modules.produtos.dtos import ProdutoInputDTO, ProdutoOutputDTO
from modules.produtos.models import Produto


def to_entity(dto: ProdutoInputDTO) -> Produto:
    """Build an unsaved ``Produto`` from a validated input DTO (``id`` unset)."""
    return Produto(
        nome=dto.nome,
        ncm=dto.ncm,
        descricao_ncm=dto.descricao_ncm,
        preco=dto.preco,
        quantidade=dto.quantidade,
    )


def to_response(produto: Produto) -> ProdutoOutputDTO:
    """Build an output DTO from a persisted ``Produto``."""
    return ProdutoOutputDTO(
        id=produto.id,
        nome=produto.nome,
        ncm=produto.ncm,
        descricao_ncm=produto.descricao_ncm,
        preco=produto.preco,
        quantidade=produto.quantidade,
    )
