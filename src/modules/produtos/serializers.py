"""Produto DRF serializers for API output and OpenAPI documentation.

Input validation lives in ``ProdutoInputDTO``; ``ProdutoRequestSerializer``
only describes the request body in the generated schema.
``ProdutoResponseSerializer`` renders ``ProdutoOutputDTO`` instances.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers


class ProdutoRequestSerializer(serializers.Serializer):
    """Creation/update payload (``id`` is never read from the body)."""

    nome = serializers.CharField(
        min_length=3,
        max_length=100,
        help_text="Nome do produto",
    )
    ncm = serializers.RegexField(
        r"^[0-9]{8}$",
        help_text="Código da Nomenclatura Comum do Mercosul (NCM), 8 dígitos",
    )
    descricaoNcm = serializers.CharField(
        source="descricao_ncm",
        max_length=255,
        required=False,
        allow_null=True,
        help_text="Descrição da Nomenclatura Comum do Mercosul (NCM)",
    )
    preco = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
        help_text="Preço do produto",
    )
    quantidade = serializers.IntegerField(
        min_value=0,
        max_value=2147483647,
        help_text="Quantidade em estoque",
    )


class ProdutoResponseSerializer(serializers.Serializer):
    """Objeto retornado pela API após operações com produto."""

    id = serializers.IntegerField(read_only=True, help_text="ID do produto")
    nome = serializers.CharField(read_only=True, help_text="Nome do produto")
    ncm = serializers.CharField(
        read_only=True,
        help_text="Código da Nomenclatura Comum do Mercosul (NCM) do produto",
    )
    descricaoNcm = serializers.CharField(
        source="descricao_ncm",
        read_only=True,
        allow_null=True,
        help_text="Descrição da Nomenclatura Comum do Mercosul (NCM)",
    )
    preco = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        read_only=True,
        help_text="Preço do produto",
    )
    quantidade = serializers.IntegerField(
        read_only=True,
        help_text="Quantidade em estoque",
    )
