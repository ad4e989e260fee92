"""Produto model.

Column definitions mirror the input validation rules so that a row that
reaches the database always satisfies them:

- ``nome``: 3 to 100 characters.
- ``ncm``: exactly 8 digits (Nomenclatura Comum do Mercosul).
- ``descricao_ncm``: optional, up to 255 characters.
- ``preco``: greater than zero, two decimal places.
- ``quantidade``: non-negative, fits a 32-bit signed integer.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models

from modules.produtos.dtos import QUANTIDADE_LIMITE

NCM_PATTERN = r"^[0-9]{8}$"


class Produto(models.Model):
    """Product record keyed by a store-assigned integer ``id``."""

    id = models.BigAutoField(primary_key=True)
    nome = models.CharField(
        max_length=100,
        validators=[MinLengthValidator(3)],
    )
    ncm = models.CharField(
        max_length=8,
        validators=[RegexValidator(NCM_PATTERN)],
    )
    descricao_ncm = models.CharField(  # noqa: DJ01
        max_length=255,
        null=True,
        blank=True,
        default=None,
    )
    preco = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    quantidade = models.PositiveIntegerField(
        validators=[MaxValueValidator(QUANTIDADE_LIMITE)],
    )

    class Meta:
        db_table = "produtos"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(preco__gt=0),
                name="produtos_preco_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.nome is not None and not self.nome.strip():
            raise ValidationError({"nome": "O nome é obrigatório"})
        if self.preco is not None and self.preco <= 0:
            raise ValidationError({"preco": "O preço deve ser maior que zero"})

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.ncm} - {self.nome}"
