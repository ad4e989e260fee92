"""Unit tests for the Produto model.

Covers:
- Valid creation and integer id assignment.
- full_clean() enforcing the field rules.
- Database check constraint on price.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.produtos.models import Produto

pytestmark = pytest.mark.unit


def _make_produto(**overrides) -> Produto:
    """Build and full_clean a Produto, returning the unsaved instance."""
    defaults = {
        "nome": "Produto Teste",
        "ncm": "84713012",
        "preco": Decimal("29.90"),
        "quantidade": 100,
    }
    defaults.update(overrides)
    produto = Produto(**defaults)
    produto.full_clean()
    return produto


class TestProdutoCreation:
    def test_create_with_valid_data(self):
        p = Produto.objects.create(
            nome="Notebook Dell",
            ncm="84713012",
            preco=Decimal("2999.99"),
            quantidade=10,
        )
        p.refresh_from_db()
        assert isinstance(p.id, int)
        assert p.nome == "Notebook Dell"
        assert p.preco == Decimal("2999.99")
        assert p.descricao_ncm is None

    def test_ids_are_increasing(self, make_produto):
        first = make_produto()
        second = make_produto(nome="Outro Produto")
        assert second.id > first.id

    def test_default_ordering_is_by_id(self, make_produto):
        first = make_produto()
        second = make_produto(nome="Outro Produto")
        assert list(Produto.objects.all()) == [first, second]


class TestProdutoFullClean:
    def test_valid_instance_passes(self):
        _make_produto()

    def test_short_nome_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(nome="ab")
        assert "nome" in exc_info.value.message_dict

    def test_blank_nome_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(nome="   ")
        assert "nome" in exc_info.value.message_dict

    def test_ncm_pattern_enforced(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(ncm="1234567A")
        assert "ncm" in exc_info.value.message_dict

    def test_zero_preco_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(preco=Decimal("0.00"))
        assert "preco" in exc_info.value.message_dict

    def test_quantidade_above_32_bit_range_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(quantidade=2**31)
        assert "quantidade" in exc_info.value.message_dict

    def test_descricao_max_length(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_produto(descricao_ncm="x" * 256)
        assert "descricao_ncm" in exc_info.value.message_dict


class TestProdutoConstraints:
    def test_db_rejects_non_positive_preco(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Produto.objects.create(
                nome="Preço Zero",
                ncm="84713012",
                preco=Decimal("0.00"),
                quantidade=1,
            )


class TestProdutoStr:
    def test_str(self):
        p = Produto(nome="Notebook Dell", ncm="84713012")
        assert str(p) == "84713012 - Notebook Dell"
