"""Unit tests for ProdutoDjangoRepository.

Covers:
- The five store operations (save, find_by_id, find_all, exists_by_id,
  delete_by_id).
- Edge cases (unknown and non-numeric IDs, overwrite on save).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.produtos.models import Produto
from modules.produtos.repositories.django_repository import ProdutoDjangoRepository
from modules.produtos.repositories.interfaces import IProdutoRepository

pytestmark = pytest.mark.unit

MISSING_ID = 999_999


@pytest.fixture()
def repo():
    return ProdutoDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProdutoRepository)


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_produto(self, repo):
        produto = Produto(
            nome="Produto Novo",
            ncm="85171300",
            preco=Decimal("9.99"),
            quantidade=5,
        )
        saved = repo.save(produto)
        assert saved.id is not None
        assert Produto.objects.filter(id=saved.id).exists()

    def test_returns_same_entity(self, repo):
        produto = Produto(
            nome="Produto Retorno",
            ncm="85171300",
            preco=Decimal("5.00"),
            quantidade=0,
        )
        assert repo.save(produto) is produto

    def test_overwrites_every_field(self, repo, make_produto):
        existing = make_produto()
        replacement = Produto(
            id=existing.id,
            nome="Notebook Lenovo",
            ncm="84713019",
            descricao_ncm=None,
            preco=Decimal("3500.00"),
            quantidade=3,
        )
        repo.save(replacement)

        existing.refresh_from_db()
        assert existing.nome == "Notebook Lenovo"
        assert existing.ncm == "84713019"
        assert existing.descricao_ncm is None
        assert existing.preco == Decimal("3500.00")
        assert existing.quantidade == 3
        assert Produto.objects.count() == 1


# ===========================================================================
# find_by_id
# ===========================================================================


class TestFindById:
    def test_returns_produto_when_found(self, repo, make_produto):
        produto = make_produto()
        result = repo.find_by_id(produto.id)
        assert result is not None
        assert result.id == produto.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.find_by_id(MISSING_ID) is None

    def test_returns_none_for_non_numeric_id(self, repo):
        assert repo.find_by_id("not-a-number") is None


# ===========================================================================
# find_all
# ===========================================================================


class TestFindAll:
    def test_returns_all_produtos(self, repo, make_produto):
        make_produto(nome="Produto A")
        make_produto(nome="Produto B")
        results = repo.find_all()
        assert [p.nome for p in results] == ["Produto A", "Produto B"]

    def test_returns_empty_list_when_no_produtos(self, repo):
        assert repo.find_all() == []


# ===========================================================================
# exists_by_id
# ===========================================================================


class TestExistsById:
    def test_true_for_stored_produto(self, repo, make_produto):
        assert repo.exists_by_id(make_produto().id) is True

    def test_false_for_missing_produto(self, repo):
        assert repo.exists_by_id(MISSING_ID) is False

    def test_false_for_non_numeric_id(self, repo):
        assert repo.exists_by_id("abc") is False


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    def test_removes_row_permanently(self, repo, make_produto):
        produto = make_produto()
        repo.delete_by_id(produto.id)
        assert not Produto.objects.filter(id=produto.id).exists()

    def test_missing_id_is_noop(self, repo, make_produto):
        make_produto()
        repo.delete_by_id(MISSING_ID)
        assert Produto.objects.count() == 1
