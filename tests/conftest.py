from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_produto():
    """Factory persisting a valid Produto; keyword arguments override fields."""
    from modules.produtos.models import Produto

    def _make(**overrides) -> Produto:
        defaults = {
            "nome": "Notebook Dell",
            "ncm": "84713012",
            "descricao_ncm": "Notebook com processador Intel Core i7",
            "preco": Decimal("2999.99"),
            "quantidade": 10,
        }
        defaults.update(overrides)
        return Produto.objects.create(**defaults)

    return _make
