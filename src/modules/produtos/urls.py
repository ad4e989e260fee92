"""Produto URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.produtos.views import ProdutoViewSet

router = DefaultRouter(trailing_slash=False)
router.register("produtos", ProdutoViewSet, basename="produto")

urlpatterns = router.urls
