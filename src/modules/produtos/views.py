"""Produto API views.

Exposes the ``ProdutoService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions, so
store failures surface as 500.
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    inline_serializer,
)
from django.urls import reverse
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.produtos.dtos import ProdutoInputDTO
from modules.produtos.exceptions import ProdutoNotFound, ProdutoValidationError
from modules.produtos.mappers import to_entity, to_response
from modules.produtos.models import Produto
from modules.produtos.repositories.django_repository import ProdutoDjangoRepository
from modules.produtos.serializers import (
    ProdutoRequestSerializer,
    ProdutoResponseSerializer,
)
from modules.produtos.services import ProdutoService

logger = structlog.get_logger(__name__)

_ID_PARAMETER = OpenApiParameter(
    "id",
    int,
    OpenApiParameter.PATH,
    description="Código identificador do produto a ser buscado",
)

_VALIDATION_ERROR = inline_serializer(
    name="ErroValidacao",
    fields={
        "detail": serializers.CharField(),
        "errors": serializers.DictField(child=serializers.CharField()),
    },
)

_NOT_FOUND_ERROR = inline_serializer(
    name="ErroNaoEncontrado",
    fields={"detail": serializers.CharField()},
)


class ProdutoViewSet(GenericViewSet):
    """ViewSet for Produto CRUD operations.

    Uses ``ProdutoService`` with ``ProdutoDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer; the
    ``queryset`` attribute only feeds schema generation.
    """

    queryset = Produto.objects.all()
    serializer_class = ProdutoResponseSerializer
    pagination_class = None
    lookup_value_regex = r"[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProdutoService(repository=ProdutoDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Listar todos os produtos",
        responses={
            200: OpenApiResponse(
                ProdutoResponseSerializer(many=True),
                description="Lista de produtos retornada com sucesso",
            ),
        },
    )
    def list(self, request: Request) -> Response:
        """GET /api/produtos"""
        produtos = [to_response(p) for p in self._service.list()]
        return Response(ProdutoResponseSerializer(produtos, many=True).data)

    @extend_schema(
        summary="Buscar produto por ID",
        parameters=[_ID_PARAMETER],
        responses={
            200: OpenApiResponse(
                ProdutoResponseSerializer, description="Produto encontrado"
            ),
            404: OpenApiResponse(
                _NOT_FOUND_ERROR, description="Produto não encontrado"
            ),
        },
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/produtos/{pk}"""
        try:
            produto = self._service.get_by_id(int(pk))
        except ProdutoNotFound as exc:
            return self._not_found(exc)
        return Response(ProdutoResponseSerializer(to_response(produto)).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Criar um novo produto",
        request=ProdutoRequestSerializer,
        responses={
            201: OpenApiResponse(
                ProdutoResponseSerializer, description="Produto criado com sucesso"
            ),
            400: OpenApiResponse(_VALIDATION_ERROR, description="Dados inválidos"),
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/produtos"""
        try:
            dto = ProdutoInputDTO.from_payload(request.data)
        except ProdutoValidationError as exc:
            return self._invalid(exc)

        produto = self._service.create(to_entity(dto))

        out = ProdutoResponseSerializer(to_response(produto))
        return Response(
            out.data,
            status=status.HTTP_201_CREATED,
            headers={"Location": reverse("produto-detail", args=[produto.id])},
        )

    @extend_schema(
        summary="Atualizar um produto existente",
        parameters=[_ID_PARAMETER],
        request=ProdutoRequestSerializer,
        responses={
            200: OpenApiResponse(
                ProdutoResponseSerializer,
                description="Produto atualizado com sucesso",
            ),
            400: OpenApiResponse(_VALIDATION_ERROR, description="Dados inválidos"),
            404: OpenApiResponse(
                _NOT_FOUND_ERROR, description="Produto não encontrado"
            ),
        },
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/produtos/{pk}

        The ``id`` comes from the path; any ``id`` in the body is ignored.
        """
        try:
            dto = ProdutoInputDTO.from_payload(request.data)
        except ProdutoValidationError as exc:
            return self._invalid(exc)

        produto = to_entity(dto)
        produto.id = int(pk)
        try:
            produto = self._service.update(produto)
        except ProdutoNotFound as exc:
            return self._not_found(exc)

        return Response(ProdutoResponseSerializer(to_response(produto)).data)

    @extend_schema(
        summary="Deletar um produto",
        parameters=[_ID_PARAMETER],
        responses={
            204: OpenApiResponse(description="Produto deletado com sucesso"),
            404: OpenApiResponse(
                _NOT_FOUND_ERROR, description="Produto não encontrado"
            ),
        },
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/produtos/{pk}"""
        try:
            self._service.delete(int(pk))
        except ProdutoNotFound as exc:
            return self._not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Error responses
    # ------------------------------------------------------------------

    @staticmethod
    def _invalid(exc: ProdutoValidationError) -> Response:
        logger.warning("produto.validation_failed", errors=exc.errors)
        return Response(
            {"detail": "Dados inválidos.", "errors": exc.errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    @staticmethod
    def _not_found(exc: ProdutoNotFound) -> Response:
        return Response(
            {"detail": str(exc)},
            status=status.HTTP_404_NOT_FOUND,
        )
