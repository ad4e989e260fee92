"""Produto DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProdutoInputDTO``: validated payload for creation and full update.
- ``ProdutoOutputDTO``: output with all produto fields, including ``id``.

Field names follow the Python convention; the wire name of
``descricao_ncm`` is ``descricaoNcm``.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from modules.produtos.exceptions import ProdutoValidationError

NCM_RE = re.compile(r"[0-9]{8}")

PRECO_MINIMO = Decimal("0.01")
PRECO_LIMITE = Decimal("100000000")  # 8 integer digits, DecimalField(10, 2)
QUANTIDADE_LIMITE = 2147483647  # 32-bit signed integer column

# Messages used when the value cannot even be parsed into the field type.
_TYPE_MESSAGES = {
    "nome": "O nome deve ser um texto",
    "ncm": "O NCM deve ser um texto",
    "descricaoNcm": "A descrição deve ser um texto",
    "preco": "O preço deve ser um valor numérico com até 2 casas decimais",
    "quantidade": "A quantidade deve ser um número inteiro",
}


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProdutoInputDTO(BaseModel):
    """Immutable DTO for produto creation and update requests.

    Validates, one message per field:
    - ``nome`` is non-blank with 3 to 100 characters.
    - ``ncm`` is non-blank with exactly 8 digits.
    - ``descricao_ncm`` has at most 255 characters, when present.
    - ``preco`` is present and at least 0.01, with at most 2 decimal places.
    - ``quantidade`` is a present integer from 0 to ``QUANTIDADE_LIMITE``.

    Unknown keys, ``id`` and ``descricao_ncm`` included, are ignored;
    the description is only read from ``descricaoNcm``.
    """

    model_config = ConfigDict(frozen=True)

    nome: str | None = Field(default=None, validate_default=True)
    ncm: str | None = Field(default=None, validate_default=True)
    descricao_ncm: str | None = Field(default=None, alias="descricaoNcm")
    preco: Decimal | None = Field(default=None, validate_default=True)
    quantidade: int | None = Field(default=None, validate_default=True)

    @field_validator("nome")
    @classmethod
    def nome_must_have_valid_size(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("O nome é obrigatório")
        if not 3 <= len(v) <= 100:
            raise ValueError("O nome deve ter entre 3 e 100 caracteres")
        return v

    @field_validator("ncm")
    @classmethod
    def ncm_must_have_eight_digits(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("O NCM é obrigatório")
        if not NCM_RE.fullmatch(v):
            raise ValueError("O NCM deve conter exatamente 8 dígitos")
        return v

    @field_validator("descricao_ncm")
    @classmethod
    def descricao_must_fit(cls, v: str | None) -> str | None:
        if v is not None and len(v) > 255:
            raise ValueError("A descrição não pode ter mais de 255 caracteres")
        return v

    @field_validator("preco", mode="before")
    @classmethod
    def preco_from_json_number(cls, v: Any) -> Any:
        # JSON numbers arrive as float; parse the literal, not its binary value.
        if isinstance(v, float):
            return repr(v)
        return v

    @field_validator("preco")
    @classmethod
    def preco_must_be_positive(cls, v: Decimal | None) -> Decimal:
        if v is None:
            raise ValueError("O preço é obrigatório")
        if v < PRECO_MINIMO:
            raise ValueError("O preço deve ser maior que zero")
        if v >= PRECO_LIMITE or v != v.quantize(PRECO_MINIMO):
            raise ValueError(_TYPE_MESSAGES["preco"])
        return v

    @field_validator("quantidade", mode="before")
    @classmethod
    def quantidade_rejects_json_boolean(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError(_TYPE_MESSAGES["quantidade"])
        return v

    @field_validator("quantidade")
    @classmethod
    def quantidade_must_be_non_negative(cls, v: int | None) -> int:
        if v is None:
            raise ValueError("A quantidade é obrigatória")
        if v < 0:
            raise ValueError("A quantidade não pode ser negativa")
        if v > QUANTIDADE_LIMITE:
            raise ValueError(_TYPE_MESSAGES["quantidade"])
        return v

    @classmethod
    def from_payload(cls, data: Any) -> ProdutoInputDTO:
        """Validate a decoded request body.

        Raises:
            ProdutoValidationError: with one message per violated field.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise ProdutoValidationError(collect_errors(exc)) from exc


def collect_errors(exc: PydanticValidationError) -> Dict[str, str]:
    """Flatten a Pydantic error list into ``{wire_field: message}``.

    Only the first message of each field is kept.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "payload"
        if error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        elif field == "payload":
            message = "O corpo da requisição deve ser um objeto JSON"
        else:
            message = _TYPE_MESSAGES.get(field, error["msg"])
        errors.setdefault(field, message)
    return errors


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProdutoOutputDTO(BaseModel):
    """Immutable DTO for produto API responses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    nome: str
    ncm: str
    descricao_ncm: str | None = Field(default=None, alias="descricaoNcm")
    preco: Decimal
    quantidade: int
