"""
Máscaras de Entrada
===================

Funções puras chamadas a cada tecla digitada nos formulários do painel
(clientes, carros, fornecedores e produtos).

- `mask_phone`: (DD) DDDDD-DDDD
- `mask_cpf_cnpj`: CPF até 11 dígitos, CNPJ a partir de 12
- `mask_plate`: AAA-1234 ou Mercosul AAA-1A23
- `format_money` / `mask_currency` / `unmask_currency`: valores em R$

Nenhuma função levanta exceção: entradas inválidas viram string vazia,
máscara parcial ou zero.
"""
# src/utils/masks.py
from __future__ import annotations

import logging
import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

Numero = Union[int, float]

_re_non_digits = re.compile(r"\D", re.ASCII)
_re_non_plate = re.compile(r"[^A-Z0-9]")
_re_non_money = re.compile(r"[^\d,]", re.ASCII)

_CENTAVOS = Decimal("0.01")
_MAX_DIGITOS = 1000


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def only_digits(value: Any) -> str:
    """Remove tudo que não for dígito."""
    return _re_non_digits.sub("", _as_text(value))


# ----------------- Documentos e contato -----------------

def mask_phone(value: Any) -> str:
    """Aplica a máscara de telefone progressivamente.

    Examples:
        >>> mask_phone("11")
        "(11"
        >>> mask_phone("11987654321")
        "(11) 98765-4321"
        >>> mask_phone("1155551234")
        "(11) 5555-1234"
    """
    d = only_digits(value)
    if not d:
        return ""
    if len(d) <= 2:
        return f"({d}"

    v = re.sub(r"^(\d{2})(\d)", r"(\1) \2", d, count=1)
    v = re.sub(r"(\d)(\d{4})$", r"\1-\2", v, count=1)
    return v[:15]


def mask_cpf_cnpj(value: Any) -> str:
    """Aplica CPF (até 11 dígitos) ou CNPJ (12 ou mais dígitos).

    A escolha é refeita a cada chamada, então o campo passa de CPF para
    CNPJ assim que o 12º dígito é digitado.

    Examples:
        >>> mask_cpf_cnpj("12345678901")
        "123.456.789-01"
        >>> mask_cpf_cnpj("12345678000199")
        "12.345.678/0001-99"
    """
    d = only_digits(value)

    if len(d) <= 11:
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", d, count=1)
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", v, count=1)
        v = re.sub(r"(\d{3})(\d{1,2})", r"\1-\2", v, count=1)
        return re.sub(r"(-\d{2})\d+?$", r"\1", v, count=1)

    v = re.sub(r"^(\d{2})(\d)", r"\1.\2", d, count=1)
    v = re.sub(r"^(\d{2})\.(\d{3})(\d)", r"\1.\2.\3", v, count=1)
    v = re.sub(r"\.(\d{3})(\d)", r".\1/\2", v, count=1)
    v = re.sub(r"(\d{4})(\d)", r"\1-\2", v, count=1)
    v = re.sub(r"(-\d{2})\d+?$", r"\1", v, count=1)
    return v[:18]


def mask_plate(value: Any) -> str:
    """Formata placa de veículo (padrão antigo ou Mercosul).

    Examples:
        >>> mask_plate("abc1234")
        "ABC-1234"
        >>> mask_plate("ABC1D23")
        "ABC-1D23"
    """
    v = _re_non_plate.sub("", _as_text(value).upper())
    if len(v) > 3:
        v = re.sub(r"^([A-Z]{3})([A-Z0-9])", r"\1-\2", v, count=1)
    return v[:8]


# ----------------- Valores monetários -----------------

def _to_decimal(value: Any) -> Optional[Decimal]:
    """Converte número ou string numérica; None quando não for um valor finito."""
    if isinstance(value, bool):
        value = int(value)
    try:
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            return Decimal(repr(value))
        if isinstance(value, (int, Decimal)):
            dec = Decimal(value)
        else:
            text = _as_text(value).strip()
            dec = Decimal(text) if text else Decimal(0)
    except (InvalidOperation, ValueError):
        logger.debug("Valor monetário não numérico: %r", value)
        return None
    return dec if dec.is_finite() else None


def format_money(value: Any) -> str:
    """Formata valor no padrão monetário brasileiro.

    Args:
        value: Número ou string numérica (ponto como separador decimal)

    Returns:
        String formatada: "R$ 1.234,56". Entradas não numéricas resultam
        em "R$ 0,00".

    Examples:
        >>> format_money(1250.5)
        "R$ 1.250,50"
        >>> format_money("abc")
        "R$ 0,00"
    """
    dec = _to_decimal(value)
    if dec is None:
        return "R$ 0,00"

    try:
        with localcontext() as ctx:
            ctx.prec = min(max(ctx.prec, dec.adjusted() + 3), _MAX_DIGITOS)
            dec = dec.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.debug("Valor monetário fora do intervalo suportado: %r", value)
        return "R$ 0,00"

    sinal = "-" if dec < 0 else ""
    # Formata com separador de milhar e decimal
    valor_formatado = f"{dec.copy_abs():,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sinal}R$ {valor_formatado}"


def mask_currency(value: Any) -> str:
    """Máscara de digitação para campos de preço.

    Texto é lido como centavos, então o usuário digita só números:
    "100" -> "R$ 1,00", "10050" -> "R$ 100,50". Números já armazenados
    (pré-preenchimento do formulário de edição) são exibidos como valor.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_money(value)

    digits = only_digits(value) or "0"
    return format_money(Decimal(f"{digits}E-2"))


def unmask_currency(value: Any) -> Numero:
    """Converte o texto do campo de preço de volta para número.

    Examples:
        >>> unmask_currency("R$ 1.250,50")
        1250.5
        >>> unmask_currency(99.9)
        99.9
        >>> unmask_currency("abc")
        0
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value

    limpo = _re_non_money.sub("", _as_text(value)).replace(",", ".", 1)
    try:
        return float(limpo)
    except ValueError:
        if limpo:
            logger.debug("Não foi possível converter valor monetário: %r", value)
        return 0


# Aliases usados pelos formulários mais antigos
mask_input_currency = mask_currency
unmask_money = unmask_currency
