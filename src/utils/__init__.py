"""
Módulo de utilitários do painel da oficina.
"""
from src.utils.masks import (
    only_digits,
    mask_phone,
    mask_cpf_cnpj,
    mask_plate,
    format_money,
    mask_currency,
    mask_input_currency,
    unmask_currency,
    unmask_money,
)

__all__ = [
    "only_digits",
    "mask_phone",
    "mask_cpf_cnpj",
    "mask_plate",
    "format_money",
    "mask_currency",
    "mask_input_currency",
    "unmask_currency",
    "unmask_money",
]
