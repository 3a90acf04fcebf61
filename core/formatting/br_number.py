# ===============================
# core/formatting/br_number.py
# ===============================

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional

# precisão suficiente para qualquer float finito
_DECIMAL_CONTEXT = Context(prec=400)

# prefixo numérico aceito (mesma regra do parseFloat do navegador)
_NUMERIC_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def _parse_float_prefix(text: str) -> float:
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    token = match.group(1).replace("Infinity", "inf")
    value = float(token)
    if math.isnan(value):
        return 0.0
    return value


def parse_locale_number(text: Optional[str]) -> float:
    """
    Converte um texto no padrão brasileiro em float.

    "." é separador de milhar e "," é separador decimal:
        "1.234,56" -> 1234.56
    Texto vazio ou inválido retorna 0.0.
    """
    if not text:
        return 0.0
    normalized = text.replace(".", "").replace(",", ".", 1)
    return _parse_float_prefix(normalized)


def _to_br(formatted: str) -> str:
    # "1,234.56" -> "1.234,56"
    return formatted.replace(",", "X").replace(".", ",").replace("X", ".")


def format_number_br(value: float, min_fraction: int = 2, max_fraction: int = 2) -> str:
    """
    Formata um float com agrupamento pt-BR.

    Arredonda meio-para-cima em max_fraction casas e remove zeros finais
    até sobrarem min_fraction casas.
    """
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    quantum = Decimal(1).scaleb(-max_fraction)
    rounded = Decimal(repr(value)).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    if rounded == 0:
        rounded = abs(rounded)

    formatted = f"{rounded:,.{max_fraction}f}"
    if max_fraction > min_fraction:
        int_part, frac_part = formatted.split(".")
        frac_part = frac_part.rstrip("0").ljust(min_fraction, "0")
        formatted = f"{int_part}.{frac_part}" if frac_part else int_part

    return _to_br(formatted)


def format_locale_number(text: Optional[str]) -> str:
    """
    Normaliza o texto digitado num campo de moeda (ao perder o foco).

    "1234,5" -> "1.234,50";  "" -> ""
    """
    if not text:
        return ""
    return format_number_br(parse_locale_number(text), 2, 2)


def format_brl(value: float, min_fraction: int = 2, max_fraction: int = 3) -> str:
    """Valor para exibição: R$ 4.500,00"""
    return f"R$ {format_number_br(value, min_fraction, max_fraction)}"

# ===== end br_number.py =====
