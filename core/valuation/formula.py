# ===============================
# core/valuation/formula.py
# ===============================

from config.params import (
    SEMIANNUAL_TO_ANNUAL_FACTOR,
    REVENUE_WEIGHT,
    REVENUE_MULTIPLE,
    MSG_INVALID_INPUT,
    ValuationInputs,
)


class InvalidInputError(ValueError):
    """Entrada inválida: faturamento <= 0, valor negativo ou data ausente."""

    def __init__(self, message: str = MSG_INVALID_INPUT):
        super().__init__(message)
        self.message = message


def validate_inputs(inputs: ValuationInputs) -> None:
    """
    Faturamento precisa ser > 0; investimentos, caixa e imobilizado >= 0;
    a data é obrigatória.
    """
    if (
        inputs.revenue <= 0
        or inputs.investment < 0
        or inputs.cash < 0
        or inputs.fixed_assets < 0
        or not inputs.calc_date
    ):
        raise InvalidInputError()


def compute_valuation(
    revenue: float,
    investment: float,
    cash: float,
    fixed_assets: float,
) -> float:
    # -------------------------------------------------
    # faturamento semestral -> anual -> ponderado -> múltiplo
    # -------------------------------------------------
    semiannual_to_annual = revenue * SEMIANNUAL_TO_ANNUAL_FACTOR
    weighted_revenue = semiannual_to_annual * REVENUE_WEIGHT
    base_valuation = weighted_revenue * REVENUE_MULTIPLE

    return base_valuation + investment + cash + fixed_assets


def compute_valuation_for(inputs: ValuationInputs) -> float:
    validate_inputs(inputs)
    return compute_valuation(
        inputs.revenue,
        inputs.investment,
        inputs.cash,
        inputs.fixed_assets,
    )

# ===== end formula.py =====
