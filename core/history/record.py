# ================================
# core/history/record.py
# ================================

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ValuationRecord:
    """
    Um valuation calculado no histórico.

    ・date  : data do cálculo
    ・value : valor da empresa (R$)

    O histórico guarda no máximo um registro por mês (ano + mês),
    ver month_key().
    """

    date: date
    value: float

    @property
    def month_key(self) -> str:
        return month_key(self.date)


def month_key(d: date) -> str:
    # "AAAA-MM"
    return d.isoformat()[:7]

# ================================
# END record.py
# ================================
