# ===============================
# core/history/ledger.py
# ===============================

import logging
from datetime import date, datetime
from typing import Iterable, Iterator, List

import pandas as pd

from core.history.record import ValuationRecord, month_key

logger = logging.getLogger(__name__)


def record_valuation(
    history: Iterable[ValuationRecord],
    calc_date: date,
    value: float,
) -> List[ValuationRecord]:
    """
    Retorna um novo histórico com o valuation de calc_date.

    Remove o registro do mesmo mês (se houver) e acrescenta o novo no fim.
    A ordem dos demais registros é mantida; a lista recebida não é alterada.
    """
    if isinstance(calc_date, datetime):
        # só a data; a hora não é persistida
        calc_date = calc_date.date()

    target = month_key(calc_date)
    updated = [r for r in history if r.month_key != target]
    updated.append(ValuationRecord(date=calc_date, value=value))
    return updated


def clear_history() -> List[ValuationRecord]:
    return []


class ValuationHistory:
    """
    ValuationHistory
    ----------------
    ・guarda os ValuationRecord em ordem de inserção
    ・um registro por mês (record_valuation)
    ・exporta como DataFrame para exibição
    """

    def __init__(self, records: Iterable[ValuationRecord] = ()):
        self.records: List[ValuationRecord] = list(records)

    # -------------------------------------------------
    # inclusão / limpeza
    # -------------------------------------------------
    def add(self, calc_date: date, value: float) -> ValuationRecord:
        if not isinstance(calc_date, date):
            raise TypeError(
                f"ValuationHistory.add expects date, got {type(calc_date)}"
            )

        before = len(self.records)
        self.records = record_valuation(self.records, calc_date, value)
        if len(self.records) == before:
            logger.info("Replaced valuation for month %s", month_key(calc_date))

        return self.records[-1]

    def clear(self) -> None:
        self.records = clear_history()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ValuationRecord]:
        return iter(self.records)

    # -------------------------------------------------
    # histórico -> DataFrame
    # -------------------------------------------------
    def get_df(self) -> pd.DataFrame:
        if not self.records:
            return pd.DataFrame(columns=["date", "value"])

        rows = [{"date": r.date, "value": r.value} for r in self.records]
        return pd.DataFrame(rows)

# ===============================
# END ledger.py
# ===============================
