# ===============================
# core/app/controller.py
# ===============================

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from config.params import MSG_HISTORY_CLEARED, ValuationInputs
from core.formatting.br_number import parse_locale_number
from core.history.ledger import ValuationHistory
from core.history.store import HistoryStore
from core.valuation.formula import InvalidInputError, compute_valuation_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    ok: bool
    message: str = ""
    valuation: Optional[float] = None


class ValuationController:
    """
    Estado da página: histórico + último valuation + mensagem.

    O histórico é carregado explicitamente (load) na criação e gravado
    (save) após cada alteração: calculate() com sucesso e clear().
    Entrada inválida não altera nada nem grava.
    """

    def __init__(self, store: HistoryStore):
        self.store = store
        self.history = ValuationHistory()
        self.last_valuation: Optional[float] = None
        self.message: str = ""
        self.message_ok: bool = True
        self.load()

    # -------------------------------------------------
    # persistência
    # -------------------------------------------------
    def load(self) -> None:
        self.history = ValuationHistory(self.store.load())

    # -------------------------------------------------
    # ações da página
    # -------------------------------------------------
    def calculate(
        self,
        revenue_text: str,
        investment_text: str,
        cash_text: str,
        fixed_assets_text: str,
        calc_date: Optional[date],
    ) -> CalculationOutcome:
        inputs = ValuationInputs(
            revenue=parse_locale_number(revenue_text),
            investment=parse_locale_number(investment_text),
            cash=parse_locale_number(cash_text),
            fixed_assets=parse_locale_number(fixed_assets_text),
            calc_date=calc_date,
        )

        try:
            valuation = compute_valuation_for(inputs)
        except InvalidInputError as e:
            logger.info("Rejected valuation input: %s", inputs)
            self.message = e.message
            self.message_ok = False
            return CalculationOutcome(ok=False, message=e.message)

        # grava antes de alterar o estado em memória
        updated = ValuationHistory(self.history.records)
        updated.add(inputs.calc_date, valuation)
        self.store.save(updated.records)

        self.history = updated
        self.last_valuation = valuation
        self.message = ""
        self.message_ok = True

        logger.info("Valuation for %s: %.2f", inputs.calc_date, valuation)
        return CalculationOutcome(ok=True, valuation=valuation)

    def clear(self) -> CalculationOutcome:
        updated = ValuationHistory(self.history.records)
        updated.clear()
        self.store.save(updated.records)

        self.history = updated
        self.message = MSG_HISTORY_CLEARED
        self.message_ok = True

        logger.info("History cleared")
        return CalculationOutcome(ok=True, message=MSG_HISTORY_CLEARED)

# ===============================
# END controller.py
# ===============================
