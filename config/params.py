#=========== valuation_stots/config/params.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import datetime


# Constantes da fórmula (regra de negócio, não simplificar para 4.5)
SEMIANNUAL_TO_ANNUAL_FACTOR = 2      # faturamento semestral -> anual
REVENUE_WEIGHT = 0.15                # multiplicador sobre a receita anual
REVENUE_MULTIPLE = 15                # múltiplo aplicado à receita ponderada

# Mensagens exibidas ao usuário
MSG_INVALID_INPUT = (
    "Por favor, insira valores válidos para todos os campos, incluindo a data."
)
MSG_HISTORY_CLEARED = "Histórico apagado com sucesso."

STORAGE_KEY = "historicoValuation"


def default_storage_path() -> Path:
    return Path.home() / ".valuation_stots" / "storage.json"


@dataclass
class StorageParams:
    path: Path = field(default_factory=default_storage_path)
    key: str = STORAGE_KEY


@dataclass
class ValuationInputs:
    # valores já convertidos de texto pt-BR para float
    revenue: float              # faturamento do semestre
    investment: float           # investimentos recebidos
    cash: float                 # caixa disponível
    fixed_assets: float         # imobilizado

    # data do cálculo
    calc_date: Optional[datetime.date] = None

#=========== end params.py
