# ===============================
# core/history/analysis.py
# ===============================

import numpy as np
import pandas as pd


def build_evolution(history_df: pd.DataFrame) -> pd.DataFrame:
    """
    Evolução mês a mês do valuation (para gráfico e análise).

    Recebe o DataFrame de ValuationHistory.get_df() (colunas date, value).

    Colunas:
      month      : "AAAA-MM"
      value      : valuation do mês
      change     : diferença para o mês anterior
      change_pct : variação relativa (NaN na 1ª linha ou se o anterior é 0)
    """
    if history_df.empty:
        return pd.DataFrame(columns=["month", "value", "change", "change_pct"])

    df = history_df.copy()
    df["date"] = pd.to_datetime(df["date"])
    df["value"] = df["value"].astype(float)
    df = df.sort_values("date").reset_index(drop=True)
    df["month"] = df["date"].dt.strftime("%Y-%m")

    previous = df["value"].shift(1)
    df["change"] = df["value"] - previous
    df["change_pct"] = np.where(
        previous.fillna(0) != 0,
        df["change"] / previous.replace(0, np.nan),
        np.nan,
    )

    return df[["month", "value", "change", "change_pct"]]
