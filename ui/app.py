# ============== valuation_stots/ui/app.py ==============

import streamlit as st
import pandas as pd
import logging
import traceback
import sys
import os

# ----------------------------------------------------------------------
# Caminho do projeto
# ----------------------------------------------------------------------
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
if project_root not in sys.path:
    sys.path.append(project_root)

from config.params import StorageParams
from core.app.controller import ValuationController
from core.formatting.br_number import format_brl, format_locale_number
from core.history.analysis import build_evolution
from core.history.store import HistoryStore

logger = logging.getLogger(__name__)

# campos de moeda: (chave no session_state, rótulo)
CURRENCY_FIELDS = [
    ("faturamento", "Faturamento do Semestre (R$)"),
    ("investimentos", "Investimentos Recebidos (R$)"),
    ("caixa", "Caixa Disponível (R$)"),
    ("imobilizado", "Imobilizado (R$)"),
]

# ----------------------------------------------------------------------
# 1. CSS
# ----------------------------------------------------------------------
def inject_global_css():
    st.markdown(
        """
        <style>
        .stots-card {
            background-color: #1e3a8a;
            border: 1px solid #1d4ed8;
            color: #ffffff;
            padding: 14px 18px;
            margin-top: 12px;
            border-radius: 8px;
            text-align: center;
        }
        .stots-label {
            font-size: 1.1rem;
            font-weight: 600;
        }
        .stots-value {
            font-size: 1.4rem;
            font-weight: 800;
            color: #4ade80;
            font-variant-numeric: tabular-nums;
        }
        .stots-history-line {
            padding: 4px 0;
            border-bottom: 1px solid #1d4ed8;
            text-align: center;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )

# ----------------------------------------------------------------------
# 2. Estado da sessão
# ----------------------------------------------------------------------
def get_controller() -> ValuationController:
    if "controller" not in st.session_state:
        store = HistoryStore.from_params(StorageParams())
        st.session_state.controller = ValuationController(store)
    return st.session_state.controller


def normalize_field(key: str):
    # chamado quando o campo perde o foco (on_change)
    st.session_state[key] = format_locale_number(st.session_state.get(key, ""))

# ----------------------------------------------------------------------
# 3. Formulário
# ----------------------------------------------------------------------
def render_form() -> dict:
    calc_date = st.date_input("Data do Cálculo", value=None, format="YYYY-MM-DD")

    values = {}
    for key, label in CURRENCY_FIELDS:
        values[key] = st.text_input(
            label,
            key=key,
            on_change=normalize_field,
            args=(key,),
        )

    values["data"] = calc_date
    return values

# ----------------------------------------------------------------------
# 4. Resultado e histórico
# ----------------------------------------------------------------------
def render_result(controller: ValuationController):
    if controller.message:
        if controller.message_ok:
            st.success(controller.message)
        else:
            st.warning(controller.message)

    if controller.last_valuation is not None:
        st.markdown(
            f"""
            <div class="stots-card">
                <span class="stots-label">Valor da Empresa:</span>
                <span class="stots-value">{format_brl(controller.last_valuation)}</span>
            </div>
            """,
            unsafe_allow_html=True,
        )


def render_history(controller: ValuationController):
    if not len(controller.history):
        return

    st.subheader("Histórico de Valuation")
    for record in controller.history:
        st.markdown(
            f'<div class="stots-history-line">'
            f"{record.date.isoformat()}: {format_brl(record.value)}</div>",
            unsafe_allow_html=True,
        )

    col_l, col_r = st.columns(2)
    with col_l:
        show_chart = st.checkbox("Mostrar gráfico")
    with col_r:
        show_analysis = st.checkbox("Mostrar análise")

    evolution = build_evolution(controller.history.get_df())

    if show_chart:
        st.line_chart(evolution.set_index("month")["value"])

    if show_analysis:
        display_df = pd.DataFrame({
            "Mês": evolution["month"],
            "Valuation": evolution["value"].map(format_brl),
            "Variação": evolution["change"].map(
                lambda v: "" if pd.isna(v) else format_brl(v, 2, 2)
            ),
            "Variação (%)": evolution["change_pct"].map(
                lambda v: "" if pd.isna(v) else f"{v:.1%}".replace(".", ",")
            ),
        })
        st.dataframe(display_df, hide_index=True, use_container_width=True)

# ----------------------------------------------------------------------
# 5. Main
# ----------------------------------------------------------------------
def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title="Valuation Stots", layout="centered")
    inject_global_css()

    st.title("Valuation Stots")
    st.caption(
        "Insira os valores abaixo para calcular e acompanhar a evolução "
        "do valuation do Stots."
    )

    controller = get_controller()
    values = render_form()

    calc_clicked = st.button("Calcular Valuation", type="primary", use_container_width=True)
    clear_clicked = st.button("Limpar Histórico", use_container_width=True)

    try:
        if calc_clicked:
            controller.calculate(
                values["faturamento"],
                values["investimentos"],
                values["caixa"],
                values["imobilizado"],
                values["data"],
            )
        if clear_clicked:
            controller.clear()
    except OSError as e:
        logger.exception("Failed to save valuation history")
        st.error(f"Erro ao salvar o histórico: {e}")
        st.code(traceback.format_exc())

    render_result(controller)
    render_history(controller)


if __name__ == "__main__":
    main()

# ============== valuation_stots/ui/app.py ============== end
