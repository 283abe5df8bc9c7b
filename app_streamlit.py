import logging
import sys

import streamlit as st

from bolao.analytics import analisar_numeros
from bolao.config import LOG_LEVEL, Modalidade, get_spec
from bolao.games_export import ranking_to_df
from bolao.reports import df_to_csv_bytes
from bolao.state import get_apostas, init_state, set_apostas
from bolao.ui import money_ptbr, parse_apostas
from bolao.validation import validar_apostas

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

st.set_page_config(page_title="Bolão Helper", page_icon="🍀", layout="wide")

init_state()

st.title("Bolão Helper")
st.caption("Registre as apostas do bolão, veja o ranking das dezenas e gere jogos extras com o saldo.")

modalidade: Modalidade = st.radio("Modalidade", ["Mega-Sena", "Lotofácil"], horizontal=True)
spec = get_spec(modalidade)

st.subheader("Apostas dos participantes")
texto = st.text_area(
    "Uma aposta por linha",
    placeholder=f"Ana: {' '.join(f'{d:02d}' for d in range(1, spec.n_min + 1))}",
    height=200,
)

if st.button("Registrar apostas", type="primary"):
    try:
        apostas = validar_apostas(parse_apostas(texto), spec)
    except ValueError as e:
        st.error(str(e))
        st.stop()
    set_apostas(modalidade, apostas)
    st.toast(f"{len(apostas)} apostas registradas", icon="✅")

apostas = get_apostas(modalidade)
if not apostas:
    st.info("Nenhuma aposta registrada ainda.")
    st.stop()

c1, c2, c3 = st.columns(3)
c1.metric("Apostas", len(apostas))
c2.metric("Preço da aposta simples", money_ptbr(spec.preco(spec.n_min)))
c3.metric("Custo dos jogos individuais", money_ptbr(len(apostas) * spec.preco(spec.n_min)))

analise = analisar_numeros(apostas, spec.n_universo)

st.subheader("Análise dos números")
a1, a2, a3 = st.columns(3)
a1.caption("🔥 Mais votados")
a1.write(", ".join(f"{e.dezena:02d} ({e.votos}x)" for e in analise.mais_votados) or "-")
a2.caption("❄️ Menos votados")
a2.write(", ".join(f"{e.dezena:02d} ({e.votos}x)" for e in analise.menos_votados) or "-")
a3.caption("✨ Não votados")
a3.write(", ".join(f"{d:02d}" for d in analise.nao_votados) or "Todos votados")

ranking_df = ranking_to_df(analise)
with st.expander("Ranking completo"):
    st.dataframe(ranking_df, width="stretch")

st.download_button(
    "Baixar ranking (CSV)",
    data=df_to_csv_bytes(ranking_df),
    file_name=f"ranking_{spec.slug}.csv",
    mime="text/csv",
)

st.info("Use as páginas no menu lateral: Sugestões e Conferir resultado.")
