from __future__ import annotations

import streamlit as st

from bolao.config import Modalidade, get_spec
from bolao.domain_lottery import formatar_jogo
from bolao.games_export import conferencia_to_df
from bolao.reports import df_to_csv_bytes
from bolao.results import (
    ResultadoIndisponivelError,
    buscar_resultado,
    conferir_jogos,
    faixas_acertos,
    mensagem_premios,
    resumo_conferencia,
    rotulo_faixa,
)
from bolao.state import get_apostas, get_jogos_salvos, init_state
from bolao.ui import money_ptbr, parse_lista
from bolao.validation import validar_sorteio

st.set_page_config(page_title="Conferir resultado", page_icon="🎯", layout="wide")
init_state()

st.title("Conferir resultado")

modalidade: Modalidade = st.sidebar.radio("Modalidade", ["Mega-Sena", "Lotofácil"])
spec = get_spec(modalidade)

apostas = get_apostas(modalidade)
salvos = get_jogos_salvos(modalidade)
if not apostas and not salvos:
    st.info("Nenhuma aposta ou jogo salvo para conferir.")
    st.stop()

c1, c2 = st.columns(2)
concurso = c1.number_input("Concurso", min_value=1, value=1, step=1)
manual = c2.text_input("Ou informe as dezenas sorteadas", placeholder="Ex: 04 12 23 34 45 56")

dezenas_sorteadas: list[int] | None = None
if st.button("Conferir", type="primary"):
    if manual.strip():
        try:
            dezenas_sorteadas = validar_sorteio(parse_lista(manual), spec)
        except ValueError as e:
            st.error(str(e))
            st.stop()
    else:
        with st.spinner("Buscando resultado oficial..."):
            try:
                resultado = buscar_resultado(int(concurso), spec)
            except ResultadoIndisponivelError as e:
                st.error(str(e))
                st.stop()
        dezenas_sorteadas = resultado.dezenas
        st.caption(f"Apuração: {resultado.data_apuracao or '-'}")
        if resultado.acumulado:
            st.warning(f"Acumulou! Próximo concurso: {money_ptbr(resultado.valor_acumulado)}")

if dezenas_sorteadas is None:
    st.stop()

st.subheader(f"Dezenas sorteadas: {formatar_jogo(dezenas_sorteadas)}")

jogos = [(a.apelido, a.dezenas) for a in apostas] + [(j.jogo_id, j.dezenas) for j in salvos]
resultados = conferir_jogos(jogos, dezenas_sorteadas)
resumo = resumo_conferencia(resultados, minimo_premio=spec.min_acertos_premio, faixas=faixas_acertos(spec))

m1, m2, m3 = st.columns(3)
m1.metric("Jogos conferidos", resumo["total_jogos_verificados"])
m2.metric("Maior acerto", resumo["maior_quantidade_acertos"])
m3.metric(f"Com {spec.min_acertos_premio}+ acertos", resumo["jogos_com_premio"])

faixas = resumo["por_acertos"]
for col, (acertos, qtd) in zip(st.columns(len(faixas)), faixas.items()):
    col.metric(rotulo_faixa(acertos), qtd)

msg = f"Resultado: {mensagem_premios(resumo, spec.min_acertos_premio)}"
if resumo["jogos_com_premio"]:
    st.success(msg, icon="🏆")
else:
    st.info(msg)

df = conferencia_to_df(resultados)
st.dataframe(df, width="stretch")
st.download_button("Baixar conferência (CSV)", data=df_to_csv_bytes(df), file_name=f"conferencia_{spec.slug}.csv", mime="text/csv")
