from __future__ import annotations

from datetime import datetime

import streamlit as st

from bolao.analytics import analisar_numeros, categoria_disponivel
from bolao.config import ROTULOS_CATEGORIA, Modalidade, get_spec
from bolao.domain_lottery import formatar_jogo
from bolao.games_export import puladas_to_df, sugestoes_to_df
from bolao.models import GameSelection
from bolao.reports import df_to_csv_bytes, df_to_json_bytes, relatorio_md_bytes
from bolao.service import gerar_relatorio_sugestoes, orcamento_disponivel, sugerir_jogo_avulso
from bolao.state import (
    clear_jogos_salvos,
    get_apostas,
    get_jogos_salvos,
    get_relatorio,
    init_state,
    salvar_jogos,
    set_relatorio,
)
from bolao.ui import money_ptbr

st.set_page_config(page_title="Sugestões", page_icon="🎲", layout="wide")
init_state()

st.title("Sugestões de jogos")

modalidade: Modalidade = st.sidebar.radio("Modalidade", ["Mega-Sena", "Lotofácil"])
spec = get_spec(modalidade)

apostas = get_apostas(modalidade)
if not apostas:
    st.info("Registre as apostas na página inicial.")
    st.stop()

total = st.sidebar.number_input("Total arrecadado (R$)", min_value=0.0, max_value=10_000_000.0, value=0.0, step=10.0)

salvos = get_jogos_salvos(modalidade)
comprometido = sum(j.custo for j in salvos)
disponivel = orcamento_disponivel(total, apostas, spec, comprometido)

m1, m2, m3 = st.columns(3)
m1.metric("Arrecadado", money_ptbr(total))
m2.metric("Jogos já salvos", f"{len(salvos)} ({money_ptbr(comprometido)})")
m3.metric("Saldo disponível", money_ptbr(disponivel))

with st.sidebar.expander("Jogos salvos", expanded=False):
    if st.button("Limpar jogos salvos"):
        clear_jogos_salvos(modalidade)
        st.rerun()

analise = analisar_numeros(apostas, spec.n_universo)

tab_auto, tab_sel, tab_custom = st.tabs(["Automático", "Por seleção", "Jogo avulso"])

with tab_auto:
    st.caption("Gasta o saldo com jogos de mais/menos votados, não votados e mistos, sem repetir combinações.")
    if st.button("Gerar automaticamente", type="primary"):
        try:
            rel = gerar_relatorio_sugestoes(apostas, spec, total, jogos_existentes=salvos)
        except ValueError as e:
            st.error(str(e))
            st.stop()
        set_relatorio(modalidade, rel)

with tab_sel:
    st.caption("Escolha quantos jogos de cada tamanho e critério.")
    precos = spec.precos_sugestao
    selecoes: list[GameSelection] = []
    for tamanho, preco in sorted(precos.items(), reverse=True):
        cols = st.columns(5)
        cols[0].markdown(f"**{tamanho} dezenas**  \n{money_ptbr(preco)}")
        for col, categoria in zip(cols[1:], ROTULOS_CATEGORIA):
            qtd = col.number_input(
                ROTULOS_CATEGORIA[categoria],
                min_value=0,
                max_value=20,
                value=0,
                step=1,
                key=f"sel_{tamanho}_{categoria}",
                disabled=not categoria_disponivel(analise, categoria, tamanho),
            )
            if qtd:
                selecoes.append(GameSelection(tamanho=tamanho, categoria=categoria, quantidade=int(qtd)))

    custo_sel = sum(precos[s.tamanho] * s.quantidade for s in selecoes)
    st.caption(f"Selecionado: {money_ptbr(custo_sel)} de {money_ptbr(disponivel)}")
    if custo_sel > disponivel:
        st.warning("A seleção ultrapassa o saldo disponível; os jogos excedentes serão pulados.")

    if st.button("Gerar seleção", disabled=not selecoes):
        try:
            rel = gerar_relatorio_sugestoes(apostas, spec, total, jogos_existentes=salvos, selecoes=selecoes)
        except ValueError as e:
            st.error(str(e))
            st.stop()
        set_relatorio(modalidade, rel)

with tab_custom:
    chave_avulso = f"jogo_avulso_{spec.slug}"
    c1, c2 = st.columns(2)
    tamanho = c1.selectbox("Dezenas", options=list(spec.precos_sugestao), key=f"avulso_tam_{spec.slug}")
    categoria = c2.selectbox("Critério", options=list(ROTULOS_CATEGORIA), format_func=ROTULOS_CATEGORIA.get)
    if st.button("Gerar jogo avulso"):
        jogo, erro = sugerir_jogo_avulso(
            apostas,
            spec,
            int(tamanho),
            categoria,
            jogos_existentes=salvos,
            orcamento=disponivel,
            semente=len(salvos),
        )
        st.session_state[chave_avulso] = jogo
        if jogo is None:
            st.error(erro)

    jogo = st.session_state.get(chave_avulso)
    if jogo is not None:
        st.code(f"{jogo.tipo} - {formatar_jogo(jogo.dezenas)} - {money_ptbr(jogo.custo)}")
        if st.button("Salvar jogo avulso"):
            salvar_jogos(modalidade, [jogo])
            st.session_state[chave_avulso] = None
            st.rerun()

rel = get_relatorio(modalidade)
st.divider()
if rel is None:
    st.info("Gere sugestões para exibir.")
    st.stop()

st.subheader(f"Jogos sugeridos ({len(rel.sugestoes)})")
for s in rel.sugestoes:
    st.code(f"{s.tipo} | {ROTULOS_CATEGORIA[s.categoria]} | {formatar_jogo(s.dezenas)} | {money_ptbr(s.custo)}")
    st.caption(s.motivo)

if rel.puladas:
    with st.expander(f"Combinações sem saldo ({len(rel.puladas)})"):
        st.dataframe(puladas_to_df(rel.puladas), width="stretch")

if rel.sugestoes and st.button("Salvar todas as sugestões", type="primary"):
    salvar_jogos(modalidade, rel.sugestoes)
    set_relatorio(modalidade, None)
    st.toast("Sugestões salvas", icon="💾")
    st.rerun()

df_out = sugestoes_to_df(rel.sugestoes)
d1, d2, d3 = st.columns(3)
d1.download_button(
    "CSV",
    data=df_to_csv_bytes(df_out),
    file_name=f"sugestoes_{spec.slug}_{datetime.now().date()}.csv",
    mime="text/csv",
)
d2.download_button(
    "JSON",
    data=df_to_json_bytes(df_out),
    file_name=f"sugestoes_{spec.slug}_{datetime.now().date()}.json",
    mime="application/json",
)
d3.download_button(
    "Relatório (MD)",
    data=relatorio_md_bytes(rel),
    file_name=f"sugestoes_{spec.slug}_{datetime.now().date()}.md",
    mime="text/markdown",
)
