from __future__ import annotations

import streamlit as st

from .config import Modalidade
from .models import Aposta, BolaoSuggestionReport, SuggestedGame

APOSTAS_KEY = "apostas_by_mod"
SALVOS_KEY = "jogos_salvos_by_mod"  # list[SuggestedGame]
RELATORIO_KEY = "relatorio_by_mod"

def init_state() -> None:
    st.session_state.setdefault(APOSTAS_KEY, {})
    st.session_state.setdefault(SALVOS_KEY, {})
    st.session_state.setdefault(RELATORIO_KEY, {})

def get_apostas(mod: Modalidade) -> list[Aposta]:
    return st.session_state[APOSTAS_KEY].get(mod, [])

def set_apostas(mod: Modalidade, apostas: list[Aposta]) -> None:
    st.session_state[APOSTAS_KEY][mod] = apostas
    # ranking muda: relatório anterior não vale mais
    st.session_state[RELATORIO_KEY].pop(mod, None)

def get_jogos_salvos(mod: Modalidade) -> list[SuggestedGame]:
    return st.session_state[SALVOS_KEY].get(mod, [])

def salvar_jogos(mod: Modalidade, jogos: list[SuggestedGame]) -> None:
    atuais = get_jogos_salvos(mod)
    chaves = {j.chave for j in atuais}
    st.session_state[SALVOS_KEY][mod] = atuais + [j for j in jogos if j.chave not in chaves]

def clear_jogos_salvos(mod: Modalidade) -> None:
    st.session_state[SALVOS_KEY].pop(mod, None)

def get_relatorio(mod: Modalidade) -> BolaoSuggestionReport | None:
    return st.session_state[RELATORIO_KEY].get(mod)

def set_relatorio(mod: Modalidade, relatorio: BolaoSuggestionReport | None) -> None:
    st.session_state[RELATORIO_KEY][mod] = relatorio
