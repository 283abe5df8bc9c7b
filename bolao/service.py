from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .analytics import analisar_numeros
from .config import LotterySpec
from .custom_game import sugerir_jogo_personalizado
from .domain_lottery import chave_jogo, custo_total
from .models import Aposta, BolaoSuggestionReport, SuggestedGame
from .suggestions import gerar_por_selecoes, gerar_sugestoes
from .ui import money_ptbr
from .validation import (
    normalizar_categoria,
    validar_apostas,
    validar_jogos,
    validar_precos,
    validar_selecoes,
)

logger = logging.getLogger(__name__)

def custo_jogos_individuais(apostas: list[Aposta], spec: LotterySpec) -> float:
    return round(len(apostas) * spec.preco(spec.n_min), 2)

def orcamento_disponivel(
    total_arrecadado: float,
    apostas: list[Aposta],
    spec: LotterySpec,
    custo_comprometido: float = 0.0,
) -> float:
    return round(float(total_arrecadado) - custo_jogos_individuais(apostas, spec) - float(custo_comprometido), 2)

def _dezenas(jogo: Any) -> list[int]:
    if isinstance(jogo, (SuggestedGame, Aposta)):
        return list(jogo.dezenas)
    return [int(d) for d in jogo]

def chaves_exclusao(apostas: Iterable[Aposta], jogos_existentes: Iterable[Any] = ()) -> set[str]:
    chaves = {chave_jogo(a.dezenas) for a in apostas}
    chaves.update(chave_jogo(_dezenas(j)) for j in jogos_existentes)
    return chaves

def gerar_relatorio_sugestoes(
    apostas: list[Aposta],
    spec: LotterySpec,
    total_arrecadado: float,
    jogos_existentes: Iterable[Any] = (),
    selecoes: Optional[Iterable[Any]] = None,
    precos: Optional[dict] = None,
    cursores: Optional[dict] = None,
) -> BolaoSuggestionReport:
    """
    Ponto de entrada da geração em lote para um bolão.

    `jogos_existentes` são jogos já salvos em rodadas anteriores: entram como
    exclusão e seu custo é abatido do saldo. Com `selecoes`, gera exatamente os
    jogos pedidos; sem elas, usa a geração automática na faixa prática de preços.
    """
    apostas = validar_apostas(apostas, spec)
    existentes = [_dezenas(j) for j in jogos_existentes]
    validar_jogos(existentes, spec)
    tabela = validar_precos(precos or (spec.precos if selecoes else spec.precos_sugestao), spec)

    analise = analisar_numeros(apostas, spec.n_universo)
    custo_individual = custo_jogos_individuais(apostas, spec)
    apos_individuais = round(float(total_arrecadado) - custo_individual, 2)
    comprometido = custo_total(existentes, spec.precos)
    disponivel = orcamento_disponivel(total_arrecadado, apostas, spec, comprometido)
    chaves = chaves_exclusao(apostas, existentes)

    logger.info(
        "%s: %d apostas, arrecadado %s, individuais %s, disponível %s",
        spec.modalidade,
        len(apostas),
        money_ptbr(float(total_arrecadado)),
        money_ptbr(custo_individual),
        money_ptbr(disponivel),
    )

    if selecoes:
        res = gerar_por_selecoes(validar_selecoes(selecoes, tabela), analise, tabela, chaves, orcamento=disponivel)
    else:
        res = gerar_sugestoes(disponivel, analise, tabela, chaves, cursores=cursores)

    return BolaoSuggestionReport(
        analise=analise,
        sugestoes=res.sugestoes,
        puladas=res.puladas,
        custo_jogos_individuais=custo_individual,
        orcamento_apos_individuais=apos_individuais,
        orcamento_disponivel=disponivel,
        cursores=res.cursores,
    )

def sugerir_jogo_avulso(
    apostas: list[Aposta],
    spec: LotterySpec,
    tamanho: int,
    categoria: str,
    jogos_existentes: Iterable[Any] = (),
    dezenas_usadas: Iterable[int] = (),
    orcamento: Optional[float] = None,
    semente: Optional[int] = None,
) -> tuple[Optional[SuggestedGame], Optional[str]]:
    """Caminho ad hoc: um jogo de `tamanho` dezenas na `categoria` pedida."""
    apostas = validar_apostas(apostas, spec)
    categoria = normalizar_categoria(categoria)
    precos = spec.precos
    if tamanho not in precos:
        raise ValueError(f"{spec.modalidade}: jogos aceitam de {spec.n_min} a {spec.n_max} dezenas.")

    analise = analisar_numeros(apostas, spec.n_universo)
    chaves = chaves_exclusao(apostas, jogos_existentes)
    return sugerir_jogo_personalizado(
        tamanho,
        categoria,
        analise,
        chaves,
        dezenas_usadas,
        precos=precos,
        orcamento=orcamento,
        semente=semente,
    )
