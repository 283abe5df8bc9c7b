from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

import numpy as np

from .analytics import pool_categoria
from .config import MAX_TENTATIVAS_PERSONALIZADO, ROTULOS_CATEGORIA, SEMENTE_PADRAO
from .domain_lottery import chave_jogo, rotulo_tipo
from .models import NumberAnalysis, SuggestedGame
from .ui import money_ptbr

logger = logging.getLogger(__name__)

def _rotacionar(pool: list[int], deslocamento: int) -> list[int]:
    if not pool:
        return []
    k = deslocamento % len(pool)
    return pool[k:] + pool[:k]

def _misto_rotativo(mais: list[int], menos: list[int], tamanho: int, deslocamento: int) -> list[int]:
    mais_rot = _rotacionar(mais, deslocamento)
    metade = math.ceil(tamanho / 2)
    escolhidas = mais_rot[:metade]
    for d in _rotacionar(menos, deslocamento) + mais_rot[metade:]:
        if len(escolhidas) == tamanho:
            break
        if d not in escolhidas:
            escolhidas.append(d)
    return escolhidas

def _pools(analise: NumberAnalysis, categoria: str, usadas: set[int]) -> tuple[list[int], list[int]]:
    if categoria == "mixed":
        mais = [d for d in analise.dezenas_mais_votadas if d not in usadas]
        menos = [d for d in analise.dezenas_menos_votadas if d not in usadas]
        return mais, menos
    return [d for d in pool_categoria(analise, categoria) if d not in usadas], []

def _preco(precos: Optional[dict[int, float]], tamanho: int) -> float:
    if not precos or tamanho not in precos:
        raise ValueError(f"Sem preço para jogos de {tamanho} dezenas.")
    return float(precos[tamanho])

def tamanho_pool(analise: NumberAnalysis, categoria: str, dezenas_usadas: Iterable[int] = ()) -> int:
    principal, extra = _pools(analise, categoria, set(dezenas_usadas))
    return len(set(principal) | set(extra))

def gerar_jogo_personalizado(
    tamanho: int,
    categoria: str,
    analise: NumberAnalysis,
    chaves_existentes: Iterable[str],
    dezenas_usadas: Iterable[int] = (),
    precos: Optional[dict[int, float]] = None,
    orcamento: Optional[float] = None,
    semente: Optional[int] = None,
) -> Optional[SuggestedGame]:
    """
    Gera um único jogo sob demanda.

    Tenta até MAX_TENTATIVAS_PERSONALIZADO combinações, deslocando o início da
    janela em `tentativa * (tamanho // 2)` posições. Para não votados, o pool é
    embaralhado a cada tentativa com um gerador semeado.
    Sem preço para `tamanho` em `precos`, levanta ValueError.
    """
    preco = _preco(precos, tamanho)
    if orcamento is not None and preco > orcamento:
        return None

    existentes = set(chaves_existentes)
    principal, extra = _pools(analise, categoria, set(dezenas_usadas))
    if len(set(principal) | set(extra)) < tamanho:
        return None

    rng = np.random.default_rng(SEMENTE_PADRAO if semente is None else semente)
    passo = max(1, tamanho // 2)

    for tentativa in range(MAX_TENTATIVAS_PERSONALIZADO):
        deslocamento = tentativa * passo
        if categoria == "not_voted":
            candidato = [int(d) for d in rng.permutation(principal)[:tamanho]]
        elif categoria == "mixed":
            candidato = _misto_rotativo(principal, extra, tamanho, deslocamento)
        else:
            candidato = _rotacionar(principal, deslocamento)[:tamanho]

        chave = chave_jogo(candidato)
        if chave in existentes:
            continue

        logger.debug("Jogo personalizado %s/%d encontrado na tentativa %d", categoria, tamanho, tentativa + 1)
        return SuggestedGame(
            jogo_id=f"personalizado-{categoria}-{chave.replace(',', '-')}",
            dezenas=sorted(candidato),
            custo=preco,
            tipo=rotulo_tipo(tamanho),
            motivo=f"Jogo personalizado ({ROTULOS_CATEGORIA[categoria]}), tentativa {tentativa + 1}",
            categoria=categoria,
        )

    logger.info("Nenhuma combinação única para %s/%d após %d tentativas", categoria, tamanho, MAX_TENTATIVAS_PERSONALIZADO)
    return None

def sugerir_jogo_personalizado(
    tamanho: int,
    categoria: str,
    analise: NumberAnalysis,
    chaves_existentes: Iterable[str],
    dezenas_usadas: Iterable[int] = (),
    precos: Optional[dict[int, float]] = None,
    orcamento: Optional[float] = None,
    semente: Optional[int] = None,
) -> tuple[Optional[SuggestedGame], Optional[str]]:
    """Mesmo que `gerar_jogo_personalizado`, mas devolve também o motivo da falha."""
    preco = _preco(precos, tamanho)
    if orcamento is not None and preco > orcamento:
        return None, f"Saldo insuficiente: o jogo custa {money_ptbr(preco)} e restam {money_ptbr(orcamento)}."

    usadas = list(dezenas_usadas)
    if tamanho_pool(analise, categoria, usadas) < tamanho:
        return None, f"Não há dezenas suficientes em '{ROTULOS_CATEGORIA[categoria]}' para um jogo de {tamanho} dezenas."

    jogo = gerar_jogo_personalizado(
        tamanho, categoria, analise, chaves_existentes, usadas, precos=precos, orcamento=orcamento, semente=semente
    )
    if jogo is None:
        return None, "Não foi possível gerar um jogo único com esses critérios."
    return jogo, None
