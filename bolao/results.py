from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Optional

import requests

from .config import URL_RESULTADO_ALTERNATIVA, URL_RESULTADO_CAIXA, LotterySpec
from .http_client import CAIXA_HEADERS, get_json
from .models import DrawResult, MatchResult

logger = logging.getLogger(__name__)

class ResultadoIndisponivelError(RuntimeError):
    pass

def _parse_alternativa(data: dict[str, Any], concurso: int) -> Optional[DrawResult]:
    dezenas = data.get("dezenas")
    if not dezenas:
        return None
    return DrawResult(
        concurso=int(data.get("concurso") or concurso),
        data_apuracao=data.get("data"),
        dezenas=sorted(int(d) for d in dezenas),
        acumulado=bool(data.get("acumulou", False)),
        valor_acumulado=float(data.get("acumuladaProxConcurso") or 0.0),
    )

def _parse_caixa(data: dict[str, Any], concurso: int) -> Optional[DrawResult]:
    dezenas = data.get("listaDezenas")
    if not dezenas:
        return None
    return DrawResult(
        concurso=int(data.get("numero") or concurso),
        data_apuracao=data.get("dataApuracao"),
        dezenas=sorted(int(d) for d in dezenas),
        acumulado=bool(data.get("acumulado", False)),
        valor_acumulado=float(data.get("valorAcumuladoProximoConcurso") or 0.0),
    )

def _get_json(url: str, headers: Optional[dict[str, str]] = None) -> Optional[dict[str, Any]]:
    try:
        return get_json(url, headers=headers)
    except (requests.RequestException, ValueError) as e:
        logger.warning("Falha ao consultar %s: %s", url, e)
        return None

def buscar_resultado(concurso: int, spec: LotterySpec) -> DrawResult:
    """
    Busca o resultado oficial de um concurso.
    Tenta primeiro a API comunitária e depois a API da Caixa.
    """
    if concurso <= 0:
        raise ValueError("Número do concurso inválido.")

    url_alt = URL_RESULTADO_ALTERNATIVA.format(slug=spec.slug, concurso=concurso)
    data = _get_json(url_alt)
    resultado = _parse_alternativa(data, concurso) if data else None

    if resultado is None:
        url_caixa = URL_RESULTADO_CAIXA.format(slug_caixa=spec.slug.replace("-", ""), concurso=concurso)
        data = _get_json(url_caixa, headers=CAIXA_HEADERS)
        resultado = _parse_caixa(data, concurso) if data else None

    if resultado is None:
        raise ResultadoIndisponivelError(
            f"Não foi possível buscar o resultado do concurso {concurso}. Tente novamente em alguns minutos."
        )

    logger.info("Concurso %d: dezenas sorteadas %s", resultado.concurso, resultado.dezenas)
    return resultado

def conferir_jogos(jogos: Iterable[tuple[str, Iterable[int]]], dezenas_sorteadas: Iterable[int]) -> list[MatchResult]:
    """`jogos` é uma sequência de pares (identificador, dezenas)."""
    sorteadas = set(int(d) for d in dezenas_sorteadas)
    out: list[MatchResult] = []
    for jogo_id, dezenas in jogos:
        d = sorted(int(x) for x in dezenas)
        out.append(MatchResult(jogo_id=str(jogo_id), dezenas=d, acertos=[x for x in d if x in sorteadas]))
    return out

# nomes das faixas da Mega-Sena; as demais usam "N acertos"
NOMES_FAIXA: dict[int, tuple[str, str]] = {
    6: ("Sena", "Senas"),
    5: ("Quina", "Quinas"),
    4: ("Quadra", "Quadras"),
    3: ("Terno", "Ternos"),
}

def faixas_acertos(spec: LotterySpec) -> list[int]:
    """Do acerto máximo até uma faixa abaixo do mínimo premiado (6, 5, 4, 3 na Mega-Sena)."""
    return list(range(spec.n_dezenas_sorteio, spec.min_acertos_premio - 2, -1))

def rotulo_faixa(acertos: int) -> str:
    return NOMES_FAIXA[acertos][1] if acertos in NOMES_FAIXA else f"{acertos} acertos"

def _descrever_faixa(acertos: int, quantidade: int) -> str:
    if acertos in NOMES_FAIXA:
        singular, plural = NOMES_FAIXA[acertos]
        return f"{quantidade} {singular if quantidade == 1 else plural}"
    return f"{quantidade} {'jogo' if quantidade == 1 else 'jogos'} com {acertos} acertos"

def resumo_conferencia(
    resultados: list[MatchResult],
    minimo_premio: int = 4,
    faixas: Optional[Iterable[int]] = None,
) -> dict[str, Any]:
    """
    `por_acertos` conta quantos jogos caíram em cada faixa, da maior para a menor.
    Sem `faixas`, usa as da Mega-Sena a partir de `minimo_premio - 1`.
    """
    faixas = list(faixas) if faixas is not None else list(range(6, minimo_premio - 2, -1))
    contagem = Counter(r.quantidade_acertos for r in resultados)
    return {
        "total_jogos_verificados": len(resultados),
        "maior_quantidade_acertos": max((r.quantidade_acertos for r in resultados), default=0),
        "jogos_com_premio": sum(1 for r in resultados if r.quantidade_acertos >= minimo_premio),
        "por_acertos": {k: contagem.get(k, 0) for k in faixas},
    }

def mensagem_premios(resumo: dict[str, Any], minimo_premio: int = 4) -> str:
    partes = [
        _descrever_faixa(k, n)
        for k, n in resumo["por_acertos"].items()
        if k >= minimo_premio and n > 0
    ]
    return ", ".join(partes) if partes else "0 prêmios"
