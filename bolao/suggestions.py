from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import (
    CATEGORIAS_PRIORITARIAS,
    MAX_ITERACOES_PREENCHIMENTO,
    MAX_TENTATIVAS_MISTO,
    ORDEM_CATEGORIAS,
    ROTULOS_CATEGORIA,
)
from .domain_lottery import chave_jogo, eh_subconjunto, preco_mais_barato, rotulo_tipo
from .models import GameSelection, GenerationResult, NumberAnalysis, SkippedGame, SuggestedGame
from .ui import money_ptbr

logger = logging.getLogger(__name__)

CATEGORIAS_SEQUENCIAIS = ("most_voted", "least_voted", "not_voted")


@dataclass
class GenerationState:
    """
    Estado de uma única chamada de geração.

    `cursores` guarda, por categoria sequencial, quantas posições do ranking já
    foram consumidas; `usados_misto` as dezenas já usadas em jogos mistos.
    `chaves_existentes` começa com as assinaturas de apostas e jogos já salvos
    e recebe cada jogo aceito nesta chamada.
    """

    restante: Optional[float]
    chaves_existentes: set[str]
    cursores: dict[str, int] = field(default_factory=lambda: {c: 0 for c in CATEGORIAS_SEQUENCIAIS})
    usados_misto: set[int] = field(default_factory=set)
    jogos_misto: list[list[int]] = field(default_factory=list)
    sugestoes: list[SuggestedGame] = field(default_factory=list)
    puladas: list[SkippedGame] = field(default_factory=list)
    proximo_id: int = 1
    _puladas_vistas: set[tuple[int, str]] = field(default_factory=set)

    @classmethod
    def iniciar(
        cls,
        orcamento: Optional[float],
        chaves_existentes: Iterable[str],
        cursores: Optional[dict] = None,
    ) -> "GenerationState":
        estado = cls(
            restante=None if orcamento is None else round(float(orcamento), 2),
            chaves_existentes=set(chaves_existentes),
        )
        if cursores:
            for cat in CATEGORIAS_SEQUENCIAIS:
                estado.cursores[cat] = int(cursores.get(cat, 0))
            estado.usados_misto = {int(d) for d in cursores.get("mixed", [])}
            estado.proximo_id = int(cursores.get("proximo_id", 1))
        return estado

    def exportar_cursores(self) -> dict:
        out: dict = dict(self.cursores)
        out["mixed"] = sorted(self.usados_misto)
        out["proximo_id"] = self.proximo_id
        return out

    def cabe(self, preco: float) -> bool:
        return self.restante is None or preco <= self.restante

    def sem_saldo(self, mais_barato: float) -> bool:
        return self.restante is not None and self.restante < mais_barato

    def registrar_pulada(self, tamanho: int, categoria: str, preco: float) -> None:
        if (tamanho, categoria) in self._puladas_vistas:
            return
        self._puladas_vistas.add((tamanho, categoria))
        falta = round(preco - (self.restante or 0.0), 2)
        motivo = (
            f"Saldo insuficiente: jogo de {tamanho} dezenas custa {money_ptbr(preco)}, "
            f"restam {money_ptbr(self.restante or 0.0)} (faltam {money_ptbr(falta)})"
        )
        self.puladas.append(SkippedGame(tamanho=tamanho, categoria=categoria, preco=preco, motivo=motivo))
        logger.debug("Pulado %s/%s: %s", tamanho, categoria, motivo)

    def aceitar(self, dezenas: list[int], categoria: str, preco: float, motivo: str) -> Optional[SuggestedGame]:
        dezenas = sorted(int(d) for d in dezenas)
        chave = chave_jogo(dezenas)
        if chave in self.chaves_existentes:
            logger.debug("Descartado jogo duplicado %s (%s)", chave, categoria)
            return None

        jogo = SuggestedGame(
            jogo_id=f"{categoria}-{len(dezenas)}-{self.proximo_id}",
            dezenas=dezenas,
            custo=preco,
            tipo=rotulo_tipo(len(dezenas)),
            motivo=motivo,
            categoria=categoria,
        )
        self.proximo_id += 1
        self.chaves_existentes.add(chave)
        self.sugestoes.append(jogo)
        if self.restante is not None:
            self.restante = round(self.restante - preco, 2)
        return jogo

    def resultado(self) -> GenerationResult:
        return GenerationResult(
            sugestoes=ordenar_sugestoes(self.sugestoes),
            puladas=list(self.puladas),
            cursores=self.exportar_cursores(),
        )


def ordenar_sugestoes(sugestoes: list[SuggestedGame]) -> list[SuggestedGame]:
    return sorted(sugestoes, key=lambda s: (ORDEM_CATEGORIAS.index(s.categoria), -len(s.dezenas)))


def _pool_sequencial(analise: NumberAnalysis, categoria: str) -> list[int]:
    if categoria == "most_voted":
        return analise.dezenas_mais_votadas
    if categoria == "least_voted":
        return analise.dezenas_menos_votadas
    return list(analise.nao_votados)


def candidato_misto(
    analise: NumberAnalysis,
    tamanho: int,
    excluidas: set[int],
    deslocamento: int = 0,
) -> Optional[list[int]]:
    """
    Metade (arredondada para cima) das dezenas vem das mais votadas e o resto das
    menos votadas. Se as menos votadas não bastarem, completa com mais votadas.
    Retorna None quando as duas janelas juntas não têm dezenas suficientes.
    """
    mais = [d for d in analise.dezenas_mais_votadas if d not in excluidas][deslocamento:]
    menos = [d for d in analise.dezenas_menos_votadas if d not in excluidas][deslocamento:]

    metade = math.ceil(tamanho / 2)
    escolhidas = mais[:metade]
    for d in menos + mais[metade:]:
        if len(escolhidas) == tamanho:
            break
        if d not in escolhidas:
            escolhidas.append(d)

    if len(escolhidas) < tamanho:
        return None
    return sorted(escolhidas)


def _tentar_sequencial(
    estado: GenerationState,
    analise: NumberAnalysis,
    categoria: str,
    tamanho: int,
    preco: float,
) -> bool:
    pool = _pool_sequencial(analise, categoria)
    inicio = estado.cursores[categoria]
    if len(pool) - inicio < tamanho:
        return False
    if not estado.cabe(preco):
        estado.registrar_pulada(tamanho, categoria, preco)
        return False

    dezenas = pool[inicio:inicio + tamanho]
    estado.cursores[categoria] = inicio + tamanho
    if categoria == "not_voted":
        motivo = f"{ROTULOS_CATEGORIA[categoria]}: dezenas que nenhum participante escolheu"
    else:
        motivo = f"{ROTULOS_CATEGORIA[categoria]}: posições {inicio + 1} a {inicio + tamanho} do ranking"
    return estado.aceitar(dezenas, categoria, preco, motivo) is not None


def _tentar_misto(estado: GenerationState, analise: NumberAnalysis, tamanho: int, preco: float) -> bool:
    dezenas = candidato_misto(analise, tamanho, estado.usados_misto)
    if dezenas is None:
        return False
    if not estado.cabe(preco):
        estado.registrar_pulada(tamanho, "mixed", preco)
        return False

    estado.usados_misto.update(dezenas)
    metade = math.ceil(tamanho / 2)
    motivo = f"Misto: {metade} dezenas mais votadas e {tamanho - metade} menos votadas"
    return estado.aceitar(dezenas, "mixed", preco, motivo) is not None


def _tentar(estado: GenerationState, analise: NumberAnalysis, categoria: str, tamanho: int, preco: float) -> bool:
    if categoria == "mixed":
        return _tentar_misto(estado, analise, tamanho, preco)
    return _tentar_sequencial(estado, analise, categoria, tamanho, preco)


def gerar_sugestoes(
    orcamento: float,
    analise: NumberAnalysis,
    precos: dict[int, float],
    chaves_existentes: Iterable[str],
    cursores: Optional[dict] = None,
) -> GenerationResult:
    """
    Geração automática: gasta o orçamento sem ultrapassá-lo.

    Fase 1 garante um jogo por tamanho (do maior para o menor) para mais e menos
    votados. Fase 2 repete todas as categorias até o saldo não comprar mais nada,
    uma passada não acrescentar jogos ou o limite de iterações ser atingido.
    """
    estado = GenerationState.iniciar(orcamento, chaves_existentes, cursores)
    if not precos:
        return estado.resultado()

    tamanhos = sorted(precos, reverse=True)
    mais_barato = preco_mais_barato(precos)

    for categoria in CATEGORIAS_PRIORITARIAS:
        for tamanho in tamanhos:
            _tentar(estado, analise, categoria, tamanho, precos[tamanho])

    for iteracao in range(MAX_ITERACOES_PREENCHIMENTO):
        if estado.sem_saldo(mais_barato):
            break
        adicionou = False
        for tamanho in tamanhos:
            for categoria in ORDEM_CATEGORIAS:
                if estado.sem_saldo(mais_barato):
                    break
                if _tentar(estado, analise, categoria, tamanho, precos[tamanho]):
                    adicionou = True
        if not adicionou:
            break

    res = estado.resultado()
    logger.info(
        "Geração automática: %d jogos (%s), %d combinações sem saldo, saldo final %s",
        len(res.sugestoes),
        money_ptbr(res.custo_total),
        len(res.puladas),
        money_ptbr(estado.restante or 0.0),
    )
    return res


def _selecao_topo(estado: GenerationState, analise: NumberAnalysis, categoria: str, tamanho: int, preco: float) -> None:
    pool = _pool_sequencial(analise, categoria)
    if len(pool) < tamanho:
        return
    if not estado.cabe(preco):
        estado.registrar_pulada(tamanho, categoria, preco)
        return

    if categoria == "not_voted":
        motivo = f"{ROTULOS_CATEGORIA[categoria]}: primeiras {tamanho} dezenas sem votos"
    else:
        motivo = f"{ROTULOS_CATEGORIA[categoria]}: top {tamanho} do ranking"
    estado.aceitar(pool[:tamanho], categoria, preco, motivo)


def _selecao_misto(estado: GenerationState, analise: NumberAnalysis, tamanho: int, preco: float) -> None:
    if candidato_misto(analise, tamanho, set()) is None:
        return
    if not estado.cabe(preco):
        estado.registrar_pulada(tamanho, "mixed", preco)
        return

    for tentativa in range(MAX_TENTATIVAS_MISTO):
        dezenas = candidato_misto(analise, tamanho, set(), deslocamento=tentativa)
        if dezenas is None:
            break
        if chave_jogo(dezenas) in estado.chaves_existentes:
            continue
        if eh_subconjunto(dezenas, estado.jogos_misto):
            continue

        estado.jogos_misto.append(dezenas)
        metade = math.ceil(tamanho / 2)
        motivo = (
            f"Misto: {metade} mais votadas e {tamanho - metade} menos votadas"
            f" (deslocamento {tentativa})"
        )
        estado.aceitar(dezenas, "mixed", preco, motivo)
        return

    logger.debug("Sem combinação mista única para %d dezenas", tamanho)


def gerar_por_selecoes(
    selecoes: list[GameSelection],
    analise: NumberAnalysis,
    precos: dict[int, float],
    chaves_existentes: Iterable[str],
    orcamento: Optional[float] = None,
) -> GenerationResult:
    """
    Gera exatamente os jogos pedidos (tamanho x categoria x quantidade).

    Mais/menos votados usam sempre o topo fixo do ranking; duplicatas são
    descartadas pela checagem de assinatura. Sem `orcamento`, o saldo não limita
    a geração.
    """
    estado = GenerationState.iniciar(orcamento, chaves_existentes)

    for sel in sorted(selecoes, key=lambda s: s.tamanho, reverse=True):
        if sel.tamanho not in precos:
            raise ValueError(f"Sem preço para jogos de {sel.tamanho} dezenas.")
        preco = precos[sel.tamanho]
        for _ in range(sel.quantidade):
            if sel.categoria == "mixed":
                _selecao_misto(estado, analise, sel.tamanho, preco)
            else:
                _selecao_topo(estado, analise, sel.categoria, sel.tamanho, preco)

    res = estado.resultado()
    pedidos = sum(s.quantidade for s in selecoes)
    logger.info("Geração por seleção: %d de %d jogos pedidos (%s)", len(res.sugestoes), pedidos, money_ptbr(res.custo_total))
    return res
