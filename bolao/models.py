from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True)
class Aposta:
    apelido: str
    dezenas: tuple[int, ...]

@dataclass(frozen=True)
class RankingEntry:
    dezena: int
    votos: int

@dataclass(frozen=True)
class NumberAnalysis:
    mais_votados: list[RankingEntry]
    menos_votados: list[RankingEntry]
    nao_votados: list[int]
    ranking_completo: list[RankingEntry]

    @property
    def votados(self) -> list[RankingEntry]:
        return [e for e in self.ranking_completo if e.votos > 0]

    @property
    def dezenas_mais_votadas(self) -> list[int]:
        return [e.dezena for e in self.mais_votados]

    @property
    def dezenas_menos_votadas(self) -> list[int]:
        return [e.dezena for e in self.menos_votados]

@dataclass(frozen=True)
class SuggestedGame:
    jogo_id: str
    dezenas: list[int]
    custo: float
    tipo: str
    motivo: str
    categoria: str

    @property
    def chave(self) -> str:
        return ",".join(str(d) for d in sorted(self.dezenas))

@dataclass(frozen=True)
class SkippedGame:
    tamanho: int
    categoria: str
    preco: float
    motivo: str

@dataclass(frozen=True)
class GameSelection:
    tamanho: int
    categoria: str
    quantidade: int

@dataclass(frozen=True)
class GenerationResult:
    sugestoes: list[SuggestedGame]
    puladas: list[SkippedGame]
    cursores: dict[str, object] = field(default_factory=dict)

    @property
    def custo_total(self) -> float:
        return round(sum(s.custo for s in self.sugestoes), 2)

@dataclass(frozen=True)
class BolaoSuggestionReport:
    analise: NumberAnalysis
    sugestoes: list[SuggestedGame]
    puladas: list[SkippedGame]
    custo_jogos_individuais: float
    orcamento_apos_individuais: float
    orcamento_disponivel: float
    cursores: dict[str, object] = field(default_factory=dict)

@dataclass(frozen=True)
class MatchResult:
    jogo_id: str
    dezenas: list[int]
    acertos: list[int]

    @property
    def quantidade_acertos(self) -> int:
        return len(self.acertos)

@dataclass(frozen=True)
class DrawResult:
    concurso: int
    data_apuracao: Optional[str]
    dezenas: list[int]
    acumulado: bool
    valor_acumulado: float
