import math
import os
from dataclasses import dataclass
from typing import Literal

Modalidade = Literal["Mega-Sena", "Lotofácil"]
Categoria = Literal["most_voted", "least_voted", "not_voted", "mixed"]

@dataclass(frozen=True)
class LotterySpec:
    modalidade: Modalidade
    slug: str
    n_universo: int
    n_min: int
    n_max: int
    n_dezenas_sorteio: int
    preco_base: float
    max_tamanho_sugestao: int
    min_acertos_premio: int

    def preco(self, n_dezenas: int) -> float:
        if n_dezenas < self.n_min or n_dezenas > self.n_max:
            raise ValueError(f"{self.modalidade}: jogos aceitam de {self.n_min} a {self.n_max} dezenas.")
        return round(math.comb(n_dezenas, self.n_min) * self.preco_base, 2)

    @property
    def precos(self) -> dict[int, float]:
        return {n: self.preco(n) for n in range(self.n_min, self.n_max + 1)}

    @property
    def precos_sugestao(self) -> dict[int, float]:
        # faixa prática usada na geração automática
        return {n: self.preco(n) for n in range(self.n_min, self.max_tamanho_sugestao + 1)}

PRECO_BASE_MEGA = 5.00
PRECO_BASE_LOTO = 3.00

TOP_RANKING = 20
MAX_ITERACOES_PREENCHIMENTO = 50
MAX_TENTATIVAS_MISTO = 10
MAX_TENTATIVAS_PERSONALIZADO = 30
SEMENTE_PADRAO = 2024

ORDEM_CATEGORIAS: tuple[Categoria, ...] = ("most_voted", "least_voted", "not_voted", "mixed")
CATEGORIAS_PRIORITARIAS: tuple[Categoria, ...] = ("most_voted", "least_voted")

ROTULOS_CATEGORIA: dict[str, str] = {
    "most_voted": "Mais votados",
    "least_voted": "Menos votados",
    "not_voted": "Não votados",
    "mixed": "Misto",
}

# nomes usados pela interface original
ALIASES_CATEGORIA: dict[str, Categoria] = {
    "mais_votados": "most_voted",
    "menos_votados": "least_voted",
    "nao_votados": "not_voted",
    "misto": "mixed",
}

URL_RESULTADO_ALTERNATIVA = "https://loteriascaixa-api.herokuapp.com/api/{slug}/{concurso}"
URL_RESULTADO_CAIXA = "https://servicebus2.caixa.gov.br/portaldeloterias/api/{slug_caixa}/{concurso}"
HTTP_TIMEOUT = 30

LOG_LEVEL = os.getenv("BOLAO_LOG_LEVEL", "INFO").upper()

def get_spec(modalidade: Modalidade) -> LotterySpec:
    if modalidade == "Mega-Sena":
        return LotterySpec(
            modalidade="Mega-Sena",
            slug="mega-sena",
            n_universo=60,
            n_min=6,
            n_max=20,
            n_dezenas_sorteio=6,
            preco_base=PRECO_BASE_MEGA,
            max_tamanho_sugestao=10,
            min_acertos_premio=4,
        )
    return LotterySpec(
        modalidade="Lotofácil",
        slug="lotofacil",
        n_universo=25,
        n_min=15,
        n_max=20,
        n_dezenas_sorteio=15,
        preco_base=PRECO_BASE_LOTO,
        max_tamanho_sugestao=17,
        min_acertos_premio=11,
    )
