import pytest

from bolao.analytics import analisar_numeros
from bolao.config import get_spec
from bolao.models import Aposta


@pytest.fixture
def mega():
    return get_spec("Mega-Sena")


@pytest.fixture
def apostas_exemplo():
    return [
        Aposta("Ana", (1, 2, 3, 4, 5, 6)),
        Aposta("Bia", (1, 2, 3, 4, 5, 7)),
    ]


@pytest.fixture
def analise_exemplo(apostas_exemplo):
    # 1..5 -> 2 votos, 6 e 7 -> 1 voto, 8..10 sem votos
    return analisar_numeros(apostas_exemplo, 10)


@pytest.fixture
def fabricar_analise():
    """
    Monta uma análise a partir de contagens desejadas {dezena: votos}.
    A aposta j contém todas as dezenas com mais de j votos.
    """

    def _fabricar(contagens: dict[int, int], n_universo: int):
        maior = max(contagens.values(), default=0)
        apostas = [
            Aposta(f"p{j}", tuple(d for d, c in sorted(contagens.items()) if c > j))
            for j in range(maior)
        ]
        return analisar_numeros(apostas, n_universo)

    return _fabricar


@pytest.fixture
def analise_escada(fabricar_analise):
    # 1 é a mais votada (20 votos) ... 20 a menos votada (1 voto); 21..60 sem votos
    return fabricar_analise({d: 21 - d for d in range(1, 21)}, 60)


@pytest.fixture
def apostas_mega():
    jogos = [
        [1, 2, 3, 4, 5, 6],
        [1, 2, 3, 10, 11, 12],
        [1, 5, 9, 13, 17, 21],
        [2, 4, 6, 8, 10, 12],
        [7, 14, 21, 28, 35, 42],
        [3, 13, 23, 33, 43, 53],
        [1, 10, 20, 30, 40, 50],
        [5, 15, 25, 35, 45, 55],
        [11, 22, 33, 44, 55, 60],
        [2, 12, 22, 32, 42, 52],
    ]
    return [Aposta(f"Participante {i}", tuple(j)) for i, j in enumerate(jogos, start=1)]
