from unittest.mock import MagicMock

import pytest
import requests

from bolao.config import get_spec
from bolao.results import (
    ResultadoIndisponivelError,
    buscar_resultado,
    conferir_jogos,
    faixas_acertos,
    mensagem_premios,
    rotulo_faixa,
    resumo_conferencia,
)

ALTERNATIVA = {
    "concurso": 2700,
    "data": "01/04/2024",
    "dezenas": ["05", "12", "23", "34", "45", "56"],
    "acumulou": True,
    "acumuladaProxConcurso": 45000000.0,
}

CAIXA = {
    "numero": 2700,
    "dataApuracao": "01/04/2024",
    "listaDezenas": ["56", "45", "34", "23", "12", "05"],
    "acumulado": False,
    "valorAcumuladoProximoConcurso": 0,
}


def _resposta(payload=None, erro=None):
    r = MagicMock()
    if erro is not None:
        r.raise_for_status.side_effect = erro
    r.json.return_value = payload
    return r


@pytest.fixture
def sessao(monkeypatch):
    s = MagicMock()
    monkeypatch.setattr("bolao.http_client.get_session", lambda: s)
    return s


def test_api_alternativa(sessao, mega):
    sessao.get.return_value = _resposta(ALTERNATIVA)

    res = buscar_resultado(2700, mega)

    assert res.dezenas == [5, 12, 23, 34, 45, 56]
    assert res.acumulado is True
    assert res.valor_acumulado == 45000000.0
    assert sessao.get.call_count == 1
    assert "mega-sena/2700" in sessao.get.call_args[0][0]


def test_cai_para_api_da_caixa(sessao, mega):
    sessao.get.side_effect = [
        _resposta(erro=requests.HTTPError("503")),
        _resposta(CAIXA),
    ]

    res = buscar_resultado(2700, mega)

    assert res.dezenas == [5, 12, 23, 34, 45, 56]
    assert res.concurso == 2700
    url_caixa = sessao.get.call_args_list[1][0][0]
    assert "megasena/2700" in url_caixa
    assert "Referer" in sessao.get.call_args_list[1][1]["headers"]


def test_resposta_sem_dezenas_tambem_cai(sessao, mega):
    sessao.get.side_effect = [_resposta({"erro": "não encontrado"}), _resposta(CAIXA)]
    assert buscar_resultado(2700, mega).data_apuracao == "01/04/2024"


def test_ambas_falham(sessao, mega):
    sessao.get.side_effect = requests.ConnectionError("offline")
    with pytest.raises(ResultadoIndisponivelError, match="2700"):
        buscar_resultado(2700, mega)


def test_concurso_invalido(mega):
    with pytest.raises(ValueError):
        buscar_resultado(0, mega)


def test_conferencia():
    jogos = [("Ana", [1, 2, 3, 4, 5, 6]), ("extra", (5, 12, 23, 40, 41, 42, 43))]
    resultados = conferir_jogos(jogos, [5, 12, 23, 34, 45, 56])

    assert [r.acertos for r in resultados] == [[5], [5, 12, 23]]
    assert resumo_conferencia(resultados, minimo_premio=3) == {
        "total_jogos_verificados": 2,
        "maior_quantidade_acertos": 3,
        "jogos_com_premio": 1,
        "por_acertos": {6: 0, 5: 0, 4: 0, 3: 1, 2: 0},
    }


def test_resumo_vazio():
    assert resumo_conferencia([]) == {
        "total_jogos_verificados": 0,
        "maior_quantidade_acertos": 0,
        "jogos_com_premio": 0,
        "por_acertos": {6: 0, 5: 0, 4: 0, 3: 0},
    }


def test_faixas_por_modalidade(mega):
    assert faixas_acertos(mega) == [6, 5, 4, 3]
    assert faixas_acertos(get_spec("Lotofácil")) == [15, 14, 13, 12, 11, 10]
    assert rotulo_faixa(3) == "Ternos"
    assert rotulo_faixa(11) == "11 acertos"


def test_resumo_por_faixa_e_mensagem(mega):
    sorteadas = [5, 12, 23, 34, 45, 56]
    jogos = [
        ("quina", [5, 12, 23, 34, 45, 1]),
        ("quadra 1", [5, 12, 23, 34, 1, 2]),
        ("quadra 2", [5, 12, 23, 34, 1, 2, 3]),
        ("terno", [5, 12, 23, 1, 2, 3]),
        ("nada", [1, 2, 3, 4, 6, 7]),
    ]
    resumo = resumo_conferencia(
        conferir_jogos(jogos, sorteadas),
        minimo_premio=mega.min_acertos_premio,
        faixas=faixas_acertos(mega),
    )

    assert resumo["por_acertos"] == {6: 0, 5: 1, 4: 2, 3: 1}
    assert resumo["jogos_com_premio"] == 3
    # terno fica no resumo mas não é prêmio
    assert mensagem_premios(resumo, mega.min_acertos_premio) == "1 Quina, 2 Quadras"


def test_mensagem_sem_premios(mega):
    resumo = resumo_conferencia(conferir_jogos([("a", [1, 2, 3, 4, 5, 6])], [1, 2, 3, 40, 50, 60]))
    assert resumo["por_acertos"][3] == 1
    assert mensagem_premios(resumo) == "0 prêmios"


def test_resumo_lotofacil():
    loto = get_spec("Lotofácil")
    sorteadas = list(range(1, 16))
    jogos = [("onze", list(range(5, 20))), ("quinze", list(range(1, 16)))]
    resumo = resumo_conferencia(
        conferir_jogos(jogos, sorteadas),
        minimo_premio=loto.min_acertos_premio,
        faixas=faixas_acertos(loto),
    )

    assert resumo["por_acertos"] == {15: 1, 14: 0, 13: 0, 12: 0, 11: 1, 10: 0}
    assert mensagem_premios(resumo, loto.min_acertos_premio) == "1 jogo com 15 acertos, 1 jogo com 11 acertos"
