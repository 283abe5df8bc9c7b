import pytest

from bolao.domain_lottery import chave_jogo
from bolao.models import Aposta, GameSelection
from bolao.service import (
    chaves_exclusao,
    custo_jogos_individuais,
    gerar_relatorio_sugestoes,
    orcamento_disponivel,
    sugerir_jogo_avulso,
)


def test_custo_e_saldo(apostas_exemplo, mega):
    assert custo_jogos_individuais(apostas_exemplo, mega) == 10.0
    assert orcamento_disponivel(100.0, apostas_exemplo, mega) == 90.0
    assert orcamento_disponivel(100.0, apostas_exemplo, mega, 35.0) == 55.0


def test_chaves_exclusao_junta_apostas_e_jogos(apostas_exemplo):
    chaves = chaves_exclusao(apostas_exemplo, [[10, 9, 8, 7, 6, 5]])
    assert chaves == {"1,2,3,4,5,6", "1,2,3,4,5,7", "5,6,7,8,9,10"}


def test_relatorio_automatico(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 200.0)

    assert rel.custo_jogos_individuais == 50.0
    assert rel.orcamento_apos_individuais == 150.0
    assert rel.orcamento_disponivel == 150.0
    assert rel.sugestoes
    assert sum(s.custo for s in rel.sugestoes) <= 150.0

    apostadas = {chave_jogo(a.dezenas) for a in apostas_mega}
    chaves = [s.chave for s in rel.sugestoes]
    assert len(chaves) == len(set(chaves))
    assert not apostadas & set(chaves)
    assert all(len(s.dezenas) <= mega.max_tamanho_sugestao for s in rel.sugestoes)


def test_jogos_existentes_abatem_saldo_e_sao_excluidos(apostas_mega, mega):
    primeiro = gerar_relatorio_sugestoes(apostas_mega, mega, 200.0)
    gasto = sum(s.custo for s in primeiro.sugestoes)

    segundo = gerar_relatorio_sugestoes(apostas_mega, mega, 400.0, jogos_existentes=primeiro.sugestoes)

    assert segundo.orcamento_disponivel == round(400.0 - 50.0 - gasto, 2)
    assert not {s.chave for s in primeiro.sugestoes} & {s.chave for s in segundo.sugestoes}


def test_sem_saldo_apos_individuais(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 50.0)
    assert rel.orcamento_disponivel == 0.0
    assert rel.sugestoes == []
    assert rel.puladas


def test_selecoes_com_nomes_alternativos(apostas_mega, mega):
    selecoes = [
        {"size": 6, "criteria": "mais_votados", "quantity": 1},
        {"tamanho": 6, "categoria": "nao_votados"},
    ]
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 200.0, selecoes=selecoes)

    assert sorted(s.categoria for s in rel.sugestoes) == ["most_voted", "not_voted"]
    nao_votado = next(s for s in rel.sugestoes if s.categoria == "not_voted")
    assert nao_votado.dezenas == rel.analise.nao_votados[:6]


def test_selecoes_usam_tabela_completa(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(
        apostas_mega, mega, 100_000.0, selecoes=[GameSelection(12, "most_voted", 1)]
    )
    assert [len(s.dezenas) for s in rel.sugestoes] == [12]
    assert rel.sugestoes[0].custo == mega.preco(12)


def test_categoria_desconhecida(apostas_mega, mega):
    with pytest.raises(ValueError, match="Categoria desconhecida"):
        gerar_relatorio_sugestoes(apostas_mega, mega, 200.0, selecoes=[{"size": 6, "category": "pares"}])


def test_aposta_invalida(mega):
    apostas = [Aposta("Ana", (1, 1, 2, 3, 4, 5))]
    with pytest.raises(ValueError, match="repetidas"):
        gerar_relatorio_sugestoes(apostas, mega, 100.0)


def test_jogo_avulso(apostas_exemplo, mega):
    jogo, erro = sugerir_jogo_avulso(apostas_exemplo, mega, 6, "mais_votados", orcamento=100.0)

    assert erro is None
    # o topo [1..6] é a aposta da Ana
    assert jogo.dezenas == [1, 2, 4, 5, 6, 7]
    assert jogo.chave not in chaves_exclusao(apostas_exemplo)
    assert jogo.custo == 5.0


def test_jogo_avulso_tamanho_invalido(apostas_exemplo, mega):
    with pytest.raises(ValueError):
        sugerir_jogo_avulso(apostas_exemplo, mega, 21, "most_voted")
