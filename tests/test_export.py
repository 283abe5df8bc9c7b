from datetime import datetime

from bolao.games_export import conferencia_to_df, puladas_to_df, ranking_to_df, sugestoes_to_df
from bolao.models import MatchResult
from bolao.reports import df_to_csv_bytes, df_to_json_bytes, relatorio_md_bytes
from bolao.service import gerar_relatorio_sugestoes


def test_sugestoes_to_df(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 200.0)
    df = sugestoes_to_df(rel.sugestoes)

    maior = max(len(s.dezenas) for s in rel.sugestoes)
    assert list(df.columns)[:3] == ["jogo_id", "categoria", "tipo"]
    assert f"d{maior}" in df.columns
    assert list(df.columns)[-5:] == ["custo", "soma", "pares", "impares", "motivo"]
    assert (df["pares"] + df["impares"] == [len(s.dezenas) for s in rel.sugestoes]).all()


def test_sugestoes_vazias_mantem_colunas():
    df = sugestoes_to_df([])
    assert df.empty
    assert list(df.columns) == ["jogo_id", "categoria", "tipo", "custo", "soma", "pares", "impares", "motivo"]


def test_puladas_to_df(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 50.0)
    df = puladas_to_df(rel.puladas)
    assert len(df) == len(rel.puladas)
    assert set(df["categoria"]) <= {"Mais votados", "Menos votados", "Não votados", "Misto"}


def test_ranking_to_df(analise_exemplo):
    df = ranking_to_df(analise_exemplo)
    assert df["posicao"].tolist() == list(range(1, 11))
    assert df.loc[df["dezena"] == 8, "nao_votada"].item()
    assert not df.loc[df["dezena"] == 8, "menos_votada"].item()
    assert df.loc[df["dezena"] == 6, "mais_votada"].item()


def test_conferencia_ordenada_por_acertos():
    resultados = [
        MatchResult("a", [1, 2, 3, 4, 5, 6], [1]),
        MatchResult("b", [7, 8, 9, 10, 11, 12], [7, 8, 9]),
    ]
    df = conferencia_to_df(resultados)
    assert df["jogo_id"].tolist() == ["b", "a"]
    assert df.loc[0, "acertos"] == "07 - 08 - 09"


def test_csv_com_bom(analise_exemplo):
    data = df_to_csv_bytes(ranking_to_df(analise_exemplo))
    assert data.startswith(b"\xef\xbb\xbf")
    assert b"posicao,dezena,votos" in data


def test_json_registros(analise_exemplo):
    data = df_to_json_bytes(ranking_to_df(analise_exemplo))
    assert data.startswith(b"[{")


def test_relatorio_markdown(apostas_mega, mega):
    rel = gerar_relatorio_sugestoes(apostas_mega, mega, 200.0)
    md = relatorio_md_bytes(rel, generated_at=datetime(2024, 4, 1, 12, 0)).decode("utf-8")

    assert md.startswith("# Sugestões de jogos do bolão")
    assert "2024-04-01 12:00:00" in md
    assert "## Resumo" in md
    assert "Saldo disponível:** R$ 150,00" in md
    assert "| jogo_id" in md
