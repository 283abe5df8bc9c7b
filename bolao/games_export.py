from __future__ import annotations

from typing import TypedDict

import pandas as pd

from bolao.config import ROTULOS_CATEGORIA
from bolao.domain_lottery import formatar_jogo, pares_impares
from bolao.models import MatchResult, NumberAnalysis, SkippedGame, SuggestedGame


class SuggestionRow(TypedDict, total=False):
    jogo_id: str
    categoria: str
    tipo: str
    custo: float
    soma: int
    pares: int
    impares: int
    motivo: str
    # d1..dN entram dinamicamente (total=False)


def sugestoes_to_df(sugestoes: list[SuggestedGame]) -> pd.DataFrame:
    rows: list[SuggestionRow] = []
    max_dezenas = 0

    for s in sugestoes:
        j = sorted(s.dezenas)
        max_dezenas = max(max_dezenas, len(j))

        r: SuggestionRow = {
            "jogo_id": s.jogo_id,
            "categoria": ROTULOS_CATEGORIA.get(s.categoria, s.categoria),
            "tipo": s.tipo,
        }
        for k, d in enumerate(j, start=1):
            r[f"d{k}"] = int(d)  # type: ignore[literal-required]

        pares, imp = pares_impares(j)
        r.update({"custo": float(s.custo), "soma": int(sum(j)), "pares": pares, "impares": imp, "motivo": s.motivo})
        rows.append(r)

    df = pd.DataFrame(rows)

    # Schema mínimo (mesmo vazio) para não quebrar export
    base_cols: list[tuple[str, str]] = [
        ("jogo_id", "object"),
        ("categoria", "object"),
        ("tipo", "object"),
        ("custo", "float64"),
        ("soma", "int64"),
        ("pares", "int64"),
        ("impares", "int64"),
        ("motivo", "object"),
    ]
    for col, dtype in base_cols:
        if col not in df.columns:
            df[col] = pd.Series(dtype=dtype)

    # jogos de tamanhos diferentes deixam d(N+1).. vazios
    d_cols = [f"d{k}" for k in range(1, max_dezenas + 1)]
    ordered = ["jogo_id", "categoria", "tipo", *d_cols, "custo", "soma", "pares", "impares", "motivo"]
    return df.reindex(columns=ordered)


def puladas_to_df(puladas: list[SkippedGame]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "tamanho": p.tamanho,
                "categoria": ROTULOS_CATEGORIA.get(p.categoria, p.categoria),
                "preco": p.preco,
                "motivo": p.motivo,
            }
            for p in puladas
        ],
        columns=["tamanho", "categoria", "preco", "motivo"],
    )


def ranking_to_df(analise: NumberAnalysis) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"posicao": i, "dezena": e.dezena, "votos": e.votos} for i, e in enumerate(analise.ranking_completo, start=1)],
        columns=["posicao", "dezena", "votos"],
    )
    mais = set(analise.dezenas_mais_votadas)
    menos = set(analise.dezenas_menos_votadas)
    df["mais_votada"] = df["dezena"].isin(mais)
    df["menos_votada"] = df["dezena"].isin(menos)
    df["nao_votada"] = df["votos"] == 0
    return df


def conferencia_to_df(resultados: list[MatchResult]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "jogo_id": r.jogo_id,
                "dezenas": formatar_jogo(r.dezenas),
                "acertos": formatar_jogo(r.acertos),
                "quantidade_acertos": r.quantidade_acertos,
            }
            for r in resultados
        ],
        columns=["jogo_id", "dezenas", "acertos", "quantidade_acertos"],
    )
    return df.sort_values("quantidade_acertos", ascending=False, kind="stable").reset_index(drop=True)
