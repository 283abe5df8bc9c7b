from __future__ import annotations

from datetime import datetime
from typing import Any

import json

import pandas as pd

from .games_export import puladas_to_df, sugestoes_to_df
from .models import BolaoSuggestionReport
from .ui import money_ptbr


def df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    if df is None:
        df = pd.DataFrame()
    # UTF-8 com BOM (mais “Excel-friendly”)
    return df.to_csv(index=False).encode("utf-8-sig")


def df_to_json_bytes(df: pd.DataFrame, orient: str = "records") -> bytes:
    if df is None:
        payload: Any = []
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    return df.to_json(orient=orient, force_ascii=False).encode("utf-8")


def resumo_relatorio(relatorio: BolaoSuggestionReport) -> dict[str, str]:
    custo_sugestoes = sum(s.custo for s in relatorio.sugestoes)
    return {
        "Jogos individuais": money_ptbr(relatorio.custo_jogos_individuais),
        "Saldo após individuais": money_ptbr(relatorio.orcamento_apos_individuais),
        "Saldo disponível": money_ptbr(relatorio.orcamento_disponivel),
        "Jogos sugeridos": str(len(relatorio.sugestoes)),
        "Custo das sugestões": money_ptbr(custo_sugestoes),
        "Saldo final": money_ptbr(relatorio.orcamento_disponivel - custo_sugestoes),
    }


def relatorio_md_bytes(
    relatorio: BolaoSuggestionReport,
    *,
    title: str = "Sugestões de jogos do bolão",
    generated_at: datetime | None = None,
) -> bytes:
    """
    Observação: DataFrame.to_markdown depende de tabulate instalado.
    """
    ts = generated_at or datetime.now()
    analise = relatorio.analise
    out = [f"# {title}", "", f"_Gerado em {ts.isoformat(sep=' ', timespec='seconds')}_", ""]

    out += ["## Resumo", ""]
    out += [f"- **{k}:** {v}" for k, v in resumo_relatorio(relatorio).items()]
    out.append("")

    out += ["## Análise dos números", ""]
    out.append("- Mais votados: " + ", ".join(f"{e.dezena:02d} ({e.votos}x)" for e in analise.mais_votados))
    out.append("- Menos votados: " + ", ".join(f"{e.dezena:02d} ({e.votos}x)" for e in analise.menos_votados))
    nao = ", ".join(f"{d:02d}" for d in analise.nao_votados) or "Todos os números foram votados"
    out.append(f"- Não votados: {nao}")
    out.append("")

    for section, df in (
        ("Jogos sugeridos", sugestoes_to_df(relatorio.sugestoes)),
        ("Combinações sem saldo", puladas_to_df(relatorio.puladas)),
    ):
        out += [f"## {section}", ""]
        if df.empty:
            out.append("*Sem dados.*")
        else:
            out.append(df.to_markdown(index=False, tablefmt="pipe"))
        out.append("")

    return "\n".join(out).encode("utf-8")
