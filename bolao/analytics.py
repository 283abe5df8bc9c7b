import pandas as pd

from .config import TOP_RANKING
from .models import Aposta, NumberAnalysis, RankingEntry

def frequencias_apostas(apostas: list[Aposta], n_universo: int) -> pd.DataFrame:
    todas = [int(d) for a in apostas for d in a.dezenas]
    freq = pd.Series(todas, dtype="int64").value_counts().reindex(range(1, n_universo + 1), fill_value=0).sort_index()
    out = freq.reset_index()
    out.columns = ["dezena", "votos"]
    out["dezena"] = out["dezena"].astype(int)
    out["votos"] = out["votos"].astype(int)
    return out

def _entries(df: pd.DataFrame) -> list[RankingEntry]:
    return [RankingEntry(dezena=int(r.dezena), votos=int(r.votos)) for r in df.itertuples(index=False)]

def analisar_numeros(apostas: list[Aposta], n_universo: int, top: int = TOP_RANKING) -> NumberAnalysis:
    freq_df = frequencias_apostas(apostas, n_universo)

    ranking = freq_df.sort_values(["votos", "dezena"], ascending=[False, True])
    votados = ranking[ranking["votos"] > 0]
    menos = votados.sort_values(["votos", "dezena"], ascending=[True, True])
    nao_votados = freq_df.loc[freq_df["votos"] == 0, "dezena"].sort_values()

    return NumberAnalysis(
        mais_votados=_entries(votados.head(top)),
        menos_votados=_entries(menos.head(top)),
        nao_votados=[int(d) for d in nao_votados],
        ranking_completo=_entries(ranking),
    )

def pool_categoria(analise: NumberAnalysis, categoria: str) -> list[int]:
    if categoria == "most_voted":
        return analise.dezenas_mais_votadas
    if categoria == "least_voted":
        return analise.dezenas_menos_votadas
    if categoria == "not_voted":
        return list(analise.nao_votados)
    # misto: união das duas janelas, sem repetição
    return list(dict.fromkeys(analise.dezenas_mais_votadas + analise.dezenas_menos_votadas))

def categoria_disponivel(analise: NumberAnalysis, categoria: str, tamanho: int) -> bool:
    """Indica se a categoria tem dezenas suficientes para um jogo de `tamanho` dezenas."""
    return len(pool_categoria(analise, categoria)) >= tamanho
