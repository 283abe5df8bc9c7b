from typing import Iterable

def formatar_jogo(jogo: Iterable[int]) -> str:
    return " - ".join(f"{d:02d}" for d in sorted(jogo))

def chave_jogo(jogo: Iterable[int]) -> str:
    """Assinatura do jogo: dezenas em ordem crescente separadas por vírgula."""
    return ",".join(str(int(d)) for d in sorted(jogo))

def rotulo_tipo(tamanho: int) -> str:
    return f"{tamanho} dezenas"

def pares_impares(jogo: list[int]) -> tuple[int, int]:
    pares = sum(1 for d in jogo if d % 2 == 0)
    return pares, len(jogo) - pares

def custo_total(jogos: list[list[int]], precos: dict[int, float]) -> float:
    return round(sum(precos.get(len(j), 0.0) for j in jogos), 2)

def preco_mais_barato(precos: dict[int, float]) -> float:
    return min(precos.values()) if precos else 0.0

def eh_subconjunto(dezenas: Iterable[int], outros: Iterable[Iterable[int]]) -> bool:
    s = set(dezenas)
    return any(s <= set(o) for o in outros)
