from __future__ import annotations

from typing import Any, Iterable

from .config import ALIASES_CATEGORIA, ORDEM_CATEGORIAS, LotterySpec
from .models import Aposta, GameSelection

def validar_dezenas(lista: list[int], n_universo: int, nome: str) -> None:
    if len(set(lista)) != len(lista):
        raise ValueError(f"{nome}: há dezenas repetidas.")
    if any((d < 1 or d > n_universo) for d in lista):
        raise ValueError(f"{nome}: há dezenas fora do intervalo 1–{n_universo}.")

def validar_aposta(aposta: Aposta, spec: LotterySpec) -> Aposta:
    nome = aposta.apelido or "Aposta"
    dezenas = [int(d) for d in aposta.dezenas]
    validar_dezenas(dezenas, spec.n_universo, nome)
    if len(dezenas) != spec.n_min:
        raise ValueError(f"{nome}: selecione exatamente {spec.n_min} dezenas.")
    return Aposta(apelido=aposta.apelido, dezenas=tuple(sorted(dezenas)))

def validar_apostas(apostas: Iterable[Aposta], spec: LotterySpec) -> list[Aposta]:
    return [validar_aposta(a, spec) for a in apostas]

def validar_jogos(jogos: Iterable[Iterable[int]], spec: LotterySpec) -> list[list[int]]:
    out: list[list[int]] = []
    for i, jogo in enumerate(jogos, start=1):
        dezenas = [int(d) for d in jogo]
        validar_dezenas(dezenas, spec.n_universo, f"Jogo {i}")
        if not spec.n_min <= len(dezenas) <= spec.n_max:
            raise ValueError(f"Jogo {i}: deve ter de {spec.n_min} a {spec.n_max} dezenas.")
        out.append(sorted(dezenas))
    return out

def validar_precos(precos: dict[Any, Any], spec: LotterySpec) -> dict[int, float]:
    if not precos:
        raise ValueError("Tabela de preços vazia.")
    out: dict[int, float] = {}
    for tamanho, preco in precos.items():
        try:
            t, p = int(tamanho), float(preco)
        except (TypeError, ValueError):
            raise ValueError(f"Tabela de preços inválida: {tamanho!r} -> {preco!r}") from None
        if not spec.n_min <= t <= spec.n_max:
            raise ValueError(f"Tabela de preços: {t} dezenas fora da faixa {spec.n_min}–{spec.n_max}.")
        if p <= 0:
            raise ValueError(f"Tabela de preços: preço de {t} dezenas deve ser positivo.")
        out[t] = p
    return out

def normalizar_categoria(categoria: str) -> str:
    c = (categoria or "").strip().lower()
    c = ALIASES_CATEGORIA.get(c, c)
    if c not in ORDEM_CATEGORIAS:
        raise ValueError(f"Categoria desconhecida: {categoria!r}.")
    return c

def validar_selecoes(selecoes: Iterable[Any], precos: dict[int, float]) -> list[GameSelection]:
    """Aceita GameSelection ou dicts `{size|tamanho, category|categoria, quantity|quantidade}`."""
    out: list[GameSelection] = []
    for s in selecoes:
        if isinstance(s, GameSelection):
            tamanho, categoria, quantidade = s.tamanho, s.categoria, s.quantidade
        else:
            tamanho = s.get("tamanho", s.get("size"))
            categoria = s.get("categoria", s.get("category", s.get("criteria")))
            quantidade = s.get("quantidade", s.get("quantity", 1))
        if tamanho is None or categoria is None:
            raise ValueError(f"Seleção incompleta: {s!r}")
        tamanho, quantidade = int(tamanho), int(quantidade)
        if tamanho not in precos:
            raise ValueError(f"Sem preço para jogos de {tamanho} dezenas.")
        if quantidade < 1:
            raise ValueError("Quantidade deve ser pelo menos 1.")
        out.append(GameSelection(tamanho=tamanho, categoria=normalizar_categoria(categoria), quantidade=quantidade))
    return out

def validar_sorteio(dezenas: Iterable[int], spec: LotterySpec) -> list[int]:
    lista = [int(d) for d in dezenas]
    validar_dezenas(lista, spec.n_universo, "Sorteadas")
    if len(lista) != spec.n_dezenas_sorteio:
        raise ValueError(f"Sorteadas: informe exatamente {spec.n_dezenas_sorteio} dezenas.")
    return sorted(lista)
