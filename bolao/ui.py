import re

from .models import Aposta

def money_ptbr(v: float) -> str:
    return f"R$ {v:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")

def parse_lista(texto: str) -> list[int]:
    if not texto:
        return []
    tokens = re.split(r"[,\s;-]+", texto.strip())
    return [int(t) for t in tokens if t.isdigit()]

def parse_apostas(texto: str) -> list[Aposta]:
    """
    Uma aposta por linha, no formato `apelido: 01 02 03 04 05 06`.
    Linhas sem `:` recebem apelido sequencial.
    """
    apostas: list[Aposta] = []
    for i, linha in enumerate((texto or "").splitlines(), start=1):
        linha = linha.strip()
        if not linha:
            continue
        if ":" in linha:
            apelido, resto = linha.split(":", 1)
        else:
            apelido, resto = f"Participante {i}", linha
        apostas.append(Aposta(apelido=apelido.strip(), dezenas=tuple(parse_lista(resto))))
    return apostas
