from __future__ import annotations

from functools import lru_cache
from typing import Any, Final, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import HTTP_TIMEOUT

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": "Mozilla/5.0 (compatible; BolaoHelper/1.0)",
    "Accept": "application/json",
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8",
}

# a API da Caixa recusa chamadas sem origem do portal
CAIXA_HEADERS: Final[dict[str, str]] = {
    "Referer": "https://loterias.caixa.gov.br/",
    "Origin": "https://loterias.caixa.gov.br",
}

@lru_cache(maxsize=1)
def get_session() -> requests.Session:
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    s = requests.Session()
    s.mount("https://", HTTPAdapter(max_retries=retry))
    s.headers.update(DEFAULT_HEADERS)
    return s

def get_json(url: str, headers: Optional[dict[str, str]] = None, timeout: float = HTTP_TIMEOUT) -> Any:
    """GET com a sessão compartilhada. Propaga erros HTTP e de JSON inválido."""
    r = get_session().get(url, timeout=timeout, headers=headers)
    r.raise_for_status()
    return r.json()
