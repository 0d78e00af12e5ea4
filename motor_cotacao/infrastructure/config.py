from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    debug: bool
    log_level: str
    rodizio_max_tentativas: int
    rodizio_backoff_segundos: float
    cotacao_validade_dias: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        rodizio_max_tentativas=max(1, int(os.environ.get("RODIZIO_MAX_TENTATIVAS", "5"))),
        rodizio_backoff_segundos=float(os.environ.get("RODIZIO_BACKOFF_SEGUNDOS", "0.01")),
        cotacao_validade_dias=int(os.environ.get("COTACAO_VALIDADE_DIAS", "7")),
    )
