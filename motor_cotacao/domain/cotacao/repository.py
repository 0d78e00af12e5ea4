from __future__ import annotations

from typing import Protocol

from .entities import Cotacao


class CotacaoRepository(Protocol):
    def inserir(self, cotacao: Cotacao) -> None: ...
    def buscar_por_id(self, cotacao_id: str) -> Cotacao | None: ...
