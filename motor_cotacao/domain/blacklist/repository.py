from __future__ import annotations

from typing import Protocol

from .entities import EntradaBlacklist


class BlacklistRepository(Protocol):
    def listar_ativas(self) -> list[EntradaBlacklist]: ...
    def adicionar(self, entrada: EntradaBlacklist) -> None: ...
    def desativar(self, entrada_id: str) -> bool: ...
