from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import ConfigRodizio, Vendedor


class VendedorRepository(Protocol):
    def buscar_por_id(self, vendedor_id: str) -> Vendedor | None: ...
    def listar_por_ids(self, ids: list[str]) -> list[Vendedor]: ...
    def registrar_atribuicao(self, vendedor_id: str, quando: datetime) -> None: ...


class RodizioRepository(Protocol):
    def carregar(self) -> ConfigRodizio: ...

    def salvar(
        self,
        fila: tuple[str, ...],
        ponteiro: int,
        ultimo_vendedor_id: str | None,
        versao_esperada: int,
        quando: datetime,
    ) -> ConfigRodizio:
        """Escrita condicional. Levanta ConflitoConcorrenciaError se a versao mudou."""
        ...
