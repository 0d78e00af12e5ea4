from __future__ import annotations

from typing import Protocol

from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo

from .entities import RegraPreco


class RegraPrecoRepository(Protocol):
    def listar_ativas_por_categoria(self, categoria: CategoriaVeiculo) -> list[RegraPreco]: ...
    def adicionar(self, regra: RegraPreco) -> None: ...
