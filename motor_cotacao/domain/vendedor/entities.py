from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import PapelVendedor, StatusVendedor


@dataclass(frozen=True)
class Vendedor:
    id: str
    nome: str
    status: StatusVendedor = StatusVendedor.ACTIVE
    participa_rodizio: bool = True
    papel: PapelVendedor = PapelVendedor.SELLER
    email: str | None = None
    telefone: str | None = None
    ultima_atribuicao_em: datetime | None = None
    total_atribuicoes: int = 0

    @property
    def elegivel_rodizio(self) -> bool:
        """Somente ACTIVE e participante entra na rotacao."""
        return self.status == StatusVendedor.ACTIVE and self.participa_rodizio


@dataclass(frozen=True)
class ConfigRodizio:
    """Estado persistido da fila.

    ponteiro aponta para a ultima posicao atribuida (-1 = antes do primeiro).
    versao e incrementada a cada escrita (controle otimista de concorrencia).
    """

    fila: tuple[str, ...] = ()
    ponteiro: int = -1
    ultimo_vendedor_id: str | None = None
    versao: int = 0
    atualizado_em: datetime | None = None
