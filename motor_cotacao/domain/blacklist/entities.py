from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MOTIVO_PADRAO = "Nao trabalhamos com este veiculo"


@dataclass(frozen=True)
class EntradaBlacklist:
    """Bloqueio por marca (modelo None) ou por par marca/modelo exato."""

    id: str
    marca: str
    modelo: str | None = None  # None = marca inteira bloqueada
    motivo: str | None = None
    ativo: bool = True
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        marca = self.marca.strip().upper()
        if not marca:
            raise ValueError("Entrada de blacklist exige marca nao-vazia")
        object.__setattr__(self, "marca", marca)
        if self.modelo is not None:
            modelo = self.modelo.strip().upper()
            object.__setattr__(self, "modelo", modelo or None)

    @property
    def bloqueia_marca_inteira(self) -> bool:
        return self.modelo is None


@dataclass(frozen=True)
class ResultadoBlacklist:
    bloqueado: bool
    motivo: str | None = None
    marca_bloqueada: str | None = None
    modelo_bloqueado: str | None = None
