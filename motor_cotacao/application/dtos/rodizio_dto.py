from __future__ import annotations

from pydantic import BaseModel

from motor_cotacao.domain.vendedor.entities import ConfigRodizio


class AtribuicaoDTO(BaseModel):
    vendedor_id: str
    posicao: int


class EstadoRodizioDTO(BaseModel):
    fila: list[str]
    ponteiro: int
    ultimo_vendedor_id: str | None
    versao: int
    atualizado_em: str | None

    @classmethod
    def from_domain(cls, config: ConfigRodizio) -> EstadoRodizioDTO:
        return cls(
            fila=list(config.fila),
            ponteiro=config.ponteiro,
            ultimo_vendedor_id=config.ultimo_vendedor_id,
            versao=config.versao,
            atualizado_em=config.atualizado_em.isoformat() if config.atualizado_em else None,
        )
