from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo

_ZERO = Decimal("0")
_CEM = Decimal("100")


@dataclass(frozen=True)
class RegraPreco:
    """Faixa de precificacao [valor_min, valor_max). valor_max None = sem teto.

    Valores monetarios em Decimal. Nunca float. Nunca negativos.
    """

    id: str
    categoria: CategoriaVeiculo
    valor_min: Decimal
    valor_max: Decimal | None
    mensalidade: Decimal
    adesao: Decimal
    desconto_adesao_pct: Decimal = _ZERO
    cota_participacao: Decimal | None = None
    ativo: bool = True
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        for nome in ("valor_min", "mensalidade", "adesao"):
            if getattr(self, nome) < _ZERO:
                raise ValueError(f"Regra de preco: {nome} nao pode ser negativo")
        if self.cota_participacao is not None and self.cota_participacao < _ZERO:
            raise ValueError("Regra de preco: cota_participacao nao pode ser negativa")
        if self.valor_max is not None and self.valor_max <= self.valor_min:
            raise ValueError("Regra de preco: valor_max deve ser maior que valor_min")
        if not _ZERO <= self.desconto_adesao_pct <= _CEM:
            raise ValueError("Regra de preco: desconto deve estar entre 0 e 100")

    def contem(self, valor: Decimal) -> bool:
        if valor < self.valor_min:
            return False
        return self.valor_max is None or valor < self.valor_max


@dataclass(frozen=True)
class ValoresCotacao:
    mensalidade: Decimal
    adesao: Decimal
    adesao_desconto: Decimal
    cota_participacao: Decimal | None
