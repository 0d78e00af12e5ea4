from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .enums import CategoriaCliente, TipoUso

_CENTAVOS = Decimal("0.01")


@dataclass(frozen=True)
class ValorFipe:
    """Valor de referencia FIPE em Decimal. Nunca negativo. Nunca float."""

    valor: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.valor, float):
            raise ValueError("Valor FIPE deve ser Decimal, nao float")
        if self.valor < Decimal("0"):
            raise ValueError("Valor FIPE nao pode ser negativo")
        if self.valor != self.valor.quantize(_CENTAVOS):
            raise ValueError("Valor FIPE deve ter no maximo 2 casas decimais")


@dataclass(frozen=True)
class Veiculo:
    """Dados do veiculo ja resolvidos pela consulta FIPE (colaborador externo)."""

    categoria_cliente: CategoriaCliente
    tipo_uso: TipoUso
    tipo_bruto: str
    marca: str
    modelo: str
    valor_fipe: ValorFipe
    placa: str | None = None
    ano: str | None = None

    def __post_init__(self) -> None:
        if not self.marca.strip():
            raise ValueError("Marca nao pode ser vazia")
        if not self.modelo.strip():
            raise ValueError("Modelo nao pode ser vazio")
