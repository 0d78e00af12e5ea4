from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .enums import CategoriaVeiculo

# ADR: Tetos como constante de modulo. Limite inclusivo (valor == teto passa).
LIMITES_FIPE: dict[CategoriaVeiculo, Decimal] = {
    CategoriaVeiculo.NORMAL: Decimal("180000"),
    CategoriaVeiculo.ESPECIAL: Decimal("190000"),
    CategoriaVeiculo.UTILITARIO: Decimal("450000"),
    CategoriaVeiculo.MOTO: Decimal("90000"),
}


@dataclass(frozen=True)
class VerificacaoLimite:
    permitido: bool
    limite: Decimal


def verificar_limite_fipe(categoria: CategoriaVeiculo, valor: Decimal) -> VerificacaoLimite:
    limite = LIMITES_FIPE[categoria]
    return VerificacaoLimite(permitido=valor <= limite, limite=limite)
