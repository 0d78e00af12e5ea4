"""Resolucao de categoria de precificacao. Funcao pura, zero IO.

ADR: a ordem de prioridade e uma tabela explicita, avaliada de cima para baixo.
A primeira regra que casa define a categoria; a ultima casa sempre (total).
"""
from __future__ import annotations

import unicodedata
from collections.abc import Callable
from dataclasses import dataclass

from .enums import CategoriaCliente, CategoriaVeiculo, TipoUso, TipoVeiculo


@dataclass(frozen=True)
class EntradaCategoria:
    """Uma linha da tabela de prioridade."""

    descricao: str
    casa: Callable[[str, CategoriaCliente, TipoUso], bool]
    categoria: CategoriaVeiculo


def normalizar_tipo_bruto(tipo_bruto: str) -> str:
    """'  Caminhão ' -> 'CAMINHAO'."""
    decomposto = unicodedata.normalize("NFKD", tipo_bruto.strip().upper())
    return "".join(c for c in decomposto if not unicodedata.combining(c))


PRIORIDADE_CATEGORIAS: tuple[EntradaCategoria, ...] = (
    EntradaCategoria(
        descricao="motocicleta sempre e MOTO",
        casa=lambda tipo, _cliente, _uso: tipo == TipoVeiculo.MOTOCICLETA,
        categoria=CategoriaVeiculo.MOTO,
    ),
    EntradaCategoria(
        descricao="caminhao sempre e UTILITARIO",
        casa=lambda tipo, _cliente, _uso: tipo == TipoVeiculo.CAMINHAO,
        categoria=CategoriaVeiculo.UTILITARIO,
    ),
    EntradaCategoria(
        descricao="cliente escolheu UTILITARIO",
        casa=lambda _tipo, cliente, _uso: cliente == CategoriaCliente.UTILITARIO,
        categoria=CategoriaVeiculo.UTILITARIO,
    ),
    EntradaCategoria(
        descricao="uso comercial e ESPECIAL",
        casa=lambda _tipo, _cliente, uso: uso == TipoUso.COMERCIAL,
        categoria=CategoriaVeiculo.ESPECIAL,
    ),
    EntradaCategoria(
        descricao="leve de uso particular",
        casa=lambda _tipo, _cliente, _uso: True,
        categoria=CategoriaVeiculo.NORMAL,
    ),
)


def determinar_categoria(
    tipo_bruto: str,
    categoria_cliente: CategoriaCliente,
    tipo_uso: TipoUso,
) -> CategoriaVeiculo:
    tipo = normalizar_tipo_bruto(tipo_bruto)
    for entrada in PRIORIDADE_CATEGORIAS:
        if entrada.casa(tipo, categoria_cliente, tipo_uso):
            return entrada.categoria
    # Inalcancavel: a ultima entrada casa sempre.
    return CategoriaVeiculo.NORMAL
