"""Resultado da avaliacao de elegibilidade: uniao fechada, um tipo por desfecho.

Rejeicoes de negocio sao dados, nunca excecoes.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Literal

from motor_cotacao.domain.precificacao.entities import ValoresCotacao
from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo

from .enums import CodigoRejeicao


@dataclass(frozen=True)
class CotacaoAceita:
    categoria: CategoriaVeiculo
    valores: ValoresCotacao
    regra_id: str

    kind: ClassVar[Literal["ACCEPTED"]] = "ACCEPTED"


@dataclass(frozen=True)
class RejeicaoBlacklist:
    marca: str
    modelo: str
    motivo: str

    kind: ClassVar[Literal["REJECTED"]] = "REJECTED"
    codigo: ClassVar[CodigoRejeicao] = CodigoRejeicao.BLACKLISTED
    salvar_como_lead: ClassVar[bool] = True

    @property
    def mensagem(self) -> str:
        return self.motivo


@dataclass(frozen=True)
class RejeicaoLimiteFipe:
    categoria: CategoriaVeiculo
    valor_fipe: Decimal
    limite: Decimal

    kind: ClassVar[Literal["REJECTED"]] = "REJECTED"
    codigo: ClassVar[CodigoRejeicao] = CodigoRejeicao.OVER_LIMIT
    salvar_como_lead: ClassVar[bool] = True

    @property
    def mensagem(self) -> str:
        return f"Valor acima do limite para categoria {self.categoria}"


@dataclass(frozen=True)
class RejeicaoSemRegra:
    categoria: CategoriaVeiculo
    valor_fipe: Decimal
    sem_regras_configuradas: bool  # True = categoria sem nenhuma regra ativa

    kind: ClassVar[Literal["REJECTED"]] = "REJECTED"
    codigo: ClassVar[CodigoRejeicao] = CodigoRejeicao.NO_RULE
    salvar_como_lead: ClassVar[bool] = False

    @property
    def mensagem(self) -> str:
        return "Nao foi possivel calcular o valor da cotacao"


Rejeicao = RejeicaoBlacklist | RejeicaoLimiteFipe | RejeicaoSemRegra
ResultadoElegibilidade = CotacaoAceita | Rejeicao
