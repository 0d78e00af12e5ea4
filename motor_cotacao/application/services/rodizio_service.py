"""Imperative Shell do rodizio: transacao, escrita condicional e retentativas.

A escolha do proximo vendedor e pura (domain/vendedor/rodizio.py). Aqui so se
carrega o estado, grava o novo ponteiro com checagem de versao e repete a
operacao inteira quando outra requisicao escreveu primeiro.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, TypeVar

from motor_cotacao.domain.erros import ConflitoConcorrenciaError
from motor_cotacao.domain.vendedor.entities import ConfigRodizio
from motor_cotacao.domain.vendedor.enums import MotivoSemVendedor
from motor_cotacao.domain.vendedor.rodizio import proximo_da_fila, reposicionar_ponteiro

from ..unidade_de_trabalho import Repositorios, UnidadeDeTrabalho

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class VendedorAtribuido:
    vendedor_id: str
    posicao: int


@dataclass(frozen=True)
class SemVendedorElegivel:
    motivo: MotivoSemVendedor

    erro: ClassVar[str] = "NO_ELIGIBLE_SELLER"


ResultadoAtribuicao = VendedorAtribuido | SemVendedorElegivel


class RodizioService:
    def __init__(
        self,
        uow: UnidadeDeTrabalho,
        max_tentativas: int = 5,
        backoff_segundos: float = 0.01,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._uow = uow
        self._max_tentativas = max(1, max_tentativas)
        self._backoff = backoff_segundos
        self._relogio = relogio

    def atribuir_proximo(self) -> ResultadoAtribuicao:
        try:
            resultado = self.executar(self.reservar)
        except ConflitoConcorrenciaError:
            return SemVendedorElegivel(motivo=MotivoSemVendedor.CONFLITO)
        if isinstance(resultado, SemVendedorElegivel):
            logger.warning("Rodizio sem vendedor elegivel (fila vazia ou todos inelegiveis)")
        return resultado

    def reservar(self, repos: Repositorios) -> ResultadoAtribuicao:
        """Avanca o ponteiro dentro da transacao do chamador.

        So e definitivo quando a transacao faz commit; um rollback devolve o
        vendedor para a fila na mesma posicao.
        """
        config = repos.rodizio.carregar()
        vendedores = repos.vendedores.listar_por_ids(list(config.fila))
        elegiveis = {v.id for v in vendedores if v.elegivel_rodizio}

        escolha = proximo_da_fila(config.fila, config.ponteiro, elegiveis)
        if escolha is None:
            return SemVendedorElegivel(motivo=MotivoSemVendedor.FILA_VAZIA)

        agora = self._relogio()
        repos.rodizio.salvar(
            fila=config.fila,
            ponteiro=escolha.posicao,
            ultimo_vendedor_id=escolha.vendedor_id,
            versao_esperada=config.versao,
            quando=agora,
        )
        repos.vendedores.registrar_atribuicao(escolha.vendedor_id, agora)
        return VendedorAtribuido(vendedor_id=escolha.vendedor_id, posicao=escolha.posicao)

    def executar(self, operacao: Callable[[Repositorios], T]) -> T:
        """Roda `operacao` numa transacao, repetindo em conflito.

        Raises:
            ConflitoConcorrenciaError: tentativas esgotadas.
        """
        for tentativa in range(1, self._max_tentativas + 1):
            try:
                with self._uow() as repos:
                    return operacao(repos)
            except ConflitoConcorrenciaError as err:
                logger.warning(
                    "Conflito no rodizio (tentativa %d/%d): %s",
                    tentativa, self._max_tentativas, err,
                )
                if tentativa < self._max_tentativas:
                    time.sleep(self._backoff * tentativa)
        logger.error("Rodizio: tentativas esgotadas apos %d conflitos", self._max_tentativas)
        raise ConflitoConcorrenciaError("tentativas esgotadas")

    # ---- Operacoes administrativas (serializadas pela mesma versao) ----

    def estado(self) -> ConfigRodizio:
        return self.executar(lambda repos: repos.rodizio.carregar())

    def reordenar_fila(self, ids: Sequence[str]) -> ConfigRodizio:
        nova_fila = tuple(ids)
        if len(set(nova_fila)) != len(nova_fila):
            raise ValueError("Fila do rodizio nao pode ter vendedor repetido")

        def _op(repos: Repositorios) -> ConfigRodizio:
            existentes = {v.id for v in repos.vendedores.listar_por_ids(list(nova_fila))}
            faltando = [vid for vid in nova_fila if vid not in existentes]
            if faltando:
                raise ValueError(f"Vendedor inexistente: {', '.join(faltando)}")
            config = repos.rodizio.carregar()
            ponteiro = reposicionar_ponteiro(config, nova_fila)
            return repos.rodizio.salvar(
                fila=nova_fila,
                ponteiro=ponteiro,
                ultimo_vendedor_id=config.ultimo_vendedor_id if ponteiro >= 0 else None,
                versao_esperada=config.versao,
                quando=self._relogio(),
            )

        return self.executar(_op)

    def adicionar_participante(self, vendedor_id: str) -> ConfigRodizio:
        """Entra no fim da fila. Idempotente."""

        def _op(repos: Repositorios) -> ConfigRodizio:
            if repos.vendedores.buscar_por_id(vendedor_id) is None:
                raise ValueError(f"Vendedor inexistente: {vendedor_id}")
            config = repos.rodizio.carregar()
            if vendedor_id in config.fila:
                return config
            return repos.rodizio.salvar(
                fila=(*config.fila, vendedor_id),
                ponteiro=config.ponteiro,
                ultimo_vendedor_id=config.ultimo_vendedor_id,
                versao_esperada=config.versao,
                quando=self._relogio(),
            )

        return self.executar(_op)

    def remover_participante(self, vendedor_id: str) -> ConfigRodizio:
        """Se o removido foi o ultimo atribuido, o proximo da fila continua a vez."""

        def _op(repos: Repositorios) -> ConfigRodizio:
            config = repos.rodizio.carregar()
            if vendedor_id not in config.fila:
                return config
            removida = config.fila.index(vendedor_id)
            nova_fila = tuple(v for v in config.fila if v != vendedor_id)
            if config.ultimo_vendedor_id == vendedor_id:
                ponteiro = removida - 1
                ultimo = nova_fila[ponteiro] if ponteiro >= 0 else None
            else:
                ponteiro = reposicionar_ponteiro(config, nova_fila)
                ultimo = config.ultimo_vendedor_id if ponteiro >= 0 else None
            return repos.rodizio.salvar(
                fila=nova_fila,
                ponteiro=ponteiro,
                ultimo_vendedor_id=ultimo,
                versao_esperada=config.versao,
                quando=self._relogio(),
            )

        return self.executar(_op)

    def resetar_ponteiro(self) -> ConfigRodizio:
        def _op(repos: Repositorios) -> ConfigRodizio:
            config = repos.rodizio.carregar()
            return repos.rodizio.salvar(
                fila=config.fila,
                ponteiro=-1,
                ultimo_vendedor_id=None,
                versao_esperada=config.versao,
                quando=self._relogio(),
            )

        return self.executar(_op)
