from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol

from motor_cotacao.domain.cotacao.repository import CotacaoRepository
from motor_cotacao.domain.vendedor.repository import RodizioRepository, VendedorRepository


@dataclass(frozen=True)
class Repositorios:
    """Repositorios que compartilham a mesma transacao."""

    rodizio: RodizioRepository
    vendedores: VendedorRepository
    cotacoes: CotacaoRepository


class UnidadeDeTrabalho(Protocol):
    """`with uow() as repos:` abre uma transacao; commit ao sair sem erro.

    Conflitos de escrita saem como ConflitoConcorrenciaError.
    """

    def __call__(self) -> AbstractContextManager[Repositorios]: ...
