from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import duckdb

from motor_cotacao.application.unidade_de_trabalho import Repositorios
from motor_cotacao.domain.erros import ConflitoConcorrenciaError

from .repositories.duckdb_cotacao_repo import DuckDBCotacaoRepo
from .repositories.duckdb_rodizio_repo import DuckDBRodizioRepo
from .repositories.duckdb_vendedor_repo import DuckDBVendedorRepo


class DuckDBUnidadeDeTrabalho:
    """Uma transacao por bloco `with`, num cursor proprio.

    cursor() abre uma conexao duplicada sobre o mesmo banco, segura para uso
    em outra thread. Conflitos de MVCC (duckdb.TransactionException) viram
    ConflitoConcorrenciaError.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    @contextmanager
    def __call__(self) -> Iterator[Repositorios]:
        cur = self._conn.cursor()
        try:
            cur.begin()
            try:
                yield Repositorios(
                    rodizio=DuckDBRodizioRepo(cur),
                    vendedores=DuckDBVendedorRepo(cur),
                    cotacoes=DuckDBCotacaoRepo(cur),
                )
            except duckdb.TransactionException as err:
                cur.rollback()
                raise ConflitoConcorrenciaError(str(err)) from err
            except BaseException:
                cur.rollback()
                raise
            try:
                cur.commit()
            except duckdb.TransactionException as err:
                raise ConflitoConcorrenciaError(str(err)) from err
        finally:
            cur.close()
