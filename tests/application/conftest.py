from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import datetime

import duckdb
import pytest

from motor_cotacao.application.services.rodizio_service import RodizioService
from motor_cotacao.domain.vendedor.entities import Vendedor
from motor_cotacao.domain.vendedor.enums import StatusVendedor
from motor_cotacao.infrastructure.duckdb_connection import aplicar_schema
from motor_cotacao.infrastructure.repositories.duckdb_vendedor_repo import DuckDBVendedorRepo
from motor_cotacao.infrastructure.unidade_de_trabalho import DuckDBUnidadeDeTrabalho


@pytest.fixture()
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo por teste, com schema aplicado."""
    c = duckdb.connect(":memory:")
    aplicar_schema(c)
    yield c
    c.close()


@pytest.fixture()
def uow(conn: duckdb.DuckDBPyConnection) -> DuckDBUnidadeDeTrabalho:
    return DuckDBUnidadeDeTrabalho(conn)


@pytest.fixture()
def rodizio(uow: DuckDBUnidadeDeTrabalho) -> RodizioService:
    return RodizioService(
        uow=uow,
        max_tentativas=50,
        backoff_segundos=0.001,
        relogio=lambda: datetime(2026, 3, 1, 9, 0, 0),
    )


@pytest.fixture()
def montar_fila(
    conn: duckdb.DuckDBPyConnection,
) -> Callable[..., None]:
    """Cadastra vendedores e grava a fila na ordem recebida.

    Uso: montar_fila("A", "B", "C", status={"B": StatusVendedor.INACTIVE})
    """

    def _montar(*ids: str, status: dict[str, StatusVendedor] | None = None) -> None:
        repo = DuckDBVendedorRepo(conn)
        for vid in ids:
            repo.salvar(Vendedor(
                id=vid,
                nome=f"Vendedor {vid}",
                status=(status or {}).get(vid, StatusVendedor.ACTIVE),
            ))
        conn.execute(
            "UPDATE config_rodizio SET fila = CAST(? AS VARCHAR[]), ponteiro = -1 WHERE id = 1",
            [list(ids)],
        )

    return _montar
