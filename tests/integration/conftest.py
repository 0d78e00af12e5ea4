# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator
from decimal import Decimal

import duckdb
import pytest
from fastapi.testclient import TestClient

from motor_cotacao.domain.blacklist.entities import EntradaBlacklist
from motor_cotacao.domain.precificacao.entities import RegraPreco
from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo
from motor_cotacao.domain.vendedor.entities import Vendedor
from motor_cotacao.domain.vendedor.enums import StatusVendedor
from motor_cotacao.infrastructure.duckdb_connection import aplicar_schema
from motor_cotacao.infrastructure.repositories.duckdb_blacklist_repo import DuckDBBlacklistRepo
from motor_cotacao.infrastructure.repositories.duckdb_regra_preco_repo import DuckDBRegraPrecoRepo
from motor_cotacao.infrastructure.repositories.duckdb_vendedor_repo import DuckDBVendedorRepo


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com regras, blacklist e fila A, B(ferias), C.

    Escopo por teste: o rodizio e as cotacoes mudam estado.
    """
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)

    # --- Regras de preco ---  (MOTO fica sem regra de proposito)
    regras = DuckDBRegraPrecoRepo(conn)
    regras.adicionar(RegraPreco(
        id="normal-ate-180k", categoria=CategoriaVeiculo.NORMAL,
        valor_min=Decimal("0"), valor_max=Decimal("180000"),
        mensalidade=Decimal("120"), adesao=Decimal("500"),
        desconto_adesao_pct=Decimal("20"),
    ))
    regras.adicionar(RegraPreco(
        id="especial-todas", categoria=CategoriaVeiculo.ESPECIAL,
        valor_min=Decimal("0"), valor_max=None,
        mensalidade=Decimal("189.90"), adesao=Decimal("379.80"),
        desconto_adesao_pct=Decimal("15"), cota_participacao=Decimal("2500"),
    ))

    # --- Blacklist ---
    blacklist = DuckDBBlacklistRepo(conn)
    blacklist.adicionar(EntradaBlacklist(id="bl-1", marca="FIAT"))
    blacklist.adicionar(EntradaBlacklist(
        id="bl-2", marca="VW", modelo="KOMBI", motivo="Modelo fora de linha",
    ))

    # --- Vendedores e fila ---
    vendedores = DuckDBVendedorRepo(conn)
    vendedores.salvar(Vendedor(id="A", nome="Ana", status=StatusVendedor.ACTIVE))
    vendedores.salvar(Vendedor(id="B", nome="Bruno", status=StatusVendedor.VACATION))
    vendedores.salvar(Vendedor(id="C", nome="Carla", status=StatusVendedor.ACTIVE))
    conn.execute(
        "UPDATE config_rodizio SET fila = CAST(? AS VARCHAR[]), ponteiro = -1 WHERE id = 1",
        [["A", "B", "C"]],
    )

    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from motor_cotacao.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from motor_cotacao.infrastructure.config import get_settings
    get_settings.cache_clear()

    from motor_cotacao.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
