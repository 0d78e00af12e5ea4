"""Atribuicoes simultaneas: cada requisicao numa thread, cada uma com seu cursor."""
from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import duckdb

from motor_cotacao.application.services.cotacao_service import CotacaoService
from motor_cotacao.application.services.rodizio_service import RodizioService, VendedorAtribuido
from motor_cotacao.domain.precificacao.entities import RegraPreco
from motor_cotacao.domain.veiculo.enums import CategoriaCliente, CategoriaVeiculo, TipoUso
from motor_cotacao.domain.veiculo.value_objects import ValorFipe, Veiculo
from motor_cotacao.infrastructure.repositories.duckdb_blacklist_repo import DuckDBBlacklistRepo
from motor_cotacao.infrastructure.repositories.duckdb_cotacao_repo import DuckDBCotacaoRepo
from motor_cotacao.infrastructure.repositories.duckdb_regra_preco_repo import DuckDBRegraPrecoRepo

VENDEDORES = ["A", "B", "C", "D", "E", "F"]


def _em_paralelo(n: int, tarefa: Callable[[], str | None]) -> list[str | None]:
    """Dispara n chamadas ao mesmo tempo; a barreira maximiza a disputa."""
    barreira = threading.Barrier(n)

    def _rodar() -> str | None:
        barreira.wait(timeout=10)
        return tarefa()

    with ThreadPoolExecutor(max_workers=n) as pool:
        futures = [pool.submit(_rodar) for _ in range(n)]
        return [f.result(timeout=30) for f in futures]


def test_atribuicoes_concorrentes_distintas(
    rodizio: RodizioService, montar_fila: Callable[..., None],
):
    montar_fila(*VENDEDORES)

    def _atribuir() -> str | None:
        resultado = rodizio.atribuir_proximo()
        return resultado.vendedor_id if isinstance(resultado, VendedorAtribuido) else None

    ids = _em_paralelo(len(VENDEDORES), _atribuir)
    assert sorted(i for i in ids if i is not None) == VENDEDORES

    estado = rodizio.estado()
    assert estado.versao == len(VENDEDORES)


def test_cotacoes_concorrentes_vendedores_distintos(
    conn: duckdb.DuckDBPyConnection,
    rodizio: RodizioService,
    montar_fila: Callable[..., None],
):
    montar_fila(*VENDEDORES[:4])
    DuckDBRegraPrecoRepo(conn).adicionar(RegraPreco(
        id="normal-1",
        categoria=CategoriaVeiculo.NORMAL,
        valor_min=Decimal("0"),
        valor_max=None,
        mensalidade=Decimal("99.90"),
        adesao=Decimal("199.80"),
    ))
    veiculo = Veiculo(
        categoria_cliente=CategoriaCliente.LEVE,
        tipo_uso=TipoUso.PARTICULAR,
        tipo_bruto="AUTOMOVEL",
        marca="HONDA",
        modelo="CIVIC",
        valor_fipe=ValorFipe(Decimal("95000")),
    )

    def _registrar() -> str | None:
        cur = conn.cursor()
        try:
            service = CotacaoService(
                blacklist_repo=DuckDBBlacklistRepo(cur),
                regra_repo=DuckDBRegraPrecoRepo(cur),
                cotacao_repo=DuckDBCotacaoRepo(cur),
                rodizio=rodizio,
            )
            registro = service.registrar(veiculo)
            return registro.cotacao.vendedor_id if registro.cotacao else None
        finally:
            cur.close()

    ids = _em_paralelo(4, _registrar)
    assert sorted(i for i in ids if i is not None) == VENDEDORES[:4]

    row = conn.execute(
        "SELECT count(*), count(DISTINCT vendedor_id) FROM cotacoes WHERE vendedor_id IS NOT NULL",
    ).fetchone()
    assert row == (4, 4)
