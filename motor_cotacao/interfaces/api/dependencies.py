from collections.abc import Iterator

from motor_cotacao.application.services.cotacao_service import CotacaoService
from motor_cotacao.application.services.rodizio_service import RodizioService
from motor_cotacao.infrastructure.config import get_settings
from motor_cotacao.infrastructure.duckdb_connection import get_connection
from motor_cotacao.infrastructure.repositories.duckdb_blacklist_repo import DuckDBBlacklistRepo
from motor_cotacao.infrastructure.repositories.duckdb_cotacao_repo import DuckDBCotacaoRepo
from motor_cotacao.infrastructure.repositories.duckdb_regra_preco_repo import DuckDBRegraPrecoRepo
from motor_cotacao.infrastructure.unidade_de_trabalho import DuckDBUnidadeDeTrabalho


def get_rodizio_service() -> RodizioService:
    settings = get_settings()
    return RodizioService(
        uow=DuckDBUnidadeDeTrabalho(get_connection()),
        max_tentativas=settings.rodizio_max_tentativas,
        backoff_segundos=settings.rodizio_backoff_segundos,
    )


def get_cotacao_service() -> Iterator[CotacaoService]:
    # Endpoints sync rodam no threadpool: um cursor por request.
    conn = get_connection().cursor()
    try:
        yield CotacaoService(
            blacklist_repo=DuckDBBlacklistRepo(conn),
            regra_repo=DuckDBRegraPrecoRepo(conn),
            cotacao_repo=DuckDBCotacaoRepo(conn),
            rodizio=get_rodizio_service(),
            validade_dias=get_settings().cotacao_validade_dias,
        )
    finally:
        conn.close()
