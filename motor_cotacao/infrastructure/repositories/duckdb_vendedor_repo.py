from __future__ import annotations

from datetime import datetime

import duckdb

from motor_cotacao.domain.vendedor.entities import Vendedor
from motor_cotacao.domain.vendedor.enums import PapelVendedor, StatusVendedor

_COLUNAS = """id, nome, email, telefone, status, participa_rodizio, papel,
              ultima_atribuicao_em, total_atribuicoes"""


class DuckDBVendedorRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, vendedor_id: str) -> Vendedor | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM vendedores WHERE id = ?",  # noqa: S608
            [vendedor_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar_por_ids(self, ids: list[str]) -> list[Vendedor]:
        if not ids:
            return []
        rows = self._conn.execute(
            f"""SELECT {_COLUNAS} FROM vendedores
                WHERE id IN (SELECT UNNEST(CAST(? AS VARCHAR[])))""",  # noqa: S608
            [ids],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def registrar_atribuicao(self, vendedor_id: str, quando: datetime) -> None:
        self._conn.execute(
            """UPDATE vendedores
               SET ultima_atribuicao_em = ?, total_atribuicoes = total_atribuicoes + 1
               WHERE id = ?""",
            [quando, vendedor_id],
        )

    def salvar(self, vendedor: Vendedor) -> None:
        """Upsert usado pelo cadastro e pelos testes."""
        self._conn.execute(
            f"""INSERT OR REPLACE INTO vendedores ({_COLUNAS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",  # noqa: S608
            [vendedor.id, vendedor.nome, vendedor.email, vendedor.telefone,
             vendedor.status.value, vendedor.participa_rodizio, vendedor.papel.value,
             vendedor.ultima_atribuicao_em, vendedor.total_atribuicoes],
        )

    def _hidratar(self, row: tuple) -> Vendedor:  # type: ignore[type-arg]
        return Vendedor(
            id=str(row[0]),
            nome=str(row[1]),
            email=str(row[2]) if row[2] else None,
            telefone=str(row[3]) if row[3] else None,
            status=StatusVendedor(str(row[4])),
            participa_rodizio=bool(row[5]),
            papel=PapelVendedor(str(row[6])),
            ultima_atribuicao_em=row[7] if isinstance(row[7], datetime) else None,
            total_atribuicoes=int(row[8]) if row[8] else 0,
        )
