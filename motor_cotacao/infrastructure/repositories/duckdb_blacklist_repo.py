from __future__ import annotations

from datetime import datetime

import duckdb

from motor_cotacao.domain.blacklist.entities import EntradaBlacklist


class DuckDBBlacklistRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar_ativas(self) -> list[EntradaBlacklist]:
        rows = self._conn.execute("""
            SELECT id, marca, modelo, motivo, ativo, criado_em
            FROM blacklist
            WHERE ativo
            ORDER BY criado_em, id
        """).fetchall()
        return [self._hidratar(r) for r in rows]

    def adicionar(self, entrada: EntradaBlacklist) -> None:
        self._conn.execute(
            """INSERT INTO blacklist (id, marca, modelo, motivo, ativo, criado_em)
               VALUES (?, ?, ?, ?, ?, ?)""",
            [entrada.id, entrada.marca, entrada.modelo, entrada.motivo,
             entrada.ativo, entrada.criado_em or datetime.now()],
        )

    def desativar(self, entrada_id: str) -> bool:
        """Soft delete: a entrada deixa de bloquear mas continua no banco."""
        row = self._conn.execute(
            "UPDATE blacklist SET ativo = FALSE WHERE id = ? RETURNING id",
            [entrada_id],
        ).fetchone()
        return row is not None

    def _hidratar(self, row: tuple) -> EntradaBlacklist:  # type: ignore[type-arg]
        return EntradaBlacklist(
            id=str(row[0]),
            marca=str(row[1]),
            modelo=str(row[2]) if row[2] else None,
            motivo=str(row[3]) if row[3] else None,
            ativo=bool(row[4]),
            criado_em=row[5] if isinstance(row[5], datetime) else None,
        )
