from __future__ import annotations

from datetime import datetime

import duckdb

from motor_cotacao.domain.erros import ConflitoConcorrenciaError
from motor_cotacao.domain.vendedor.entities import ConfigRodizio


class DuckDBRodizioRepo:
    """Linha unica em config_rodizio, protegida pela coluna versao."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def carregar(self) -> ConfigRodizio:
        row = self._conn.execute("""
            SELECT fila, ponteiro, ultimo_vendedor_id, versao, atualizado_em
            FROM config_rodizio WHERE id = 1
        """).fetchone()
        if row is None:
            return ConfigRodizio()
        return ConfigRodizio(
            fila=tuple(str(v) for v in (row[0] or [])),
            ponteiro=int(row[1]),
            ultimo_vendedor_id=str(row[2]) if row[2] else None,
            versao=int(row[3]),
            atualizado_em=row[4] if isinstance(row[4], datetime) else None,
        )

    def salvar(
        self,
        fila: tuple[str, ...],
        ponteiro: int,
        ultimo_vendedor_id: str | None,
        versao_esperada: int,
        quando: datetime,
    ) -> ConfigRodizio:
        """Compare-and-swap na versao. Zero linhas afetadas = outro escreveu antes."""
        row = self._conn.execute(
            """UPDATE config_rodizio
               SET fila = CAST(? AS VARCHAR[]), ponteiro = ?, ultimo_vendedor_id = ?,
                   versao = versao + 1, atualizado_em = ?
               WHERE id = 1 AND versao = ?
               RETURNING versao""",
            [list(fila), ponteiro, ultimo_vendedor_id, quando, versao_esperada],
        ).fetchone()
        if row is None:
            raise ConflitoConcorrenciaError(
                f"config_rodizio mudou (versao esperada {versao_esperada})"
            )
        return ConfigRodizio(
            fila=fila,
            ponteiro=ponteiro,
            ultimo_vendedor_id=ultimo_vendedor_id,
            versao=int(row[0]),
            atualizado_em=quando,
        )
