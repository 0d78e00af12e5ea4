from __future__ import annotations

from decimal import Decimal

import duckdb

from motor_cotacao.domain.cotacao.entities import Cotacao
from motor_cotacao.domain.cotacao.enums import CodigoRejeicao, StatusCotacao
from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo, TipoUso

_COLUNAS = """id, categoria, valor_fipe, marca, modelo, tipo_uso, placa, ano,
              mensalidade, adesao, adesao_desconto, cota_participacao, vendedor_id,
              status, codigo_rejeicao, motivo_rejeicao, pendente_triagem,
              criado_em, expira_em"""


class DuckDBCotacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, cotacao: Cotacao) -> None:
        c = cotacao
        self._conn.execute(
            f"""INSERT INTO cotacoes ({_COLUNAS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",  # noqa: S608
            [c.id, c.categoria.value if c.categoria else None, c.valor_fipe,
             c.marca, c.modelo, c.tipo_uso.value, c.placa, c.ano,
             c.mensalidade, c.adesao, c.adesao_desconto, c.cota_participacao,
             c.vendedor_id, c.status.value,
             c.codigo_rejeicao.value if c.codigo_rejeicao else None,
             c.motivo_rejeicao, c.pendente_triagem, c.criado_em, c.expira_em],
        )

    def buscar_por_id(self, cotacao_id: str) -> Cotacao | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM cotacoes WHERE id = ?",  # noqa: S608
            [cotacao_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar_pendentes_triagem(self) -> list[Cotacao]:
        """Aceitas sem vendedor, para a fila de triagem manual."""
        rows = self._conn.execute(
            f"""SELECT {_COLUNAS} FROM cotacoes
                WHERE pendente_triagem AND vendedor_id IS NULL
                ORDER BY criado_em""",  # noqa: S608
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Cotacao:  # type: ignore[type-arg]
        return Cotacao(
            id=str(row[0]),
            categoria=CategoriaVeiculo(str(row[1])) if row[1] else None,
            valor_fipe=Decimal(str(row[2])),
            marca=str(row[3]),
            modelo=str(row[4]),
            tipo_uso=TipoUso(str(row[5])),
            placa=str(row[6]) if row[6] else None,
            ano=str(row[7]) if row[7] else None,
            mensalidade=Decimal(str(row[8])),
            adesao=Decimal(str(row[9])),
            adesao_desconto=Decimal(str(row[10])),
            cota_participacao=Decimal(str(row[11])) if row[11] is not None else None,
            vendedor_id=str(row[12]) if row[12] else None,
            status=StatusCotacao(str(row[13])),
            codigo_rejeicao=CodigoRejeicao(str(row[14])) if row[14] else None,
            motivo_rejeicao=str(row[15]) if row[15] else None,
            pendente_triagem=bool(row[16]),
            criado_em=row[17],
            expira_em=row[18],
        )
