from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import duckdb

from motor_cotacao.domain.precificacao.entities import RegraPreco
from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo


class DuckDBRegraPrecoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar_ativas_por_categoria(self, categoria: CategoriaVeiculo) -> list[RegraPreco]:
        """Ordem de insercao (criado_em, id) preservada para o desempate."""
        rows = self._conn.execute("""
            SELECT id, categoria, valor_min, valor_max, mensalidade, adesao,
                   desconto_adesao_pct, cota_participacao, ativo, criado_em
            FROM regras_preco
            WHERE ativo AND categoria = ?
            ORDER BY criado_em, id
        """, [categoria.value]).fetchall()
        return [self._hidratar(r) for r in rows]

    def adicionar(self, regra: RegraPreco) -> None:
        self._conn.execute(
            """INSERT INTO regras_preco
               (id, categoria, valor_min, valor_max, mensalidade, adesao,
                desconto_adesao_pct, cota_participacao, ativo, criado_em)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            [regra.id, regra.categoria.value, regra.valor_min, regra.valor_max,
             regra.mensalidade, regra.adesao, regra.desconto_adesao_pct,
             regra.cota_participacao, regra.ativo, regra.criado_em or datetime.now()],
        )

    def _hidratar(self, row: tuple) -> RegraPreco:  # type: ignore[type-arg]
        """Colunas: id(0), categoria(1), valor_min(2), valor_max(3), mensalidade(4),
        adesao(5), desconto_adesao_pct(6), cota_participacao(7), ativo(8), criado_em(9)"""
        return RegraPreco(
            id=str(row[0]),
            categoria=CategoriaVeiculo(str(row[1])),
            valor_min=Decimal(str(row[2])),
            valor_max=Decimal(str(row[3])) if row[3] is not None else None,
            mensalidade=Decimal(str(row[4])),
            adesao=Decimal(str(row[5])),
            desconto_adesao_pct=Decimal(str(row[6])),
            cota_participacao=Decimal(str(row[7])) if row[7] is not None else None,
            ativo=bool(row[8]),
            criado_em=row[9] if isinstance(row[9], datetime) else None,
        )
