from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo, TipoUso
from motor_cotacao.domain.veiculo.value_objects import Veiculo

from .enums import CodigoRejeicao, StatusCotacao
from .resultado import CotacaoAceita, Rejeicao, RejeicaoBlacklist

_ZERO = Decimal("0.00")


@dataclass(frozen=True)
class Cotacao:
    """Cotacao persistida. vendedor_id e atribuido uma unica vez, na criacao."""

    id: str
    categoria: CategoriaVeiculo | None
    valor_fipe: Decimal
    marca: str
    modelo: str
    tipo_uso: TipoUso
    mensalidade: Decimal
    adesao: Decimal
    adesao_desconto: Decimal
    cota_participacao: Decimal | None
    status: StatusCotacao
    criado_em: datetime
    expira_em: datetime
    vendedor_id: str | None = None
    codigo_rejeicao: CodigoRejeicao | None = None
    motivo_rejeicao: str | None = None
    pendente_triagem: bool = False  # aceita sem vendedor, triagem manual
    placa: str | None = None
    ano: str | None = None

    @classmethod
    def aceita(
        cls,
        veiculo: Veiculo,
        resultado: CotacaoAceita,
        vendedor_id: str | None,
        criado_em: datetime,
        validade: timedelta,
    ) -> Cotacao:
        v = resultado.valores
        return cls(
            id=str(uuid.uuid4()),
            categoria=resultado.categoria,
            valor_fipe=veiculo.valor_fipe.valor,
            marca=veiculo.marca,
            modelo=veiculo.modelo,
            tipo_uso=veiculo.tipo_uso,
            mensalidade=v.mensalidade,
            adesao=v.adesao,
            adesao_desconto=v.adesao_desconto,
            cota_participacao=v.cota_participacao,
            status=StatusCotacao.PENDING,
            criado_em=criado_em,
            expira_em=criado_em + validade,
            vendedor_id=vendedor_id,
            pendente_triagem=vendedor_id is None,
            placa=veiculo.placa,
            ano=veiculo.ano,
        )

    @classmethod
    def rejeitada(
        cls,
        veiculo: Veiculo,
        rejeicao: Rejeicao,
        criado_em: datetime,
        validade: timedelta,
    ) -> Cotacao:
        """Lead guardado para contato manual: valores zerados, sem vendedor."""
        categoria = None if isinstance(rejeicao, RejeicaoBlacklist) else rejeicao.categoria
        return cls(
            id=str(uuid.uuid4()),
            categoria=categoria,
            valor_fipe=veiculo.valor_fipe.valor,
            marca=veiculo.marca,
            modelo=veiculo.modelo,
            tipo_uso=veiculo.tipo_uso,
            mensalidade=_ZERO,
            adesao=_ZERO,
            adesao_desconto=_ZERO,
            cota_participacao=None,
            status=StatusCotacao.REJECTED,
            criado_em=criado_em,
            expira_em=criado_em + validade,
            codigo_rejeicao=rejeicao.codigo,
            motivo_rejeicao=rejeicao.mensagem,
            placa=veiculo.placa,
            ano=veiculo.ano,
        )
