from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from motor_cotacao.domain.cotacao.entities import Cotacao
from motor_cotacao.domain.cotacao.resultado import (
    CotacaoAceita,
    RejeicaoBlacklist,
    RejeicaoLimiteFipe,
    RejeicaoSemRegra,
    ResultadoElegibilidade,
)
from motor_cotacao.domain.veiculo.enums import CategoriaCliente, TipoUso
from motor_cotacao.domain.veiculo.value_objects import ValorFipe, Veiculo

# Teto da coluna DECIMAL(12, 2) em cotacoes.valor_fipe.
VALOR_FIPE_MAXIMO = Decimal("9999999999.99")


class VeiculoRequestDTO(BaseModel):
    """Veiculo ja consultado (placa + FIPE). Validacao de campos e do chamador."""

    categoria: CategoriaCliente
    tipo_uso: TipoUso
    tipo_bruto: str = Field(min_length=1)
    marca: str = Field(min_length=1)
    modelo: str = Field(min_length=1)
    valor_fipe: Decimal = Field(ge=0, le=VALOR_FIPE_MAXIMO, decimal_places=2)
    placa: str | None = None
    ano: str | None = None

    def to_domain(self) -> Veiculo:
        return Veiculo(
            categoria_cliente=self.categoria,
            tipo_uso=self.tipo_uso,
            tipo_bruto=self.tipo_bruto,
            marca=self.marca,
            modelo=self.modelo,
            valor_fipe=ValorFipe(self.valor_fipe),
            placa=self.placa,
            ano=self.ano,
        )


class ValoresDTO(BaseModel):
    mensalidade: str
    adesao: str
    adesao_desconto: str
    cota_participacao: str | None


class DetalhesBlacklistDTO(BaseModel):
    marca: str
    modelo: str
    motivo: str


class DetalhesLimiteDTO(BaseModel):
    categoria: str
    valor_fipe: str
    limite: str


class DetalhesSemRegraDTO(BaseModel):
    categoria: str
    valor_fipe: str


class AceitaDTO(BaseModel):
    kind: Literal["ACCEPTED"] = "ACCEPTED"
    categoria: str
    valores: ValoresDTO


class RejeitadaDTO(BaseModel):
    kind: Literal["REJECTED"] = "REJECTED"
    codigo: Literal["BLACKLISTED", "OVER_LIMIT", "NO_RULE"]
    mensagem: str
    detalhes: DetalhesBlacklistDTO | DetalhesLimiteDTO | DetalhesSemRegraDTO
    salvar_como_lead: bool


ResultadoDTO = Annotated[AceitaDTO | RejeitadaDTO, Field(discriminator="kind")]


def resultado_para_dto(resultado: ResultadoElegibilidade) -> AceitaDTO | RejeitadaDTO:
    if isinstance(resultado, CotacaoAceita):
        v = resultado.valores
        return AceitaDTO(
            categoria=resultado.categoria.value,
            valores=ValoresDTO(
                mensalidade=str(v.mensalidade),
                adesao=str(v.adesao),
                adesao_desconto=str(v.adesao_desconto),
                cota_participacao=str(v.cota_participacao) if v.cota_participacao is not None else None,
            ),
        )

    detalhes: DetalhesBlacklistDTO | DetalhesLimiteDTO | DetalhesSemRegraDTO
    if isinstance(resultado, RejeicaoBlacklist):
        detalhes = DetalhesBlacklistDTO(
            marca=resultado.marca, modelo=resultado.modelo, motivo=resultado.motivo,
        )
    elif isinstance(resultado, RejeicaoLimiteFipe):
        detalhes = DetalhesLimiteDTO(
            categoria=resultado.categoria.value,
            valor_fipe=str(resultado.valor_fipe),
            limite=str(resultado.limite),
        )
    elif isinstance(resultado, RejeicaoSemRegra):
        detalhes = DetalhesSemRegraDTO(
            categoria=resultado.categoria.value, valor_fipe=str(resultado.valor_fipe),
        )
    else:
        raise TypeError(f"Resultado de elegibilidade desconhecido: {resultado!r}")
    return RejeitadaDTO(
        codigo=resultado.codigo.value,
        mensagem=resultado.mensagem,
        detalhes=detalhes,
        salvar_como_lead=resultado.salvar_como_lead,
    )


class CotacaoDTO(BaseModel):
    id: str
    status: str
    categoria: str | None
    valor_fipe: str
    marca: str
    modelo: str
    tipo_uso: str
    placa: str | None
    mensalidade: str
    adesao: str
    adesao_desconto: str
    cota_participacao: str | None
    vendedor_id: str | None
    pendente_triagem: bool
    codigo_rejeicao: str | None
    motivo_rejeicao: str | None
    criado_em: str
    expira_em: str

    @classmethod
    def from_domain(cls, cotacao: Cotacao) -> CotacaoDTO:
        c = cotacao
        return cls(
            id=c.id,
            status=c.status.value,
            categoria=c.categoria.value if c.categoria else None,
            valor_fipe=str(c.valor_fipe),
            marca=c.marca,
            modelo=c.modelo,
            tipo_uso=c.tipo_uso.value,
            placa=c.placa,
            mensalidade=str(c.mensalidade),
            adesao=str(c.adesao),
            adesao_desconto=str(c.adesao_desconto),
            cota_participacao=str(c.cota_participacao) if c.cota_participacao is not None else None,
            vendedor_id=c.vendedor_id,
            pendente_triagem=c.pendente_triagem,
            codigo_rejeicao=c.codigo_rejeicao.value if c.codigo_rejeicao else None,
            motivo_rejeicao=c.motivo_rejeicao,
            criado_em=c.criado_em.isoformat(),
            expira_em=c.expira_em.isoformat(),
        )


class RegistroDTO(BaseModel):
    resultado: ResultadoDTO
    cotacao: CotacaoDTO | None
