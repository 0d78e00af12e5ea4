from decimal import Decimal

from motor_cotacao.domain.blacklist.entities import EntradaBlacklist
from motor_cotacao.domain.cotacao.elegibilidade import avaliar_cotacao
from motor_cotacao.domain.cotacao.enums import CodigoRejeicao
from motor_cotacao.domain.cotacao.resultado import (
    CotacaoAceita,
    RejeicaoBlacklist,
    RejeicaoLimiteFipe,
    RejeicaoSemRegra,
)
from motor_cotacao.domain.precificacao.entities import RegraPreco
from motor_cotacao.domain.veiculo.enums import CategoriaCliente, CategoriaVeiculo, TipoUso
from motor_cotacao.domain.veiculo.value_objects import ValorFipe, Veiculo


def _corolla(valor: str = "150000", **kwargs: object) -> Veiculo:
    dados: dict[str, object] = {
        "categoria_cliente": CategoriaCliente.LEVE,
        "tipo_uso": TipoUso.PARTICULAR,
        "tipo_bruto": "AUTOMOVEL",
        "marca": "TOYOTA",
        "modelo": "COROLLA",
        "valor_fipe": ValorFipe(Decimal(valor)),
    }
    dados.update(kwargs)
    return Veiculo(**dados)  # type: ignore[arg-type]


def _regra_normal() -> RegraPreco:
    return RegraPreco(
        id="normal-1",
        categoria=CategoriaVeiculo.NORMAL,
        valor_min=Decimal("0"),
        valor_max=Decimal("180000"),
        mensalidade=Decimal("120"),
        adesao=Decimal("500"),
        desconto_adesao_pct=Decimal("20"),
    )


def test_cenario_aceito_normal():
    resultado = avaliar_cotacao(_corolla(), [], [_regra_normal()])
    assert isinstance(resultado, CotacaoAceita)
    assert resultado.kind == "ACCEPTED"
    assert resultado.categoria == CategoriaVeiculo.NORMAL
    assert resultado.valores.mensalidade == Decimal("120")
    assert resultado.valores.adesao == Decimal("500")
    assert resultado.valores.adesao_desconto == Decimal("400.00")
    assert resultado.valores.cota_participacao is None
    assert resultado.regra_id == "normal-1"


def test_marca_na_blacklist_rejeita_e_salva_lead():
    blacklist = [EntradaBlacklist(id="b1", marca="toyota", motivo="Fora da carteira")]
    resultado = avaliar_cotacao(_corolla(), blacklist, [_regra_normal()])
    assert isinstance(resultado, RejeicaoBlacklist)
    assert resultado.kind == "REJECTED"
    assert resultado.codigo == CodigoRejeicao.BLACKLISTED
    assert resultado.salvar_como_lead is True
    assert (resultado.marca, resultado.modelo, resultado.motivo) == (
        "TOYOTA", "COROLLA", "Fora da carteira",
    )


def test_blacklist_avaliada_antes_do_limite():
    """Veiculo bloqueado e acima do teto: vence BLACKLISTED."""
    blacklist = [EntradaBlacklist(id="b1", marca="TOYOTA")]
    resultado = avaliar_cotacao(_corolla(valor="900000"), blacklist, [])
    assert isinstance(resultado, RejeicaoBlacklist)


def test_utilitario_acima_do_limite():
    veiculo = _corolla(valor="500000", categoria_cliente=CategoriaCliente.UTILITARIO)
    resultado = avaliar_cotacao(veiculo, [], [_regra_normal()])
    assert isinstance(resultado, RejeicaoLimiteFipe)
    assert resultado.codigo == CodigoRejeicao.OVER_LIMIT
    assert resultado.salvar_como_lead is True
    assert resultado.categoria == CategoriaVeiculo.UTILITARIO
    assert resultado.valor_fipe == Decimal("500000")
    assert resultado.limite == Decimal("450000")


def test_limite_exato_passa_para_precificacao():
    regra_topo = RegraPreco(
        id="topo",
        categoria=CategoriaVeiculo.NORMAL,
        valor_min=Decimal("150000"),
        valor_max=None,
        mensalidade=Decimal("300"),
        adesao=Decimal("600"),
    )
    resultado = avaliar_cotacao(_corolla(valor="180000"), [], [_regra_normal(), regra_topo])
    assert isinstance(resultado, CotacaoAceita)
    assert resultado.regra_id == "topo"


def test_sem_faixa_para_o_valor():
    """Faixa [0, 180000) nao cobre 180000: lacuna, categoria configurada."""
    resultado = avaliar_cotacao(_corolla(valor="180000"), [], [_regra_normal()])
    assert isinstance(resultado, RejeicaoSemRegra)
    assert resultado.codigo == CodigoRejeicao.NO_RULE
    assert resultado.salvar_como_lead is False
    assert resultado.sem_regras_configuradas is False


def test_categoria_sem_nenhuma_regra_e_erro_de_configuracao():
    veiculo = _corolla(tipo_bruto="MOTOCICLETA", valor="20000")
    resultado = avaliar_cotacao(veiculo, [], [_regra_normal()])
    assert isinstance(resultado, RejeicaoSemRegra)
    assert resultado.categoria == CategoriaVeiculo.MOTO
    assert resultado.sem_regras_configuradas is True


def test_uso_comercial_usa_regra_especial():
    especial = RegraPreco(
        id="esp",
        categoria=CategoriaVeiculo.ESPECIAL,
        valor_min=Decimal("0"),
        valor_max=None,
        mensalidade=Decimal("180"),
        adesao=Decimal("360"),
        desconto_adesao_pct=Decimal("10"),
        cota_participacao=Decimal("2500"),
    )
    veiculo = _corolla(tipo_uso=TipoUso.COMERCIAL)
    resultado = avaliar_cotacao(veiculo, [], [_regra_normal(), especial])
    assert isinstance(resultado, CotacaoAceita)
    assert resultado.categoria == CategoriaVeiculo.ESPECIAL
    assert resultado.valores.adesao_desconto == Decimal("324.00")
    assert resultado.valores.cota_participacao == Decimal("2500")
