"""Selecao de regra e calculo de valores. Funcoes puras, zero IO."""
from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from motor_cotacao.domain.veiculo.enums import CategoriaVeiculo

from .entities import RegraPreco, ValoresCotacao

_CENTAVOS = Decimal("0.01")
_CEM = Decimal("100")


def arredondar_moeda(valor: Decimal) -> Decimal:
    """Half-up em 2 casas, padrao para moeda."""
    return valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)


def encontrar_regra_preco(
    regras: Iterable[RegraPreco],
    categoria: CategoriaVeiculo,
    valor: Decimal,
) -> RegraPreco | None:
    """Regra ativa da categoria cuja faixa contem o valor.

    Faixas sobrepostas sao erro de cadastro; se acontecer, vence o menor
    valor_min e, empatado, a primeira na ordem recebida.
    """
    candidatas = [
        r for r in regras
        if r.ativo and r.categoria == categoria and r.contem(valor)
    ]
    if not candidatas:
        return None
    # min() e estavel: devolve o primeiro entre os empatados.
    return min(candidatas, key=lambda r: r.valor_min)


def calcular_valores_cotacao(regra: RegraPreco) -> ValoresCotacao:
    fator = Decimal("1") - regra.desconto_adesao_pct / _CEM
    return ValoresCotacao(
        mensalidade=regra.mensalidade,
        adesao=regra.adesao,
        adesao_desconto=arredondar_moeda(regra.adesao * fator),
        cota_participacao=regra.cota_participacao,
    )
