"""Orquestracao da elegibilidade. Funcao pura, zero IO.

START -> blacklist -> categoria -> limite FIPE -> regra de preco -> ACCEPTED.
Cada etapa pode encerrar com uma rejeicao tipada.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from motor_cotacao.domain.blacklist.entities import EntradaBlacklist
from motor_cotacao.domain.blacklist.verificacao import verificar_blacklist
from motor_cotacao.domain.precificacao.calculo import (
    calcular_valores_cotacao,
    encontrar_regra_preco,
)
from motor_cotacao.domain.precificacao.entities import RegraPreco
from motor_cotacao.domain.veiculo.categoria import determinar_categoria
from motor_cotacao.domain.veiculo.limite_fipe import verificar_limite_fipe
from motor_cotacao.domain.veiculo.value_objects import Veiculo

from .resultado import (
    CotacaoAceita,
    RejeicaoBlacklist,
    RejeicaoLimiteFipe,
    RejeicaoSemRegra,
    ResultadoElegibilidade,
)


def avaliar_cotacao(
    veiculo: Veiculo,
    entradas_blacklist: Iterable[EntradaBlacklist],
    regras: Sequence[RegraPreco],
) -> ResultadoElegibilidade:
    """Mesma entrada = mesma saida. `regras` pode conter outras categorias."""
    bloqueio = verificar_blacklist(veiculo.marca, veiculo.modelo, entradas_blacklist)
    if bloqueio.bloqueado:
        return RejeicaoBlacklist(
            marca=veiculo.marca,
            modelo=veiculo.modelo,
            motivo=bloqueio.motivo or "",
        )

    categoria = determinar_categoria(
        veiculo.tipo_bruto, veiculo.categoria_cliente, veiculo.tipo_uso,
    )

    valor = veiculo.valor_fipe.valor
    limite = verificar_limite_fipe(categoria, valor)
    if not limite.permitido:
        return RejeicaoLimiteFipe(categoria=categoria, valor_fipe=valor, limite=limite.limite)

    regra = encontrar_regra_preco(regras, categoria, valor)
    if regra is None:
        configuradas = any(r.ativo and r.categoria == categoria for r in regras)
        return RejeicaoSemRegra(
            categoria=categoria,
            valor_fipe=valor,
            sem_regras_configuradas=not configuradas,
        )

    return CotacaoAceita(
        categoria=categoria,
        valores=calcular_valores_cotacao(regra),
        regra_id=regra.id,
    )
