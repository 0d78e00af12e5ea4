import dataclasses
from decimal import Decimal

import pytest

from motor_cotacao.domain.blacklist.entities import EntradaBlacklist
from motor_cotacao.domain.veiculo.enums import CategoriaCliente, TipoUso
from motor_cotacao.domain.veiculo.value_objects import ValorFipe, Veiculo


def test_valor_fipe_negativo_invalido():
    with pytest.raises(ValueError, match="negativo"):
        ValorFipe(Decimal("-0.01"))


def test_valor_fipe_float_recusado():
    with pytest.raises(ValueError, match="float"):
        ValorFipe(150000.0)  # type: ignore[arg-type]


def test_valor_fipe_fracao_de_centavo_invalida():
    with pytest.raises(ValueError, match="2 casas"):
        ValorFipe(Decimal("150000.005"))


def test_valor_fipe_centavos_validos():
    assert ValorFipe(Decimal("150000.5")).valor == Decimal("150000.50")


def test_valor_fipe_imutavel():
    valor = ValorFipe(Decimal("1"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        valor.valor = Decimal("2")  # type: ignore[misc]


def test_veiculo_sem_marca_invalido():
    with pytest.raises(ValueError, match="Marca"):
        Veiculo(
            categoria_cliente=CategoriaCliente.LEVE,
            tipo_uso=TipoUso.PARTICULAR,
            tipo_bruto="AUTOMOVEL",
            marca="  ",
            modelo="UNO",
            valor_fipe=ValorFipe(Decimal("1")),
        )


def test_entrada_blacklist_normaliza():
    entrada = EntradaBlacklist(id="1", marca=" fiat ", modelo="  ")
    assert entrada.marca == "FIAT"
    assert entrada.modelo is None
    assert entrada.bloqueia_marca_inteira


def test_entrada_blacklist_sem_marca_invalida():
    with pytest.raises(ValueError):
        EntradaBlacklist(id="1", marca="")
