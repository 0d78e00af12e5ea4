"""Rotacao da fila de vendedores. Funcoes puras, zero IO.

Inelegiveis (inativos, de ferias, fora do rodizio) sao pulados mas mantem a
posicao na fila, para quando voltarem.
"""
from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from .entities import ConfigRodizio


@dataclass(frozen=True)
class Escolha:
    posicao: int
    vendedor_id: str


def proximo_da_fila(
    fila: Sequence[str],
    ponteiro: int,
    elegiveis: Collection[str],
) -> Escolha | None:
    """Varre a fila uma volta completa a partir de ponteiro + 1.

    Ponteiro fora da faixa e normalizado (fila pode ter encolhido).
    None = nenhum elegivel.
    """
    tamanho = len(fila)
    if tamanho == 0:
        return None
    inicio = (ponteiro + 1) % tamanho if ponteiro >= 0 else 0
    for passo in range(tamanho):
        posicao = (inicio + passo) % tamanho
        if fila[posicao] in elegiveis:
            return Escolha(posicao=posicao, vendedor_id=fila[posicao])
    return None


def reposicionar_ponteiro(config: ConfigRodizio, nova_fila: Sequence[str]) -> int:
    """Ponteiro acompanha o ultimo atribuido na fila reordenada; senao -1."""
    ultimo = config.ultimo_vendedor_id
    if ultimo is not None and ultimo in nova_fila:
        return list(nova_fila).index(ultimo)
    return -1
