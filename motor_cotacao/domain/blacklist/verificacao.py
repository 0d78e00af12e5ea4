"""Verificacao de blacklist. Funcao pura, zero IO."""
from __future__ import annotations

from collections.abc import Iterable

from .entities import MOTIVO_PADRAO, EntradaBlacklist, ResultadoBlacklist


def verificar_blacklist(
    marca: str,
    modelo: str,
    entradas: Iterable[EntradaBlacklist],
) -> ResultadoBlacklist:
    """Compara marca/modelo normalizados (trim + upper) contra as entradas ativas.

    Um bloqueio especifico de modelo tem precedencia sobre o bloqueio da marca
    inteira; entre entradas equivalentes vale a ordem recebida.
    """
    marca_norm = marca.strip().upper()
    modelo_norm = modelo.strip().upper()

    casadas = [
        e for e in entradas
        if e.ativo
        and e.marca == marca_norm
        and (e.modelo is None or e.modelo == modelo_norm)
    ]
    if not casadas:
        return ResultadoBlacklist(bloqueado=False)

    especifica = next((e for e in casadas if e.modelo is not None), None)
    entrada = especifica or casadas[0]
    return ResultadoBlacklist(
        bloqueado=True,
        motivo=entrada.motivo or MOTIVO_PADRAO,
        marca_bloqueada=entrada.marca,
        modelo_bloqueado=entrada.modelo,
    )
