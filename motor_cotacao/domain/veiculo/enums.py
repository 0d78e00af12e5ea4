from enum import StrEnum


class CategoriaVeiculo(StrEnum):
    """Categoria de precificacao. Sempre derivada, nunca informada pelo usuario."""

    NORMAL = "NORMAL"
    ESPECIAL = "ESPECIAL"
    UTILITARIO = "UTILITARIO"
    MOTO = "MOTO"


class CategoriaCliente(StrEnum):
    LEVE = "LEVE"
    UTILITARIO = "UTILITARIO"


class TipoUso(StrEnum):
    PARTICULAR = "PARTICULAR"
    COMERCIAL = "COMERCIAL"


class TipoVeiculo(StrEnum):
    """Tipo bruto retornado pela consulta de placa."""

    AUTOMOVEL = "AUTOMOVEL"
    MOTOCICLETA = "MOTOCICLETA"
    CAMINHAO = "CAMINHAO"
    INEXISTENTE = "INEXISTENTE"
