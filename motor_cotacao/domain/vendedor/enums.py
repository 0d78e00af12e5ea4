from enum import StrEnum


class StatusVendedor(StrEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    VACATION = "VACATION"


class PapelVendedor(StrEnum):
    SELLER = "SELLER"
    ADMIN = "ADMIN"


class MotivoSemVendedor(StrEnum):
    FILA_VAZIA = "FILA_VAZIA"  # fila vazia ou todos inelegiveis
    CONFLITO = "CONFLITO"  # tentativas esgotadas por concorrencia
