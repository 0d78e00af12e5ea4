from enum import StrEnum


class StatusCotacao(StrEnum):
    PENDING = "PENDING"
    CONTACTED = "CONTACTED"
    ACCEPTED = "ACCEPTED"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"
    REJECTED = "REJECTED"


class CodigoRejeicao(StrEnum):
    BLACKLISTED = "BLACKLISTED"
    OVER_LIMIT = "OVER_LIMIT"
    NO_RULE = "NO_RULE"
