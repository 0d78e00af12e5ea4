from fastapi import APIRouter, Depends, HTTPException

from motor_cotacao.application.dtos.rodizio_dto import AtribuicaoDTO, EstadoRodizioDTO
from motor_cotacao.application.services.rodizio_service import RodizioService, SemVendedorElegivel
from motor_cotacao.interfaces.api.dependencies import get_rodizio_service

router = APIRouter()


@router.post("/rodizio/atribuicoes", response_model=AtribuicaoDTO)
def atribuir_proximo(
    service: RodizioService = Depends(get_rodizio_service),  # noqa: B008
) -> AtribuicaoDTO:
    resultado = service.atribuir_proximo()
    if isinstance(resultado, SemVendedorElegivel):
        raise HTTPException(
            status_code=409,
            detail={"erro": resultado.erro, "motivo": resultado.motivo.value},
        )
    return AtribuicaoDTO(vendedor_id=resultado.vendedor_id, posicao=resultado.posicao)


@router.get("/rodizio", response_model=EstadoRodizioDTO)
def get_estado(
    service: RodizioService = Depends(get_rodizio_service),  # noqa: B008
) -> EstadoRodizioDTO:
    return EstadoRodizioDTO.from_domain(service.estado())
