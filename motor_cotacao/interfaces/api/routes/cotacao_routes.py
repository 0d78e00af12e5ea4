from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from motor_cotacao.application.dtos.cotacao_dto import (
    AceitaDTO,
    CotacaoDTO,
    RegistroDTO,
    RejeitadaDTO,
    VeiculoRequestDTO,
    resultado_para_dto,
)
from motor_cotacao.application.services.cotacao_service import CotacaoService
from motor_cotacao.interfaces.api.dependencies import get_cotacao_service

router = APIRouter()


@router.post("/cotacoes/avaliacao", response_model=AceitaDTO | RejeitadaDTO)
def avaliar_cotacao(
    body: VeiculoRequestDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> AceitaDTO | RejeitadaDTO:
    """Somente decisao: nada e persistido, nenhum vendedor e reservado."""
    try:
        veiculo = body.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return resultado_para_dto(service.avaliar(veiculo))


@router.post("/cotacoes", response_model=RegistroDTO, status_code=201)
def registrar_cotacao(
    body: VeiculoRequestDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> RegistroDTO | JSONResponse:
    try:
        veiculo = body.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    registro = service.registrar(veiculo)
    dto = RegistroDTO(
        resultado=resultado_para_dto(registro.resultado),
        cotacao=CotacaoDTO.from_domain(registro.cotacao) if registro.cotacao else None,
    )
    if registro.cotacao is None:
        # NO_RULE: nada foi gravado
        return JSONResponse(status_code=422, content=dto.model_dump(mode="json"))
    return dto


@router.get("/cotacoes/{cotacao_id}", response_model=CotacaoDTO)
def get_cotacao(
    cotacao_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> CotacaoDTO:
    cotacao = service.obter(cotacao_id)
    if cotacao is None:
        raise HTTPException(status_code=404, detail="Cotacao nao encontrada")
    return CotacaoDTO.from_domain(cotacao)
