from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from app.api.pedidos.exceptions import PedidoNaoEncontradoError
from app.api.pedidos.schemas.schema_pedido import (
    ErrorResponse,
    PedidoCreateRequest,
    PedidoResponse,
    PedidoUpdateRequest,
)
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.utils.logger import logger


router = APIRouter(
    prefix="/api/pedidos",
    tags=["Pedidos - Frete"],
)


@router.get("", response_model=list[PedidoResponse])
def listar_pedidos(svc: PedidoService = Depends(get_pedido_service)):
    logger.info("[Pedidos] Requisição para listar todos os pedidos")
    pedidos = svc.listar_pedidos()
    logger.info("[Pedidos] Listagem concluída | total=%s", len(pedidos))
    return pedidos


@router.get(
    "/{pedido_id}",
    response_model=PedidoResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
def obter_pedido(
    pedido_id: UUID = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info("[Pedidos] Requisição para buscar pedido | id=%s", pedido_id)
    pedido = svc.obter_pedido(pedido_id)
    if pedido is None:
        logger.warning("[Pedidos] Pedido não encontrado | id=%s", pedido_id)
        raise PedidoNaoEncontradoError(pedido_id)
    return pedido


@router.post(
    "",
    response_model=PedidoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def criar_pedido(
    request: Request,
    response: Response,
    body: PedidoCreateRequest = Body(...),
    svc: PedidoService = Depends(get_pedido_service),
):
    """
    Cria um pedido calculando o frete pela modalidade:

    - NORMAL: peso * 0.5 + distância * 0.1 + taxa fixa
    - EXPRESSA: peso * 0.5 + distância * 1.0 + taxa fixa
    - AGENDADA: peso * 0.5 + distância * 0.5 + taxa fixa
    """
    logger.info(
        "[Pedidos] Requisição para criar pedido | cliente=%s modalidade=%s",
        body.cliente_id, body.modalidade.value,
    )
    pedido = svc.criar_pedido(
        body.cliente_id,
        body.modalidade,
        body.peso_kg,
        body.distancia_km,
        body.taxa_fixa,
    )
    response.headers["Location"] = str(request.url_for("obter_pedido", pedido_id=str(pedido.id)))
    return pedido


@router.put(
    "/{pedido_id}",
    response_model=PedidoResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
def atualizar_pedido(
    pedido_id: UUID = Path(..., description="ID do pedido"),
    body: PedidoUpdateRequest = Body(...),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(
        "[Pedidos] Requisição para atualizar pedido | id=%s modalidade=%s",
        pedido_id, body.modalidade.value,
    )
    return svc.atualizar_pedido(
        pedido_id,
        body.modalidade,
        body.peso_kg,
        body.distancia_km,
        body.taxa_fixa,
    )


@router.delete(
    "/{pedido_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
def remover_pedido(
    pedido_id: UUID = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info("[Pedidos] Requisição para deletar pedido | id=%s", pedido_id)
    svc.remover_pedido(pedido_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
