"""
Handlers globais de exceção.

Convertem exceções de domínio e de validação em `ErrorResponse` JSON.
"""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.frete.exceptions import FreteParametrosInvalidosError, ModalidadeFreteInvalidaError
from app.api.pedidos.exceptions import PedidoJaExisteError, PedidoNaoEncontradoError
from app.api.pedidos.schemas.schema_pedido import ErrorResponse
from app.core.exceptions import ArgumentoInvalidoError, DomainException
from app.utils.logger import logger


def _json(erro: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=erro.status, content=erro.model_dump())


def _erro_de_dominio(exc: DomainException) -> ErrorResponse:
    if isinstance(exc, PedidoNaoEncontradoError):
        return ErrorResponse.not_found(exc.mensagem)
    if isinstance(exc, PedidoJaExisteError):
        return ErrorResponse.conflict(exc.mensagem)
    if isinstance(exc, (ArgumentoInvalidoError, FreteParametrosInvalidosError)):
        return ErrorResponse.bad_request(exc.mensagem, exc.campo)
    if isinstance(exc, ModalidadeFreteInvalidaError):
        return ErrorResponse.bad_request(exc.mensagem, "modalidade")
    return ErrorResponse.bad_request(exc.mensagem)


async def domain_exception_handler(request: Request, exc: DomainException):
    erro = _erro_de_dominio(exc)
    logger.warning(
        "[ExceptionHandler] %s em %s %s | status=%s detalhe=%s",
        type(exc).__name__, request.method, request.url.path, erro.status, exc.mensagem,
    )
    return _json(erro)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    erros = exc.errors()
    details = None
    if erros:
        primeiro = erros[0]
        campo = ".".join(str(p) for p in primeiro.get("loc", ()) if p not in ("body", "path", "query"))
        details = f"{campo}: {primeiro.get('msg')}" if campo else primeiro.get("msg")
    logger.warning("[ExceptionHandler] Requisição inválida em %s %s | %s", request.method, request.url.path, details)
    return _json(ErrorResponse.bad_request("Requisição inválida.", details))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail), status=exc.status_code).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        "[ExceptionHandler] Erro não tratado em %s %s: %s",
        request.method, request.url.path, exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse.internal_error().model_dump(),
    )
