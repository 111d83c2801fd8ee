from __future__ import annotations

import pprint

from fastapi import FastAPI
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import ORJSONResponse
from fastapi.responses import Response

import ppcalc.config
import log
from ppcalc.errors import InfeasibleDistribution
from ppcalc.errors import InvalidParameter
from ppcalc.errors import MissingExternalData


def error_response(message: str, status_code: int) -> Response:
    return ORJSONResponse(
        content={"status": "error", "message": message},
        status_code=status_code,
    )


def init_events(asgi_app: FastAPI) -> None:
    @asgi_app.on_event("startup")
    async def on_startup() -> None:
        log.info("ppcalc is running!")

    @asgi_app.on_event("shutdown")
    async def on_shutdown() -> None:
        log.info("ppcalc has stopped!")

    @asgi_app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request,
        e: RequestValidationError,
    ) -> Response:
        log.warning(f"Validation error:\n{pprint.pformat(e.errors())}")

        return ORJSONResponse(
            content=jsonable_encoder(e.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @asgi_app.exception_handler(InvalidParameter)
    async def handle_invalid_parameter(
        request: Request,
        e: InvalidParameter,
    ) -> Response:
        log.warning(f"{request.url.path}: {e}")

        return error_response(str(e), status.HTTP_400_BAD_REQUEST)

    @asgi_app.exception_handler(InfeasibleDistribution)
    async def handle_infeasible_distribution(
        request: Request,
        e: InfeasibleDistribution,
    ) -> Response:
        return error_response(str(e), status.HTTP_422_UNPROCESSABLE_ENTITY)

    @asgi_app.exception_handler(MissingExternalData)
    async def handle_missing_data(
        request: Request,
        e: MissingExternalData,
    ) -> Response:
        log.error(f"{request.url.path}: {e}")

        return error_response(str(e), status.HTTP_404_NOT_FOUND)


def init_ppcalc() -> FastAPI:
    import ppcalc.api

    log.configure(ppcalc.config.DEBUG)

    asgi_app = FastAPI(
        title="ppcalc",
        version=ppcalc.config.VERSION,
        default_response_class=ORJSONResponse,
    )

    init_events(asgi_app)

    asgi_app.include_router(ppcalc.api.router)

    return asgi_app


asgi_app = init_ppcalc()
