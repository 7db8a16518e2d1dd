from typing import Any, Dict, Type

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .. import __version__
from ..domain.exceptions import RequestValidationError
from ..domain.openapi import (
    OpenAPIApplyYamlServiceReq,
    OpenAPIDeleteYamlServiceFromEnvReq,
    OpenAPIEnvCfgArgs,
    OpenAPIRequest,
    OpenAPIScaleServiceReq,
)
from ..domain.share_env import ShareEnvOp, ShareEnvReady, ShareEnvReadyChecks
from ..infrastructure.logging import get_logger
from ..infrastructure.request_context import REQUEST_ID_HEADER, request_id_scope

logger = get_logger(__name__)

OPENAPI_REQUESTS: Dict[str, Type[OpenAPIRequest]] = {
    "scale": OpenAPIScaleServiceReq,
    "apply-yaml": OpenAPIApplyYamlServiceReq,
    "delete-yaml": OpenAPIDeleteYamlServiceFromEnvReq,
    "env-config": OpenAPIEnvCfgArgs,
}


def create_app() -> FastAPI:
    app = FastAPI(title="Aslan Environment Service", version=__version__)

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        # the id stays bound while handlers log and call aslan
        with request_id_scope(request.headers.get(REQUEST_ID_HEADER)) as request_id:
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request: %s", exc.message)
        return JSONResponse(status_code=400, content={"detail": exc.message, "field": exc.field})

    # ----- health check ------------------------------------------------------
    @app.get("/health", tags=["system"])
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # ----- share env readiness -----------------------------------------------
    @app.post("/api/environment/share/readiness", response_model=ShareEnvReady, tags=["share-env"])
    def share_env_readiness(
        checks: ShareEnvReadyChecks,
        op: ShareEnvOp = Query(..., description="enable or disable"),
    ) -> ShareEnvReady:
        result = ShareEnvReady(checks=checks).check_and_set_ready(op)
        logger.debug("Share env %s readiness: %s", op.value, result.is_ready)
        return result

    # ----- openapi request validation ----------------------------------------
    @app.post("/openapi/validate/{kind}", tags=["openapi"])
    def validate_openapi_request(kind: str, raw_body: Dict[str, Any] = Body(...)) -> Dict[str, bool]:
        model = OPENAPI_REQUESTS.get(kind)
        if model is None:
            raise HTTPException(status_code=404, detail=f"unknown request kind: {kind}")

        try:
            req = model.model_validate(raw_body)
        except ValidationError as ve:
            raise HTTPException(status_code=422, detail=ve.errors(include_url=False, include_context=False))

        req.validate()
        return {"valid": True}

    return app
