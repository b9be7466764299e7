import logging
import time
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradedoc.api_models import ErrorCode, ErrorDetail, LayoutPlanResponse, LayoutRequest
from tradedoc.core.config import SERVICE_NAME, SERVICE_VERSION
from tradedoc.layout import DocumentShapeError, build_layout_plan, plan_to_dict
from tradedoc.logging_config import configure_logging
from tradedoc.ui import build_document_vm

configure_logging()
log = logging.getLogger("tradedoc")

app = FastAPI(title="Trade Document Layout", version=SERVICE_VERSION)


def _shape_error_response(e: DocumentShapeError) -> JSONResponse:
    detail = ErrorDetail(
        code=ErrorCode.DOCUMENT_SHAPE_INVALID,
        message=str(e),
        recoverable=False,
    )
    return JSONResponse(status_code=400, content=detail.model_dump())


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.get("/version")
def version():
    return {"name": SERVICE_NAME, "version": SERVICE_VERSION}


@app.middleware("http")
async def req_log(request: Request, call_next):
    start = time.time()
    route = request.url.path
    remote = request.client.host if request.client else "-"
    resp = await call_next(request)
    duration_ms = int((time.time() - start) * 1000)
    log.info(f"request_complete status={resp.status_code} duration_ms={duration_ms}",
             extra={"request_id": "-", "route": route, "remote_addr": remote})
    return resp


@app.post("/layout")
def layout(req: LayoutRequest):
    """Build the renderer-agnostic layout plan for a trade document."""
    try:
        plan = build_layout_plan(req.document)
    except DocumentShapeError as e:
        log.warning(f"layout_rejected code={e.code} reason={e}")
        return _shape_error_response(e)

    resp = LayoutPlanResponse.model_validate(plan_to_dict(plan))
    return JSONResponse(resp.model_dump())


@app.post("/ui/layout")
def ui_layout(req: LayoutRequest):
    """Build the display view model (labels and formatted strings)."""
    try:
        vm = build_document_vm(req.document)
    except DocumentShapeError as e:
        log.warning(f"ui_layout_rejected code={e.code} reason={e}")
        return _shape_error_response(e)

    return JSONResponse(asdict(vm))
