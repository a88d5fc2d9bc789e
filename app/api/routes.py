import logging
from anyio import to_thread
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from app.schemas.audit import AuditResponse
from app.services.errors import ConfigurationError

logger = logging.getLogger("API")

router = APIRouter()

@router.post("/audit", response_model=AuditResponse)
async def run_audit(request_ctx: Request):
    # raw body on purpose: malformed JSON must come back as the 400 envelope, not FastAPI's 422
    auditor = getattr(request_ctx.app.state, "auditor", None)
    if auditor is None:
        logger.error("Audit requested but auditor was never initialized")
        error = ConfigurationError()
        return JSONResponse(AuditResponse.fail(error.message).to_body(), status_code=error.status_code)

    raw_body = await request_ctx.body()

    # OpenAI client is blocking, keep it off the event loop
    status_code, result = await to_thread.run_sync(auditor.handle, raw_body)

    return JSONResponse(result.to_body(), status_code=status_code)
