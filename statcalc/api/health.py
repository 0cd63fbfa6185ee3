from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()


def _has_results(request: Request) -> bool:
    board = getattr(request.app.state, "chart_board", None)
    return board is not None and board.calculation is not None


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Liveness: the process answers, reported with the running service version."""
    return {"status": "ok", "version": request.app.version}


@router.get("/ready")
async def ready(request: Request):
    """
    Readiness: 200 once startup (sample calculation included) has finished,
    503 before that or after shutdown. ``results`` tells whether a
    calculation is currently held for GET /statistics.
    """
    ready_flag = getattr(request.app.state, "ready_flag", None)
    body = {"results": _has_results(request)}
    if ready_flag is None or not ready_flag():
        return JSONResponse({"status": "not ready", **body}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
    return {"status": "ready", **body}
