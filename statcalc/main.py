import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from statcalc.api import health, statistics
from statcalc.config import get_settings
from statcalc.observability.logging import setup_logging
from statcalc.observability.metrics import MetricsMiddleware, metrics_router
from statcalc.services.calculator import CalculationError, calculate
from statcalc.services.charts import ChartBoard

logger = logging.getLogger(__name__)

# READY_FLAG is used to indicate if the app is fully initialized and ready to serve traffic
READY_FLAG = False

def preload_sample(board: ChartBoard) -> None:
    """Calculate the configured sample dataset so the first GET has something to show."""
    settings = get_settings()
    if not settings.preload_sample:
        return
    try:
        board.render(calculate(settings.sample_data, max_bins=settings.max_bins))
    except CalculationError as exc:
        logger.warning("Sample data not loaded: %s", exc)

# Lifespan handler: calculates the sample data, then sets READY_FLAG; clears it on shutdown
@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    preload_sample(app.state.chart_board)
    READY_FLAG = True
    yield
    app.state.chart_board.clear()
    READY_FLAG = False

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="Descriptive Statistics Calculator",
        version="1.0.0",
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)  # Prometheus metrics middleware
    app.include_router(metrics_router)     # /metrics
    app.include_router(health.router)      # /health and /ready
    app.include_router(statistics.router)  # /statistics and /charts
    app.state.ready_flag = lambda: READY_FLAG
    # One chart board per app: rendering replaces and disposes the previous charts
    app.state.chart_board = ChartBoard()

    # Validation errors on the request body are reported as 400, like calculation errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Ensure all error details are serializable
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, list):
                return [serialize_error(e) for e in err]
            return err
        return JSONResponse(
            status_code=400,
            content={"detail": serialize_error(exc.errors())},
        )

    return app

# Create the FastAPI app instance
app = create_app()
