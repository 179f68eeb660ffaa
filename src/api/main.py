# src/api/main.py

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
import uvicorn
import logging
from decimal import getcontext

from src.api.v1.router import router as v1_router
from src.core.config.settings import settings
from src.core.exceptions import InvalidArgumentError
from src.services.portfolio_ledger import PortfolioLedger

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(settings.APP_NAME)

# Set global Decimal precision at application startup
getcontext().prec = settings.DECIMAL_PRECISION

def create_app(ledger: PortfolioLedger | None = None) -> FastAPI:
    """
    Builds the application around a single ledger instance.
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG_MODE,
        description="API for recording stock purchases and sales and reporting holdings "
                    "under cheapest-first lot matching."
    )
    application.state.ledger = ledger or PortfolioLedger()

    @application.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.warning(f"Invalid argument on {request.url.path}: {exc}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    application.include_router(v1_router, prefix=settings.API_V1_STR)

    @application.get("/", include_in_schema=False)
    async def root():
        """Redirects to the API documentation."""
        return RedirectResponse(url="/docs")

    return application

app = create_app()

# Entry point for running with Uvicorn directly (for development)
if __name__ == "__main__":
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} in {'DEBUG' if settings.DEBUG_MODE else 'PRODUCTION'} mode...")
    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG_MODE,
        log_level=settings.LOG_LEVEL.lower()
    )
