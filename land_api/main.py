import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from .api.deps import contract_accessor, get_accessor
from .api.router import api_router
from .core.accessor import ResourceAccessor
from .core.config import settings
from .core.errors import LandApiError, NotInitializedError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DESCRIPTION = """
A blockchain-based API for reading land tokenization data from the land management contract.

## Features:
- **Getter Routes**: View blockchain data (treasury, lands, plots, token URIs, transfer requests)

Every response is an envelope: `success`, then `data` or `error`.

## Authentication:
Currently open API - no authentication required.
"""

TAGS_METADATA = [
    {"name": "Treasury", "description": "Treasury wallet operations"},
    {"name": "Land", "description": "Land token information"},
    {"name": "Plot", "description": "Plot account operations"},
    {"name": "Transfer", "description": "Transfer requests and approvals"},
    {"name": "Token", "description": "Token URI lookups"},
    {"name": "Service", "description": "Liveness and health"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(f"Starting {settings.PROJECT_NAME}...")

    if settings.EAGER_INIT:
        try:
            contract = await run_in_threadpool(contract_accessor.initialize)
            logger.info(f"Contract {contract.address} initialized at startup")
        except LandApiError as e:
            logger.warning(f"Contract not initialized at startup: {e.message}")
            logger.warning("Continuing; requests will retry initialization on demand...")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    contract_accessor.invalidate()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=DESCRIPTION,
    version=settings.VERSION,
    contact={
        "name": "Land Management API Support",
        "email": "support@landmanagement.com",
    },
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
    servers=[
        {"url": "http://localhost:8000", "description": "Development server"},
    ],
    openapi_tags=TAGS_METADATA,
    docs_url="/api-docs",
    redoc_url="/redoc",
    openapi_url="/api-docs.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/test", tags=["Service"])
def test_endpoint():
    """Test endpoint to verify service is running."""
    return {
        "service": "land-api",
        "status": "ok",
        "message": "hello from land management API service",
    }


@app.get("/health", tags=["Service"])
def health_check(accessor: ResourceAccessor = Depends(get_accessor)):
    """Health check reporting whether the contract handle is live."""
    try:
        contract = accessor.get()
    except NotInitializedError:
        return {"status": "degraded", "contract": "not initialized"}

    return {
        "status": "healthy",
        "contract": "connected",
        "contractAddress": contract.address,
    }
