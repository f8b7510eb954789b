"""
duckduckGoose Functions API

Main entry point for the duckduckGoose callable functions.
Serves deleteUserByEmail over the Firebase callable protocol.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.auth import initialize_firebase_app
from common.callables import register_callable_exception_handlers
from common.database import Firestore, set_main_database
from common.utils import success_response

# App-specific imports
from functions.config import settings
from functions.dependencies import init_all_services
from functions.user.router import router as user_router

VERSION = "1.0.0"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = Firestore()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Initializes Firebase, connects Firestore and wires services on startup;
    releases the Firestore client on shutdown.
    """
    logger.info(f"Starting duckduckGoose functions ({settings.FUNCTION_REGION})...")
    settings.validate_required()

    firebase_app = initialize_firebase_app(
        credentials_path=settings.FIREBASE_CREDENTIALS_PATH,
        project_id=settings.FIREBASE_PROJECT_ID,
    )

    main_db.connect(app=firebase_app, database_id=settings.FIRESTORE_DATABASE_ID)
    set_main_database(main_db)

    init_all_services(
        firebase_app=firebase_app,
        users_collection=settings.USERS_COLLECTION,
    )
    logger.info("duckduckGoose functions started successfully!")

    yield

    logger.info("Shutting down duckduckGoose functions...")
    main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="duckduckGoose Functions",
    description="Callable backend functions for the duckduckGoose app",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Callable Error Envelope
# =============================================================================
register_callable_exception_handlers(app)

# =============================================================================
# Include Routers
# =============================================================================
app.include_router(user_router)


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and the Firestore connection.
    """
    return success_response({
        "status": "ok",
        "version": VERSION,
        "region": settings.FUNCTION_REGION,
        "database": main_db.is_connected,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
