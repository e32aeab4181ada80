# talent96/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from talent96.core.config import settings
from talent96.core.logging import configure_logging
from talent96.db.base import Base, import_models
from talent96.db.session import engine

# Routers
from talent96.api.routes import router as health_router, auth_router
from talent96.api.verify_routes import router as verify_router
from talent96.api.user_routes import router as user_router
from talent96.api.recruiter_routes import router as recruiter_router
from talent96.api.notification_routes import router as notification_router
from talent96.api.activity_routes import router as activity_router
from talent96.api.ws_routes import router as ws_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Unique constraints and version checks lost a race with another request
    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
        return JSONResponse(status_code=409, content={"detail": "Conflicting update, record already exists"})

    @app.exception_handler(StaleDataError)
    async def stale_data_handler(request: Request, exc: StaleDataError):
        logger.warning(f"Stale write on {request.url.path}: {exc}")
        return JSONResponse(status_code=409, content={"detail": "Record was modified concurrently, retry"})

    # Ensure tables exist
    import_models()
    Base.metadata.create_all(bind=engine)

    app.include_router(health_router)        # /health, /status
    app.include_router(auth_router)          # /api/auth/*
    app.include_router(verify_router)        # /api/verify/*
    app.include_router(user_router)          # /api/users/*
    app.include_router(recruiter_router)     # /api/recruiters/*
    app.include_router(notification_router)  # /api/notifications/*
    app.include_router(activity_router)      # /api/activities/*
    app.include_router(ws_router)            # /ws/notifications/{user_id}

    logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV})")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("talent96.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
