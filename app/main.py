import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, settings as default_settings
from app.core.cors import PermissiveCORSMiddleware
from app.core.errors import register_error_handlers
from app.db.index import OrderedIndex
from app.db.kv import KeyValueBackend, build_kv_backend
from app.modules.health.router import router as health_router
from app.modules.assignments.router import router as assignments_router
from app.modules.submissions.router import router as submissions_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def create_app(settings: Optional[Settings] = None, kv: Optional[KeyValueBackend] = None) -> FastAPI:
    """
    Build the API.

    kv overrides the backend selected by settings.KV_BACKEND. With neither,
    data routes answer 500 until a backend is configured.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="EduWonderLab API",
        description="Classroom assignments and submissions over a key-value store",
        version="1.0.0"
    )

    app.state.settings = settings
    app.state.kv = kv if kv is not None else build_kv_backend(settings)
    app.state.index = OrderedIndex(app.state.kv) if app.state.kv is not None else None
    if app.state.kv is None:
        logger.warning("No key-value backend bound; /api/assignments and /api/submissions will return 500")

    app.add_middleware(PermissiveCORSMiddleware)
    register_error_handlers(app)

    # Include routers
    app.include_router(health_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api/assignments", tags=["Assignments"])
    app.include_router(submissions_router, prefix="/api/submissions", tags=["Submissions"])

    # Anything else under /api is unknown
    @app.api_route(
        "/api/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
        include_in_schema=False
    )
    def api_not_found(path: str):
        raise HTTPException(status_code=404, detail="Not found")

    # Everything outside /api is a static asset
    if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        logger.info("Static directory %r not found; only /api routes are served", settings.STATIC_DIR)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
