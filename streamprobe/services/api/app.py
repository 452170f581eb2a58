# streamprobe/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streamprobe.common.settings import get_settings
from streamprobe.services.api.routers import health, media_streams


def create_app() -> FastAPI:
    cfg = get_settings()
    dev = cfg.app_env.lower() == "development"

    app = FastAPI(
        title="Streamprobe API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if dev else cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(media_streams.router, prefix=cfg.api.prefix)
    return app

app = create_app()
