"""
FastAPI app entry point aggregating routers under taghunter/routes.
Run with `uvicorn taghunter.api:app` or `taghunter serve`.
"""
from __future__ import annotations


from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .db import close_store
from .logs import setup_logging
from .services.store_svc import init_store


app = FastAPI(title="taghunter-api", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "tauri://localhost",
        "app://.",
    ],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    setup_logging()
    # StoreInitError propagates: no degraded mode
    init_store()


@app.on_event("shutdown")
def on_shutdown():
    close_store()


from .routes import base as base_routes
from .routes import catalog as catalog_routes

app.include_router(base_routes.router)
app.include_router(catalog_routes.router)
