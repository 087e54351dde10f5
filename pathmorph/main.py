"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathmorph import __version__
from pathmorph.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathmorph_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="pathmorph",
        description="SVG path interpolation — morph between paths with different point counts",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from pathmorph.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
