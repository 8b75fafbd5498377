# backend/ers/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ers.api.auth_routes import router as auth_router
from ers.api.errors import register_exception_handlers
from ers.api.reimbursement_routes import router as reimbursement_router
from ers.api.user_routes import router as user_router
from ers.container import Container, build_container
from ers.core.config import Settings, get_settings
from ers.core.logger import configure_logging


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    settings = settings or (container.settings if container else get_settings())
    log = configure_logging(settings.log_level)
    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container.create_tables()
        log.info("ERS API started (env=%s)", settings.app_env)
        yield
        container.dispose()

    app = FastAPI(title="ERS API", version="0.1.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(user_router, prefix="/users", tags=["users"])
    app.include_router(reimbursement_router, prefix="/reimbursements", tags=["reimbursements"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
