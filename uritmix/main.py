from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uritmix.api.errors import domain_error_handler
from uritmix.api.routers.abonnement import router as abonnement_router
from uritmix.api.routers.auth import router as auth_router
from uritmix.domain.exceptions import DomainError
from uritmix.shared.config import get_settings


settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Uritmix API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DomainError, domain_error_handler)
app.include_router(auth_router)
app.include_router(abonnement_router)
