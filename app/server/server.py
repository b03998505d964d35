from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.errors import setup_error_handlers
from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import settings
from server.lifespan import lifespan
from server.middleware import CorrelationIdMiddleware

handler = FastAPI(title="Site Translations", lifespan=lifespan)
setup_rate_limiter(handler)
setup_error_handlers(handler)


allow_origins = ["*"] if settings.is_production else settings.server.cors_origins
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(CorrelationIdMiddleware)


handler.include_router(api_router)
