from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.middleware import SlowAPIMiddleware

from .config import get_settings
from .database import Base, engine
from .error_handlers import register_exception_handlers
from .logging_config import log_requests, setup_logging
from .routers import cleaning, complaints, dashboard, users

settings = get_settings()
setup_logging(settings.log_level)

# -----------------------------------------
# Create DB tables
# -----------------------------------------
Base.metadata.create_all(bind=engine)

# -----------------------------------------
# Rate Limiter
# Per client IP, limit from HOSTELCARE_RATE_LIMIT
# -----------------------------------------
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Hostel management: users, complaints and cleaning requests.",
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# -----------------------------------------
# Routers
# -----------------------------------------
app.include_router(users.router)
app.include_router(dashboard.router)
app.include_router(complaints.router)
app.include_router(cleaning.router)


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "ok"}
