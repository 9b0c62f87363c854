from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wooltracer.config import settings
from wooltracer.middleware.exceptions import register_exception_handlers
from wooltracer.routers import analytics, facilities, farms, health, wool_batches
from wooltracer.services.startup import lifespan

app = FastAPI(
    title="WoolTracer",
    description="Wool supply chain tracking: farms, batches, journeys and analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Exception Handlers ───────────────────────────────────────
register_exception_handlers(app)

# ── Middleware ───────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ──────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(farms.router, prefix="/api/farms", tags=["farms"])
app.include_router(wool_batches.router, prefix="/api/wool-batches", tags=["wool-batches"])
app.include_router(facilities.router, prefix="/api/processing-facilities", tags=["facilities"])
app.include_router(analytics.router, prefix="/api", tags=["analytics"])
