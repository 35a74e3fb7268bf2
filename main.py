from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from static_map.core.config import settings
from static_map.core.logging_config import logger
from static_map.routers import static_map

app = FastAPI(
    title="Static Map URL API",
    version="1.0.0",
    redirect_slashes=False
)

# Configure CORS for frontend applications
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(static_map.router, prefix="/api/static-map", tags=["Static Map"])

logger.info(f"Static map API started (environment={settings.ENVIRONMENT}, routing={settings.ROUTING_PROVIDER})")


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "routing_provider": settings.ROUTING_PROVIDER
    }
