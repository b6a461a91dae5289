from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import analyze, materials

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("drawquote")

app = FastAPI(
    title="Drawing Quote Service",
    description="Machining quotes from photographed technical drawings",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Existing clients post drawings to /pdf/analyze, so it stays unprefixed
app.include_router(analyze.router)
app.include_router(materials.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "drawquote"}


@app.on_event("startup")
def log_startup():
    if not settings.GOOGLE_VISION_API_KEY:
        logger.warning("GOOGLE_VISION_API_KEY not set, /pdf/analyze will return 500")
    logger.info(f"Uploads stored in {settings.UPLOAD_DIR}")
