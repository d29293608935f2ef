"""
FastAPI app

- Read-only patient dashboard API
- CORS configured for the dashboard frontend
- Single router for all endpoints
- Basic health check
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file early (before config is imported)
project_root = Path(__file__).parent.parent
load_dotenv(dotenv_path=project_root / '.env')

from patient_dashboard.api import router
from patient_dashboard.api.middleware import TimingMiddleware
from patient_dashboard.core import config
from patient_dashboard.database.seed import seed_demo_data

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.SEED_DEMO_DATA:
        seed_demo_data(config.DATA_DIR)
    logger.info(f"Patient dashboard API serving data from {config.DATA_DIR}")
    yield


app = FastAPI(title="Patient Dashboard API", lifespan=lifespan)

# Logs request duration and device_id for all requests
app.add_middleware(TimingMiddleware)

# For development: localhost origins plus CORS_ORIGINS from the environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],  # includes X-Device-ID
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """
    Basic health check
    """
    return {"status": "ok"}
