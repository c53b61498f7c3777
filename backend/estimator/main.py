"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from estimator.config import get_settings
from estimator.logging_config import configure_logging, get_logger
from estimator.routers import calculations, team

settings = get_settings()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    logger.info("startup", extra={"app_env": settings.app_env})
    yield


app = FastAPI(
    title="Reality Check Estimator",
    description="Resource-driven project cost, capacity and scenario estimation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculations.router)
app.include_router(team.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
