from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostprobe.api.routers import info, processes
from hostprobe.config.settings import config

app = FastAPI(
    title="Hostprobe API",
    description="Point-in-time host telemetry and process control.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(info.router)
app.include_router(processes.router)
