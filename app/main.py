import logging

from fastapi import FastAPI

from .deps import get_settings
from .routers import history, metadata, pharmacies, qa, specialists

logging.basicConfig(level=get_settings().log_level.upper())

app = FastAPI(title="QuadMedics Companion", version="0.1.0")


app.include_router(qa.router, prefix="/ask", tags=["qa"])
app.include_router(history.router, prefix="/history", tags=["history"])
app.include_router(specialists.router, prefix="/specialists", tags=["specialists"])
app.include_router(pharmacies.router, prefix="/pharmacies", tags=["pharmacies"])
app.include_router(metadata.router, prefix="/metadata", tags=["metadata"])
