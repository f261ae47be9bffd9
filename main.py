# main.py
import logging
import time

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config as CFG
from routers.auth import router as auth_router
from routers.dashboard import router as dashboard_router
from routers.map_view import router as map_router
from routers.reports import router as reports_router

logging.basicConfig(
    level=getattr(logging, CFG.LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    handlers=[logging.StreamHandler()],
)

# =============================================================================
# FastAPI
# =============================================================================
app = FastAPI(
    title="SafeCity BFF",
    version="1.0.0",
    description="Dashboard, map, report and auth views over the SafeCity backend.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CFG.CORS_ORIGINS,
    allow_credentials="*" not in CFG.CORS_ORIGINS,
    allow_methods=["*"], allow_headers=["*"],
)

app.include_router(dashboard_router)
app.include_router(map_router)
app.include_router(reports_router)
app.include_router(auth_router)

@app.get("/")
def root():
    return {"message": "SafeCity API (dashboard / map / reports)"}

@app.get("/health")
def health():
    return {
        "time": time.strftime("%Y-%m-%d %H:%M:%S"),
        "backend": CFG.INCIDENTS_URL.rsplit("/", 1)[0],
        "timeout_sec": CFG.DEFAULT_TIMEOUT,
        "fetch_retries": CFG.FETCH_RETRIES,
    }

# =============================================================================
# Entrypoint
# =============================================================================
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=CFG.PORT)
