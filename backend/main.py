# backend/main.py
import os
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# Candidate .env locations (in order)
#  - PROJECT_ROOT/.env
#  - BACKEND_DIR/.env
#  - current working directory .env
BASE_DIR = os.path.dirname(os.path.abspath(__file__))        # backend/
PROJECT_ROOT = os.path.dirname(BASE_DIR)                     # project root (parent of backend)
CWD = os.getcwd()

cand_paths = [
    os.path.join(PROJECT_ROOT, ".env"),
    os.path.join(BASE_DIR, ".env"),
    os.path.join(CWD, ".env"),
]

loaded_from = None
for p in cand_paths:
    if os.path.exists(p):
        load_dotenv(p, override=False)
        loaded_from = p
        break

if not loaded_from:
    load_dotenv(override=False)
# ---------------------------------------------------------

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import dashboard, interviews, ops
from core.config import settings
from core.logging import setup_json_logging
from core.request_id import RequestIDMiddleware
from db.init_db import init_db

setup_json_logging(settings.log_level, json_logs=settings.json_logs)
_log = logging.getLogger("env_loader")
_log.info("Loaded .env from: %s", loaded_from or "<search>")


@asynccontextmanager
async def lifespan(app):
    init_db()
    logging.getLogger("main").info("Interview dashboard started.")
    yield


app = FastAPI(title="Interview Dashboard", lifespan=lifespan)

app.include_router(ops.router)

app.include_router(interviews.router)

app.include_router(dashboard.router)


app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Minimal endpoints (always present)
@app.get("/health")
def health():
    return {"ok": True}
