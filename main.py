from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import logging
import time

import config
from db.database import engine, Base
from errors import GardenError

# models を import しておく（create_all がテーブルを認識するため）
from models.user import User
from models.plant import Plant
from models.garden import GardenEntry

from routers import auth, plants, species

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("garden.app")

app = FastAPI(title="Garden Tracker")

# 起動時間の記録（任意）
STARTED_AT = time.time()

# --- CORS設定 ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    dur_ms = (time.perf_counter() - start) * 1000.0
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, dur_ms)
    return response


@app.exception_handler(GardenError)
async def garden_error_handler(request: Request, exc: GardenError) -> JSONResponse:
    """ドメインエラーを {"error": {"code", "message"}} で返す"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# --- ルーター ---
app.include_router(auth.router)
app.include_router(plants.router)
app.include_router(species.router)


@app.on_event("startup")
def _startup():
    """
    起動時に1回だけ実行される処理
    - DBテーブル作成
    """
    Base.metadata.create_all(bind=engine)


# --- 死活監視用の軽量エンドポイント（DBに触らない） ---
@app.get("/ping", include_in_schema=False)
def ping():
    return {
        "ok": True,
        "service": "garden-backend",
        "ts": datetime.now(timezone.utc).isoformat(),
        "uptime_sec": round(time.time() - STARTED_AT, 2),
    }
