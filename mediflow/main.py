import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediflow.config import settings
from mediflow.routers import health, extraction, medication, fhir
from mediflow.schemas import ErrorResponse

# アプリケーション全体のログレベル設定
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """共通のエラーレスポンスを作成する"""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ErrorResponse(error=message)),
        headers=headers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """起動・終了時のログ出力"""
    base_url = f"http://localhost:{settings.PORT}"
    logger.info(f"✅ {settings.SERVICE_NAME} Server")
    logger.info(f"📍 Running on {base_url}")
    logger.info(f"🏥 API Status: {base_url}/api/status")
    logger.info(f"❤️  Health Check: {base_url}/health")
    yield
    logger.info(f"Shutting down {settings.SERVICE_NAME}...")


app = FastAPI(
    title=settings.SERVICE_NAME,
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)


# Content-Lengthが上限を超えるリクエストはボディを読む前に拒否する
@app.middleware("http")
async def limit_request_body(request: Request, call_next):
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() \
            and int(content_length) > settings.MAX_BODY_SIZE:
        logger.warning(f"Rejected request with Content-Length {content_length}")
        return error_response(413, "Request body too large")
    return await call_next(request)


# CORS 設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTPExceptionを {success: false, error} 形式で返す"""
    return error_response(
        exc.status_code, str(exc.detail), getattr(exc, "headers", None))


# ルーター登録
app.include_router(health.router)
app.include_router(extraction.router)
app.include_router(medication.router)
app.include_router(fhir.router)


def run():
    """uvicornでサーバーを起動する"""
    import uvicorn
    logger.info(f"Starting FastAPI server on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
