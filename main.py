from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
import logging
import os
from datetime import datetime
from routers import user as user_router
from routers import chat as chat_router
from database import engine, Base
from config.settings import get_settings
from utils.errors import APIError

# 로그 디렉토리 생성
def setup_logging(log_dir: str = "logs"):
    """로깅 설정 초기화"""
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # 로그 파일명 (날짜별)
    today = datetime.now().strftime("%Y-%m-%d")
    log_file = f"{log_dir}/app_{today}.log"

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # 파일 핸들러 (로그 파일에 저장)
            logging.FileHandler(log_file, encoding='utf-8'),
            # 콘솔 핸들러 (터미널에도 출력)
            logging.StreamHandler()
        ]
    )

    logger = logging.getLogger(__name__)
    logger.info("로깅 시스템 초기화 완료")
    logger.info(f"로그 파일 위치: {os.path.abspath(log_file)}")

    return logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = setup_logging(get_settings().log_dir)

    try:
        logger.info("서버 시작 중...")

        # 데이터베이스 테이블 생성
        Base.metadata.create_all(bind=engine)
        logger.info("✅ 데이터베이스 테이블 생성 완료")

    except Exception as e:
        logger.error(f"❌ 서버 초기화 중 오류 발생: {e}")
        raise

    logger.info("서버 시작 완료")
    yield

    logger.info("서버 종료 중...")

app = FastAPI(title="Chatbot API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logging.getLogger(__name__).warning(f"잘못된 요청 본문: {request.url.path} {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )

@app.get("/", response_class=PlainTextResponse)
def root():
    return "🚀 Chatbot API is running..."

app.include_router(user_router.router)
app.include_router(chat_router.router)

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
