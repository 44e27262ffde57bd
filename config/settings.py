import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HF_API_URL = "https://api-inference.huggingface.co/models/facebook/blenderbot-3B"


class Settings:
    """환경 변수 기반 애플리케이션 설정

    생성 시점의 환경 변수를 읽으므로 요청마다 새로 만들면
    서버 재시작 없이 값 변경이 반영된다.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        hf_api_key: Optional[str] = None,
        hf_api_url: Optional[str] = None,
        inference_timeout: Optional[float] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_dir: Optional[str] = None,
        cors_origins: Optional[List[str]] = None,
    ):
        self.database_url = database_url or os.getenv("DATABASE_URL", "sqlite:///./app.db")
        self.hf_api_key = hf_api_key if hf_api_key is not None else os.getenv("HF_API_KEY")
        self.hf_api_url = hf_api_url or os.getenv("HF_API_URL", DEFAULT_HF_API_URL)
        self.inference_timeout = inference_timeout or float(os.getenv("INFERENCE_TIMEOUT", "60"))
        self.host = host or os.getenv("HOST", "0.0.0.0")
        self.port = port or int(os.getenv("PORT", "5000"))
        self.log_dir = log_dir or os.getenv("LOG_DIR", "logs")
        if cors_origins is None:
            cors_origins = [
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ]
        self.cors_origins = cors_origins


def get_settings() -> Settings:
    return Settings()
