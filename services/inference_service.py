"""
추론 API 연동 서비스
Hugging Face Inference API에 사용자 메시지를 전달하고 생성된 답변을 받아온다.
재시도는 하지 않으며, 실패 시 GatewayError로 변환한다.
"""

import httpx
import logging
from typing import Optional

from fastapi import Depends

from config.settings import Settings, get_settings
from utils.errors import ConfigurationError, GatewayError

logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Chatbot service error: Invalid AI response"
SERVICE_FAILED_MESSAGE = "Chatbot service failed"


def extract_generated_text(data) -> Optional[str]:
    """응답에서 첫 번째 generated_text 추출, 형식이 다르면 None"""
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    text = first.get("generated_text")
    if not isinstance(text, str) or not text:
        return None
    return text


class InferenceClient:
    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def generate(self, message: str) -> str:
        """메시지를 단일 입력으로 전달하고 생성된 텍스트 반환"""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json={"inputs": message},
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ 추론 API HTTP 오류: {e.response.status_code} {e.response.text}")
            raise GatewayError(SERVICE_FAILED_MESSAGE)
        except httpx.HTTPError as e:
            logger.error(f"🔌 추론 API 연결 오류: {e}")
            raise GatewayError(SERVICE_FAILED_MESSAGE)
        except ValueError as e:
            logger.error(f"❌ 추론 API 응답 파싱 실패: {e}")
            raise GatewayError(SERVICE_FAILED_MESSAGE)

        logger.info(f"📩 추론 API 응답: {data}")

        generated_text = extract_generated_text(data)
        if generated_text is None:
            logger.error(f"❌ 예상치 못한 추론 API 응답: {data}")
            raise GatewayError(INVALID_RESPONSE_MESSAGE)
        return generated_text


def get_inference_client(settings: Settings = Depends(get_settings)) -> InferenceClient:
    """요청마다 API 키 확인 (재시작 없이 키 설정 반영)"""
    if not settings.hf_api_key:
        logger.error("❌ HF_API_KEY가 설정되지 않았습니다.")
        raise ConfigurationError("Chatbot service misconfiguration")
    return InferenceClient(
        api_url=settings.hf_api_url,
        api_key=settings.hf_api_key,
        timeout=settings.inference_timeout,
    )
