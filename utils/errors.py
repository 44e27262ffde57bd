"""
API 오류 정의
라우터는 아래 예외만 발생시키고, HTTP 응답 변환은 main.py의 핸들러가 담당한다.
"""

from fastapi import status


class APIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """필수 입력 누락 또는 형식 오류"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(APIError):
    """인증 실패 (사용자 없음 / 비밀번호 불일치 구분 없음)"""
    status_code = status.HTTP_401_UNAUTHORIZED


class ConfigurationError(APIError):
    """필수 설정값(API 키 등) 누락"""


class GatewayError(APIError):
    """외부 추론 API 호출 실패 또는 응답 형식 오류"""


class PersistenceError(APIError):
    """DB 작업 실패"""
