import os
import tempfile

# 앱 import 전에 테스트 환경 변수 설정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="chatbot-logs-")
os.environ.pop("HF_API_KEY", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from database import Base, get_db
from services.inference_service import get_inference_client
from utils.errors import GatewayError

# 테스트용 데이터베이스 설정
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeInferenceClient:
    """추론 API 대역 (reply 또는 error를 그대로 돌려줌)"""

    def __init__(self, reply="Hi!", error=None):
        self.reply = reply
        self.error = error
        self.messages = []

    async def generate(self, message):
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(scope="function")
def db_session():
    """테스트용 데이터베이스 세션"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def fake_inference():
    return FakeInferenceClient()

@pytest.fixture(scope="function")
def client(db_session, fake_inference):
    """테스트용 FastAPI 클라이언트"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_inference_client] = lambda: fake_inference
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def failing_inference(fake_inference):
    fake_inference.error = GatewayError("Chatbot service error: Invalid AI response")
    return fake_inference

@pytest.fixture
def test_user():
    """테스트용 사용자 데이터"""
    return {
        "username": "testuser",
        "email": "testuser@example.com",
        "password": "testpass123",
    }

@pytest.fixture
def registered_user(client, test_user):
    response = client.post("/api/register", json=test_user)
    assert response.status_code == 201
    return response.json()["user"]
