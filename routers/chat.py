from typing import List, Optional
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from database import get_db
from schemas.chat import ChatRequest, ChatReply, ChatPreview, DeleteResult
from crud.chat import save_chat_turn, get_recent_chat_history, delete_all_chat_history
from services.inference_service import InferenceClient, get_inference_client
from utils.errors import APIError, ValidationError, GatewayError, PersistenceError
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

HISTORY_LIMIT = 10
EMPTY_PREVIEW = "No message..."

# FIXME: 세션 추적이 없어 모든 대화가 user_id=1로 저장됨 (호출자와 무관)
DEFAULT_CHAT_USER_ID = 1

def make_preview(user_message: Optional[str]) -> str:
    """메시지 앞 두 단어 + '...'"""
    words = (user_message or "").split()
    if not words:
        return EMPTY_PREVIEW
    return " ".join(words[:2]) + "..."

# 챗봇 메시지 전송
@router.post("/chat", response_model=ChatReply)
async def chat_endpoint(
    request: ChatRequest,
    client: InferenceClient = Depends(get_inference_client),
    db: Session = Depends(get_db)
):
    """챗봇에 메시지 전송 후 대화 저장"""
    if not request.message:
        raise ValidationError("No message provided")

    try:
        logger.info(f"📩 사용자 메시지 수신: {request.message}")

        # 1. 추론 API 호출
        reply = await client.generate(request.message)
        logger.info(f"🤖 챗봇 응답: {reply}")

        # 2. 대화 저장 (스레드풀에서 실행, 실패 시 응답도 500)
        await run_in_threadpool(save_chat_turn, db, DEFAULT_CHAT_USER_ID, request.message, reply)

        return ChatReply(reply=reply)

    except APIError:
        raise
    except Exception as e:
        logger.error(f"❌ 챗봇 처리 실패: {str(e)}")
        raise GatewayError("Chatbot service failed")

# 대화 히스토리 조회
@router.get("/chathistory", response_model=List[ChatPreview])
def chat_history_endpoint(db: Session = Depends(get_db)):
    try:
        turns = get_recent_chat_history(db, HISTORY_LIMIT)
        return [ChatPreview(preview=make_preview(turn.user_message)) for turn in turns]
    except APIError:
        raise
    except Exception as e:
        logger.error(f"대화 히스토리 조회 실패: {str(e)}")
        raise PersistenceError("Failed to fetch chat history")

# 대화 히스토리 전체 삭제
@router.delete("/chat/delete", response_model=DeleteResult)
def delete_chat_history_endpoint(db: Session = Depends(get_db)):
    """모든 대화 삭제 (동시 저장 요청과 순서 보장 없음)"""
    try:
        deleted_count = delete_all_chat_history(db)
        logger.info(f"대화 히스토리 삭제: {deleted_count}건")
        return DeleteResult(success=True, message="Messages deleted successfully")
    except APIError:
        raise
    except Exception as e:
        logger.error(f"대화 히스토리 삭제 실패: {str(e)}")
        raise PersistenceError("Failed to delete messages")
