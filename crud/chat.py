from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from models.chat import ChatHistory
from utils.errors import PersistenceError
from typing import List
import logging

logger = logging.getLogger(__name__)

def save_chat_turn(db: Session, user_id: int, user_message: str, bot_reply: str) -> ChatHistory:
    """대화 한 턴(사용자 메시지 + 봇 응답)을 저장"""
    try:
        db_turn = ChatHistory(
            user_id=user_id,
            user_message=user_message,
            bot_reply=bot_reply
        )
        db.add(db_turn)
        db.commit()
        db.refresh(db_turn)
        return db_turn
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"대화 저장 실패: {str(e)}")
        raise PersistenceError("Chatbot service failed")

def get_recent_chat_history(db: Session, limit: int = 10) -> List[ChatHistory]:
    """전체 대화 히스토리 조회 (최신순)"""
    try:
        # created_at이 같은 경우 id로 삽입 순서 보장
        return db.query(ChatHistory)\
            .order_by(ChatHistory.created_at.desc(), ChatHistory.id.desc())\
            .limit(limit)\
            .all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"대화 히스토리 조회 실패: {str(e)}")
        raise PersistenceError("Failed to fetch chat history")

def delete_all_chat_history(db: Session) -> int:
    """모든 대화 히스토리 삭제, 삭제된 행 수 반환"""
    try:
        deleted_count = db.query(ChatHistory).delete()
        db.commit()
        return deleted_count
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"대화 히스토리 삭제 실패: {str(e)}")
        raise PersistenceError("Failed to delete messages")
