from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from models.user import User
from utils.errors import PersistenceError
from utils.security import hash_password
import logging

logger = logging.getLogger(__name__)

def get_user_by_identifier(db: Session, identifier: str) -> Optional[User]:
    """사용자명 또는 이메일로 사용자 조회 (대소문자 구분, 완전 일치)"""
    try:
        return db.query(User)\
            .filter(or_(User.username == identifier, User.email == identifier))\
            .first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"사용자 조회 실패: {str(e)}")
        raise PersistenceError("Server error during login")

def create_user(db: Session, username: str, email: str, password: str) -> User:
    """사용자 생성 (중복 검사는 DB 유니크 제약에 맡김)"""
    try:
        db_user = User(
            username=username,
            email=email,
            password=hash_password(password),
        )
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"사용자 생성 실패: {str(e)}")
        raise PersistenceError("Server error during registration")
