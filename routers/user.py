from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from database import get_db
from schemas.user import UserCreate, UserLogin, UserPublic, UserResponse
from crud.user import create_user, get_user_by_identifier
from utils.errors import APIError, ValidationError, AuthError, PersistenceError
from utils.security import verify_password
import logging

# 로거 설정
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def register_endpoint(user: UserCreate, db: Session = Depends(get_db)):
    """사용자 회원가입"""
    if not user.username or not user.email or not user.password:
        raise ValidationError("Username, email, and password are required")

    try:
        # 중복 사용자명/이메일은 DB 제약 위반으로 500 처리됨
        db_user = create_user(db, user.username, user.email, user.password)

        logger.info(f"새 사용자 가입: {db_user.username} ({db_user.email})")

        return UserResponse(
            message="User registered successfully",
            user=UserPublic.model_validate(db_user),
        )

    except APIError:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"회원가입 실패: {str(e)}")
        raise PersistenceError("Server error during registration")

@router.post("/login", response_model=UserResponse)
def login_endpoint(user: UserLogin, db: Session = Depends(get_db)):
    """사용자 로그인"""
    if not user.identifier or not user.password:
        raise ValidationError("Username/Email and password are required")

    try:
        # 1. 사용자 조회 (사용자명 또는 이메일)
        db_user = get_user_by_identifier(db, user.identifier)
        if not db_user:
            logger.warning(f"로그인 실패: 존재하지 않는 사용자 - {user.identifier}")
            raise AuthError("Invalid credentials")

        # 2. 비밀번호 검증
        if not verify_password(user.password, str(db_user.password)):
            logger.warning(f"로그인 실패: 잘못된 비밀번호 - {user.identifier}")
            raise AuthError("Invalid credentials")

        logger.info(f"사용자 로그인 성공: {db_user.username}")

        return UserResponse(
            message="Login successful",
            user=UserPublic.model_validate(db_user),
        )

    except APIError:
        raise
    except Exception as e:
        logger.error(f"로그인 처리 실패: {str(e)}")
        raise PersistenceError("Server error during login")
