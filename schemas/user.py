from typing import Optional
from pydantic import BaseModel, ConfigDict

class UserCreate(BaseModel):
    # 누락/빈 값 검증은 라우터에서 400으로 처리
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    identifier: Optional[str] = None
    password: Optional[str] = None

class UserPublic(BaseModel):
    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class UserResponse(BaseModel):
    message: str
    user: UserPublic
