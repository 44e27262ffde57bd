from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt 해시 (평문 저장 금지)
    password = Column(String, nullable=False)

    chat_history = relationship("ChatHistory", back_populates="user")
