from models.user import User
from models.chat import ChatHistory

__all__ = ["User", "ChatHistory"]
