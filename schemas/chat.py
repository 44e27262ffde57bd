from typing import Optional
from pydantic import BaseModel

class ChatRequest(BaseModel):
    message: Optional[str] = None

class ChatReply(BaseModel):
    reply: str

class ChatPreview(BaseModel):
    preview: str

class DeleteResult(BaseModel):
    success: bool
    message: str
