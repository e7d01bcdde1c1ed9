"""
Data Models for the AngstromSCD desktop command proxy
Defines Pydantic models for command requests and backend responses
"""

from pydantic import BaseModel, Field
from typing import Optional, List


# Known UI vocabulary; informational only, the backend validates mode/tone.
CHAT_MODES = ("Research", "Create", "Analyze", "Plan", "Learn")
MESSAGE_TONES = ("Default", "Formal", "Bullet Points", "Lay Summary")

DEFAULT_CHAT_MODE = "Research"
DEFAULT_MESSAGE_TONE = "Default"


# ==================== Command Requests ====================

class ChatMessage(BaseModel):
    """Chat message composed in the UI"""
    content: str
    role: str = Field(..., description="user, assistant, or system")


# ==================== Backend Responses ====================

class ChatResponse(BaseModel):
    """Assistant reply with its supporting citations"""
    message: str
    citations: List[str]


class LiteratureResult(BaseModel):
    """Single literature search hit"""
    title: str
    abstract_text: str
    pmid: Optional[str] = None
    doi: Optional[str] = None
    relevance_score: float


class VoeAlert(BaseModel):
    """Vaso-occlusive episode risk alert for a patient"""
    id: str
    patient_id: str
    risk_level: str = Field(..., description="low, medium, high")
    message: str
    timestamp: str
