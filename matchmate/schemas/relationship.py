from typing import Optional
from datetime import datetime

from .common import CamelModel


class LoveRequestCreate(CamelModel):
    receiver_username: Optional[str] = ""


class GiftCreate(CamelModel):
    receiver_username: Optional[str] = ""
    gift_type: Optional[str] = ""
    message: Optional[str] = None


class GiftResponse(CamelModel):
    id: int
    sender_id: int
    receiver_id: int
    gift_type: str
    message: Optional[str] = None
    created_at: Optional[datetime] = None


class GiftEnvelope(CamelModel):
    message: str
    gift: GiftResponse
