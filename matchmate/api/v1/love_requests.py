from fastapi import APIRouter, Depends, status

from matchmate.api.deps import Identity, get_current_identity, get_relationship_service
from matchmate.schemas.common import MessageResponse
from matchmate.schemas.relationship import GiftCreate, GiftEnvelope, GiftResponse, LoveRequestCreate
from matchmate.services.relationship_service import RelationshipService

router = APIRouter()


@router.post("/love-request/send", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_love_request(
    request_data: LoveRequestCreate,
    identity: Identity = Depends(get_current_identity),
    service: RelationshipService = Depends(get_relationship_service),
):
    service.send_love_request(identity.id, request_data.receiver_username)
    return {"message": "Love request sent successfully. 💖"}


@router.post("/send-gift", response_model=GiftEnvelope, status_code=status.HTTP_201_CREATED)
def send_gift(
    gift_data: GiftCreate,
    identity: Identity = Depends(get_current_identity),
    service: RelationshipService = Depends(get_relationship_service),
):
    gift, receiver = service.send_gift(
        identity.id,
        gift_data.receiver_username,
        gift_data.gift_type,
        gift_data.message,
    )
    return {
        "message": f"Gift sent successfully to {receiver.username} 🎁",
        "gift": GiftResponse.model_validate(gift),
    }
