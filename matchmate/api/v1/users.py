from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from matchmate.api.deps import (
    Identity,
    get_account_service,
    get_current_identity,
    get_moderation_service,
)
from matchmate.schemas.common import MessageResponse
from matchmate.schemas.report import ReportCreate, ReportEnvelope, ReportResponse
from matchmate.schemas.user import UserDataEnvelope, UserListDataEnvelope, UserListEnvelope, UserResponse
from matchmate.services.account_service import AccountService, parse_hobbies
from matchmate.services.moderation_service import ModerationService

router = APIRouter()


@router.get("/users", response_model=UserListEnvelope)
def get_users_by_interest(
    interested_in: Optional[str] = Query(None, alias="interestedIn"),
    identity: Identity = Depends(get_current_identity),
    service: AccountService = Depends(get_account_service),
):
    """Users whose gender matches male, female or both"""
    users = service.get_users_by_interest(identity.id, interested_in)
    return {
        "message": f"Users interested in {interested_in} found.",
        "users": [UserResponse.model_validate(u) for u in users],
    }


@router.get("/users-by-hobbies", response_model=UserListDataEnvelope)
def get_users_by_hobbies(
    hobbies: Optional[List[str]] = Query(None),
    identity: Identity = Depends(get_current_identity),
    service: AccountService = Depends(get_account_service),
):
    users = service.get_users_by_hobbies(identity.id, parse_hobbies(hobbies))
    return {
        "message": "Users fetched successfully.",
        "data": [UserResponse.model_validate(u) for u in users],
    }


@router.get("/user", response_model=UserDataEnvelope)
def get_own_details(
    identity: Identity = Depends(get_current_identity),
    service: AccountService = Depends(get_account_service),
):
    user = service.get_user_details(identity.id)
    return {"message": "User details fetched successfully.", "data": UserResponse.model_validate(user)}


@router.get("/user/{user_id}", response_model=UserDataEnvelope)
def get_user_details(
    user_id: int,
    identity: Identity = Depends(get_current_identity),
    service: AccountService = Depends(get_account_service),
):
    user = service.get_user_details(user_id)
    return {"message": "User details fetched successfully.", "data": UserResponse.model_validate(user)}


@router.delete("/user/delete", response_model=MessageResponse)
def delete_account(
    identity: Identity = Depends(get_current_identity),
    service: AccountService = Depends(get_account_service),
):
    """Hard delete the caller's own account"""
    service.delete_account(identity.id)
    return {"message": "Account deleted successfully."}


@router.post("/report", response_model=ReportEnvelope, status_code=status.HTTP_201_CREATED)
def report_user(
    report_data: ReportCreate,
    identity: Identity = Depends(get_current_identity),
    service: ModerationService = Depends(get_moderation_service),
):
    report = service.report_user(
        identity.id,
        report_data.reported_user_id,
        report_data.reason,
        report_data.details,
    )
    return {
        "message": "Profile reported successfully. Our team will review the report.",
        "report": ReportResponse.model_validate(report),
    }
