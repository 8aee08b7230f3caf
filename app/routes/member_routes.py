# app/routes/member_routes.py
"""
Team member management. Admin only (enforced by AdminGateMiddleware).

Every route returns ``{"success": true, ...}``; failures are rendered as
``{"success": false, "error": ...}`` by the ResourceError handler.
"""
import logging

from fastapi import APIRouter, Depends

from app.core.exceptions import InternalError, ResourceError
from app.deps import get_member_service
from app.models.member import MemberCreate, MemberUpdate
from app.services.member_service import MemberService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/team",
    tags=["team"],
)


# LIST
@router.get("/members", summary="List team members")
def list_members(service: MemberService = Depends(get_member_service)):
    try:
        members = service.list_members()
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error fetching team members")
        raise InternalError("Failed to fetch team members")
    return {"success": True, "members": members}


# CREATE
@router.post("/members", summary="Add team member")
def create_member(req: MemberCreate, service: MemberService = Depends(get_member_service)):
    try:
        member = service.create_member(req)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error adding team member")
        raise InternalError("Failed to add team member")
    return {"success": True, "message": "Team member added successfully", "member": member}


# DETAIL
@router.get("/members/{member_id}", summary="Get team member")
def get_member(member_id: str, service: MemberService = Depends(get_member_service)):
    try:
        member = service.get_member(member_id)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error fetching team member")
        raise InternalError("Failed to fetch team member")
    return {"success": True, "member": member}


# UPDATE
@router.put("/members/{member_id}", summary="Update team member")
def update_member(
    member_id: str,
    req: MemberUpdate,
    service: MemberService = Depends(get_member_service),
):
    try:
        member = service.update_member(member_id, req)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error updating team member")
        raise InternalError("Failed to update team member")
    return {"success": True, "message": "Team member updated successfully", "member": member}


# DELETE
@router.delete("/members/{member_id}", summary="Remove team member")
def delete_member(member_id: str, service: MemberService = Depends(get_member_service)):
    try:
        service.delete_member(member_id)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error deleting team member")
        raise InternalError("Failed to remove team member")
    return {"success": True, "message": "Team member removed successfully"}
