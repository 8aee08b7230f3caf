# app/services/member_service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from app.config import settings
from app.core.exceptions import BadRequest, Conflict, NotFound
from app.helper import member_to_wire
from app.models.member import MemberCreate, MemberUpdate
from app.repositories.entity_store import EntityStore
from app.services.auth_service import issue_initial_credential

logger = logging.getLogger(__name__)

MEMBER_DEFAULTS: Dict[str, Any] = {
    "role": "contributor",
    "githubUsername": "",
    "assignedProjects": [],
    "status": "active",
}
REQUIRED_FIELDS = ("name", "email", "role", "status")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _supplied(body) -> Dict[str, Any]:
    """Fields present in the request body, keyed by their stored names."""
    fields = body.model_dump(exclude_unset=True, by_alias=True)
    for key in REQUIRED_FIELDS:
        if key in fields and not fields[key]:
            raise BadRequest(f"{key} cannot be empty")
    # explicit null on an optional field resets it
    for key, default in MEMBER_DEFAULTS.items():
        if key in fields and fields[key] is None:
            fields[key] = list(default) if isinstance(default, list) else default
    if fields.get("assignedProjects"):
        fields["assignedProjects"] = list(dict.fromkeys(fields["assignedProjects"]))
    return fields


class MemberService:
    def __init__(self, store: EntityStore, collection: str | None = None):
        self.store = store
        self.collection = collection or settings.MEMBERS_COLLECTION

    def _get_or_404(self, member_id: str) -> Dict[str, Any]:
        doc = self.store.find_by_id(self.collection, member_id)
        if doc is None:
            raise NotFound("Team member not found")
        return doc

    # ===== LIST =====
    def list_members(self) -> List[Dict[str, Any]]:
        docs = self.store.list_all(self.collection, order_by="createdAt", descending=True)
        return [member_to_wire(d) for d in docs]

    # ===== CREATE =====
    def create_member(self, body: MemberCreate) -> Dict[str, Any]:
        if not body.name or not body.email:
            raise BadRequest("Name and email are required")
        fields = _supplied(body)

        if self.store.find_one(self.collection, "email", fields["email"]) is not None:
            raise Conflict("User with this email already exists")

        # the plaintext is discarded; the member must go through a reset
        _, password_hash = issue_initial_credential()
        now = _now()
        data = {
            **MEMBER_DEFAULTS,
            "assignedProjects": [],
            **fields,
            "passwordHash": password_hash,
            "mustRotatePassword": True,
            "createdAt": now,
            "updatedAt": now,
        }
        doc = self.store.insert(self.collection, data)
        logger.info("Created team member %s", doc["id"])
        return member_to_wire(doc)

    # ===== DETAIL =====
    def get_member(self, member_id: str) -> Dict[str, Any]:
        return member_to_wire(self._get_or_404(member_id))

    # ===== UPDATE =====
    def update_member(self, member_id: str, body: MemberUpdate) -> Dict[str, Any]:
        current = self._get_or_404(member_id)
        fields = _supplied(body)

        email = fields.get("email")
        if email is not None and email != current.get("email"):
            other = self.store.find_one(self.collection, "email", email)
            if other is not None and other["id"] != member_id:
                raise Conflict("Email already in use by another user")

        fields["updatedAt"] = _now()
        doc = self.store.update(self.collection, member_id, fields)
        logger.info("Updated team member %s (%s)", member_id, ", ".join(sorted(fields)))
        return member_to_wire(doc)

    # ===== DELETE =====
    def delete_member(self, member_id: str) -> None:
        self._get_or_404(member_id)
        # projects keep the id in teamMembers; it is dropped when read
        self.store.delete(self.collection, member_id)
        logger.info("Deleted team member %s", member_id)
