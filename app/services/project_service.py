# app/services/project_service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from app.config import settings
from app.core.exceptions import BadRequest, NotFound
from app.helper import project_to_wire
from app.models.project import ProjectCreate, ProjectUpdate
from app.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("projectName", "githubRepo", "status")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _supplied(body) -> Dict[str, Any]:
    fields = body.model_dump(exclude_unset=True, by_alias=True)
    for key in REQUIRED_FIELDS:
        if key in fields and not fields[key]:
            raise BadRequest(f"{key} cannot be empty")
    if "description" in fields and fields["description"] is None:
        fields["description"] = ""
    if "teamMembers" in fields:
        # set semantics, first occurrence keeps its position
        fields["teamMembers"] = list(dict.fromkeys(fields["teamMembers"] or []))
    return fields


class ProjectService:
    def __init__(
        self,
        store: EntityStore,
        collection: str | None = None,
        members_collection: str | None = None,
    ):
        self.store = store
        self.collection = collection or settings.PROJECTS_COLLECTION
        self.members_collection = members_collection or settings.MEMBERS_COLLECTION

    def _get_or_404(self, project_id: str) -> Dict[str, Any]:
        doc = self.store.find_by_id(self.collection, project_id)
        if doc is None:
            raise NotFound("Project not found")
        return doc

    def _check_team_members(self, member_ids: List[str]) -> None:
        if not member_ids:
            return
        found = self.store.find_by_ids(self.members_collection, member_ids)
        if len(found) != len(member_ids):
            raise BadRequest("One or more team members not found")

    def _resolve(self, docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Attach member summaries to each project with a single batched read."""
        ids = list(dict.fromkeys(mid for d in docs for mid in d.get("teamMembers") or []))
        members = self.store.find_by_ids(self.members_collection, ids) if ids else []
        return [project_to_wire(d, members) for d in docs]

    # ===== LIST =====
    def list_projects(self) -> List[Dict[str, Any]]:
        docs = self.store.list_all(self.collection, order_by="createdAt", descending=True)
        return self._resolve(docs)

    # ===== CREATE =====
    def create_project(self, body: ProjectCreate) -> Dict[str, Any]:
        if not body.project_name or not body.github_repo:
            raise BadRequest("Project name and GitHub repository are required")
        fields = _supplied(body)
        self._check_team_members(fields.get("teamMembers") or [])

        now = _now()
        data = {
            "description": "",
            "teamMembers": [],
            "status": "active",
            **fields,
            "createdAt": now,
            "updatedAt": now,
        }
        doc = self.store.insert(self.collection, data)
        logger.info("Created project %s (%s)", doc["id"], doc["projectName"])
        return self._resolve([doc])[0]

    # ===== DETAIL =====
    def get_project(self, project_id: str) -> Dict[str, Any]:
        return self._resolve([self._get_or_404(project_id)])[0]

    # ===== UPDATE =====
    def update_project(self, project_id: str, body: ProjectUpdate) -> Dict[str, Any]:
        self._get_or_404(project_id)
        fields = _supplied(body)
        if "teamMembers" in fields:
            self._check_team_members(fields["teamMembers"])

        fields["updatedAt"] = _now()
        doc = self.store.update(self.collection, project_id, fields)
        logger.info("Updated project %s (%s)", project_id, ", ".join(sorted(fields)))
        return self._resolve([doc])[0]

    # ===== DELETE =====
    def delete_project(self, project_id: str) -> None:
        self._get_or_404(project_id)
        self.store.delete(self.collection, project_id)
        logger.info("Deleted project %s", project_id)
