from typing import Any, Dict, Iterable, List

# never leave the service, whatever the read path
CREDENTIAL_FIELDS = frozenset({"password", "passwordHash", "mustRotatePassword"})


def strip_credentials(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in doc.items() if k not in CREDENTIAL_FIELDS}


def member_to_wire(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Stored member document -> response record."""
    doc = strip_credentials(doc)
    return {
        "_id": doc["id"],
        "name": doc.get("name"),
        "email": doc.get("email"),
        "role": doc.get("role"),
        "githubUsername": doc.get("githubUsername") or "",
        "assignedProjects": doc.get("assignedProjects") or [],
        "status": doc.get("status") or "active",
        "joinedDate": doc.get("createdAt"),
    }


def member_summary(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "_id": doc["id"],
        "name": doc.get("name"),
        "email": doc.get("email"),
        "githubUsername": doc.get("githubUsername") or "",
    }


def project_to_wire(doc: Dict[str, Any], members: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Stored project document -> response record.

    ``teamMembers`` ids are resolved against ``members``; ids with no
    matching member (e.g. the member was deleted) are dropped.
    """
    by_id = {m["id"]: m for m in members}
    team: List[Dict[str, Any]] = [
        member_summary(by_id[mid]) for mid in doc.get("teamMembers") or [] if mid in by_id
    ]
    return {
        "_id": doc["id"],
        "projectName": doc.get("projectName"),
        "description": doc.get("description") or "",
        "githubRepo": doc.get("githubRepo"),
        "teamMembers": team,
        "status": doc.get("status") or "active",
        "createdAt": doc.get("createdAt"),
        "updatedAt": doc.get("updatedAt"),
    }
