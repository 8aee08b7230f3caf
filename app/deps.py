from typing import Optional
from fastapi import Depends, Request

from app.config import settings
from app.repositories.entity_store import EntityStore, FirestoreEntityStore, InMemoryEntityStore
from app.services.auth_service import Decision, get_guard
from app.services.member_service import MemberService
from app.services.project_service import ProjectService

_store: Optional[EntityStore] = None


def get_store() -> EntityStore:
    """Process-wide store so state survives across requests."""
    global _store
    if _store is None:
        _store = InMemoryEntityStore() if settings.USE_IN_MEMORY_STORE else FirestoreEntityStore()
    return _store


def _role_claim(request: Request) -> Optional[str]:
    if settings.AUTH_MODE == "header":
        return request.headers.get(settings.ROLE_HEADER)
    return request.headers.get("Authorization")


def authorize_request(request: Request) -> Decision:
    """Evaluate the configured guard against the caller's claim."""
    return get_guard().authorize(_role_claim(request))


def get_member_service(store: EntityStore = Depends(get_store)) -> MemberService:
    return MemberService(store)


def get_project_service(store: EntityStore = Depends(get_store)) -> ProjectService:
    return ProjectService(store)
