# app/routes/project_routes.py
import logging

from fastapi import APIRouter, Depends

from app.core.exceptions import InternalError, ResourceError
from app.deps import get_project_service
from app.models.project import ProjectCreate, ProjectUpdate
from app.services.project_service import ProjectService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
)


@router.get("", summary="List projects")
def list_projects(service: ProjectService = Depends(get_project_service)):
    try:
        projects = service.list_projects()
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error fetching projects")
        raise InternalError("Failed to fetch projects")
    return {"success": True, "projects": projects}


@router.post("", summary="Create project")
def create_project(req: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    try:
        project = service.create_project(req)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error creating project")
        raise InternalError("Failed to create project")
    return {"success": True, "message": "Project created successfully", "project": project}


@router.get("/{project_id}", summary="Get project")
def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    try:
        project = service.get_project(project_id)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error fetching project")
        raise InternalError("Failed to fetch project")
    return {"success": True, "project": project}


@router.put("/{project_id}", summary="Update project")
def update_project(
    project_id: str,
    req: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = service.update_project(project_id, req)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error updating project")
        raise InternalError("Failed to update project")
    return {"success": True, "message": "Project updated successfully", "project": project}


@router.delete("/{project_id}", summary="Delete project")
def delete_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    try:
        service.delete_project(project_id)
    except ResourceError:
        raise
    except Exception:
        logger.exception("Error deleting project")
        raise InternalError("Failed to delete project")
    return {"success": True, "message": "Project deleted successfully"}
