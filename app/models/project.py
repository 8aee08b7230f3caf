from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

ProjectStatus = Literal["active", "inactive", "completed"]


class ProjectCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_name: Optional[str] = Field(None, alias="projectName")
    description: Optional[str] = None
    github_repo: Optional[str] = Field(None, alias="githubRepo")
    team_members: Optional[List[str]] = Field(None, alias="teamMembers")
    status: Optional[ProjectStatus] = None


class ProjectUpdate(ProjectCreate):
    pass
