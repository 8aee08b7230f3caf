from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

MemberRole = Literal["admin", "contributor", "viewer"]
MemberStatus = Literal["active", "inactive"]


class MemberCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # presence of name/email is checked by the service, not here
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[MemberRole] = None
    github_username: Optional[str] = Field(None, alias="githubUsername")
    assigned_projects: Optional[List[str]] = Field(None, alias="assignedProjects")
    status: Optional[MemberStatus] = None


class MemberUpdate(MemberCreate):
    """Same fields as create; only the ones present in the body are applied."""
