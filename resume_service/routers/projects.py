from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..models import Project
from ..repository import BaseRepository, scoped_delete
from ..schemas import CurrentUser, ProjectCreate, ProjectOut

router = APIRouter(prefix="/api", tags=["projects"])


def get_project_repository(db: Session = Depends(get_db)) -> BaseRepository:
    return BaseRepository(Project, db)


@router.post("/project", status_code=status.HTTP_201_CREATED)
def add_project(
    data: ProjectCreate,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_project_repository)
):
    project_data = data.model_dump()
    project_data["user_id"] = user.id
    project = repo.create(project_data)
    return {"message": "Project added!", "data": ProjectOut.model_validate(project)}


@router.delete("/project/{id}")
def delete_project(
    id: int,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_project_repository)
):
    scoped_delete(repo, id, user.id, "Project")
    return {"message": "Project deleted successfully!"}
