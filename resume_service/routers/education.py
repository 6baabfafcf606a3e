from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..models import Education
from ..repository import BaseRepository, scoped_delete
from ..schemas import CurrentUser, EducationCreate, EducationOut

router = APIRouter(prefix="/api", tags=["education"])


def get_education_repository(db: Session = Depends(get_db)) -> BaseRepository:
    return BaseRepository(Education, db)


@router.post("/education", status_code=status.HTTP_201_CREATED)
def add_education(
    data: EducationCreate,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_education_repository)
):
    edu_data = data.model_dump()
    edu_data["user_id"] = user.id
    education = repo.create(edu_data)
    return {"message": "Education added!", "data": EducationOut.model_validate(education)}


@router.delete("/education/{id}")
def delete_education(
    id: int,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_education_repository)
):
    scoped_delete(repo, id, user.id, "Education")
    return {"message": "Education deleted successfully!"}
