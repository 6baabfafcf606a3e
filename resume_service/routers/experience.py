from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..models import Experience
from ..repository import BaseRepository, scoped_delete
from ..schemas import CurrentUser, ExperienceCreate, ExperienceOut

router = APIRouter(prefix="/api", tags=["experience"])


def get_experience_repository(db: Session = Depends(get_db)) -> BaseRepository:
    return BaseRepository(Experience, db)


@router.post("/experience", status_code=status.HTTP_201_CREATED)
def add_experience(
    data: ExperienceCreate,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_experience_repository)
):
    experience_data = data.model_dump()
    experience_data["user_id"] = user.id
    experience = repo.create(experience_data)
    return {"message": "Experience added!", "data": ExperienceOut.model_validate(experience)}


@router.delete("/experience/{id}")
def delete_experience(
    id: int,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_experience_repository)
):
    scoped_delete(repo, id, user.id, "Experience")
    return {"message": "Experience deleted successfully!"}
