from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..models import Skill
from ..repository import BaseRepository, scoped_delete
from ..schemas import CurrentUser, SkillCreate, SkillOut

router = APIRouter(prefix="/api", tags=["skills"])


def get_skill_repository(db: Session = Depends(get_db)) -> BaseRepository:
    return BaseRepository(Skill, db)


@router.post("/skill", status_code=status.HTTP_201_CREATED)
def add_skill(
    data: SkillCreate,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_skill_repository)
):
    skill_data = data.model_dump()
    skill_data["user_id"] = user.id
    skill = repo.create(skill_data)
    return {"message": "Skill added!", "data": SkillOut.model_validate(skill)}


@router.delete("/skill/{id}")
def delete_skill(
    id: int,
    user: CurrentUser = Depends(get_current_user),
    repo: BaseRepository = Depends(get_skill_repository)
):
    scoped_delete(repo, id, user.id, "Skill")
    return {"message": "Skill deleted successfully!"}
