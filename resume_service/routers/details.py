from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..repository import PersonalDetailsRepository
from ..schemas import CurrentUser, PersonalDetailsIn, PersonalDetailsOut

router = APIRouter(prefix="/api", tags=["personal-details"])


def get_details_repository(db: Session = Depends(get_db)) -> PersonalDetailsRepository:
    return PersonalDetailsRepository(db)


@router.post("/details")
def save_details(
    data: PersonalDetailsIn,
    user: CurrentUser = Depends(get_current_user),
    repo: PersonalDetailsRepository = Depends(get_details_repository)
):
    """Create the user's personal details, or update them if they exist"""
    details = repo.upsert(user.id, data.model_dump(exclude_unset=True))
    return {"message": "Details saved successfully!", "details": PersonalDetailsOut.model_validate(details)}
