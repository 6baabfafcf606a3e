from typing import Generic, TypeVar, Type, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError, OperationalError, InterfaceError
from functools import wraps
import logging

from .models import Base, User, PersonalDetails
from .errors import Conflict, DataIntegrity, NotFoundOrForbidden, UpstreamFailure

logger = logging.getLogger("resume_service.repository")

ModelType = TypeVar("ModelType", bound=Base)

# Largest value an integer primary key can hold (64-bit signed)
MAX_ROW_ID = 2**63 - 1


def upstream_guard(func):
    """Roll back and surface database connectivity errors as UpstreamFailure."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except (OperationalError, InterfaceError) as e:
            self.db.rollback()
            logger.error(f"Database error in {func.__name__}: {e}")
            raise UpstreamFailure() from e
    return wrapper


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    @upstream_guard
    def create(self, obj_in: dict) -> ModelType:
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        try:
            self.db.commit()
        except IntegrityError as e:
            # the owning user row is gone
            self.db.rollback()
            logger.error(f"Insert into {self.model.__tablename__} violated a constraint: {e}")
            raise DataIntegrity(f"Could not store {self.model.__tablename__} row for this user.") from e
        self.db.refresh(db_obj)
        return db_obj

    @upstream_guard
    def delete_owned(self, id: int, user_id: int) -> int:
        """Delete a row only if it belongs to user_id. Returns the number of rows removed."""
        if not 0 < id <= MAX_ROW_ID:
            return 0
        count = self.db.query(self.model).filter(
            self.model.id == id,
            self.model.user_id == user_id
        ).delete(synchronize_session=False)
        if count > 1:
            self.db.rollback()
            logger.error(f"Scoped delete on {self.model.__tablename__} matched {count} rows for id={id}")
            raise DataIntegrity(f"More than one {self.model.__tablename__} row matched id {id}.")
        self.db.commit()
        return count


class UserRepository(BaseRepository):
    def __init__(self, db: Session):
        super().__init__(User, db)

    @upstream_guard
    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    @upstream_guard
    def get_with_resume(self, user_id: int) -> Optional[User]:
        return self.db.query(User).options(
            selectinload(User.personal_details),
            selectinload(User.experiences),
            selectinload(User.education),
            selectinload(User.skills),
            selectinload(User.projects),
        ).filter(User.id == user_id).first()

    @upstream_guard
    def create(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise Conflict() from e
        self.db.refresh(user)
        return user


class PersonalDetailsRepository(BaseRepository):
    def __init__(self, db: Session):
        super().__init__(PersonalDetails, db)

    @upstream_guard
    def upsert(self, user_id: int, data: dict) -> PersonalDetails:
        details = self.db.query(PersonalDetails).filter(PersonalDetails.user_id == user_id).first()
        if details is None:
            details = PersonalDetails(user_id=user_id, **data)
            self.db.add(details)
        else:
            for field, value in data.items():
                setattr(details, field, value)
        try:
            self.db.commit()
        except IntegrityError:
            # Either a concurrent request created the row first (apply as an update)
            # or the owning user row is gone.
            self.db.rollback()
            details = self.db.query(PersonalDetails).filter(PersonalDetails.user_id == user_id).first()
            if details is None:
                raise DataIntegrity("Could not store personal details for this user.")
            for field, value in data.items():
                setattr(details, field, value)
            self.db.commit()
        self.db.refresh(details)
        return details


def scoped_delete(repo: BaseRepository, id: int, user_id: int, label: str) -> None:
    """
    Delete one record owned by user_id.

    A record that does not exist and a record owned by someone else give the
    same NotFoundOrForbidden error, so callers learn nothing about other users.
    """
    if repo.delete_owned(id, user_id) == 0:
        raise NotFoundOrForbidden(f"{label} not found or you do not have permission to delete it.")
    logger.info(f"Deleted {repo.model.__tablename__} {id} for user {user_id}")
