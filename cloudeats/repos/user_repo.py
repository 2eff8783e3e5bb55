from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from cloudeats.data.models.user import UserModel
from cloudeats.domain.errors import Conflict, StoreFailure
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        try:
            return self.db.get(UserModel, user_id)
        except SQLAlchemyError as e:
            logger.exception(f"User lookup failed for id {user_id}")
            raise StoreFailure("Database error") from e

    def get_user_by_email(self, email: str) -> UserModel | None:
        try:
            return self.db.execute(
                select(UserModel).where(UserModel.email == email)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.exception("User lookup by email failed")
            raise StoreFailure("Database error") from e

    def create_user(self, user: UserModel) -> UserModel:
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            #unique email, lost a race with another register
            self.db.rollback()
            raise Conflict("Email already registered") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("User insert failed")
            raise StoreFailure("Database error") from e
        return user
