import bcrypt
from sqlalchemy.orm import Session

from cloudeats.data.models.user import UserModel
from cloudeats.domain.errors import Conflict, InvalidCredentials, NotFound
from cloudeats.domain.schemas import LoginIn, UserCreate, UserProfile, UserRead
from cloudeats.repos.user_repo import UserRepo
from cloudeats.utils.settings import BCRYPT_ROUNDS
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


class UserService:
    def __init__(self, db: Session, rounds: int = BCRYPT_ROUNDS):
        self.repo = UserRepo(db)
        self.rounds = rounds

    def register(self, payload: UserCreate) -> UserRead:
        if self.repo.get_user_by_email(payload.email):
            raise Conflict("Email already registered")

        user = UserModel(
            email=payload.email,
            password_hash=hash_password(payload.password, self.rounds),
            full_name=payload.full_name,
            phone=payload.phone or None,
        )
        created = self.repo.create_user(user)

        logger.info(f"User {created.id} registered")
        return UserRead.model_validate(created)

    def login(self, payload: LoginIn) -> UserRead:
        user = self.repo.get_user_by_email(payload.email)

        #same answer for unknown email and wrong password
        if not user or not check_password(payload.password, user.password_hash):
            raise InvalidCredentials()

        return UserRead.model_validate(user)

    def get_user(self, user_id: int) -> UserProfile:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFound("User not found")
        return UserProfile.model_validate(user)
