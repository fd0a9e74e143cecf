from passlib.context import CryptContext

from ecorevive.data.store import EntityStore
from ecorevive.data.models.user import UserModel
from ecorevive.domain.errors import ConflictError, NotFoundError
from ecorevive.domain.schemas import UserCreate
from ecorevive.repos.user_repo import UserRepo
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class UserService:
    def __init__(self, store: EntityStore):
        self.repo = UserRepo(store)

    def register(self, payload: UserCreate) -> UserModel:
        # login i email unikalne bez wzgledu na wielkosc liter
        if self.repo.get_by_username(payload.username):
            raise ConflictError("Username already exists")

        if self.repo.get_by_email(payload.email):
            raise ConflictError("Email already exists")

        user = self.repo.create_user(
            {
                "username": payload.username,
                "password_hash": pwd_context.hash(payload.password),
                "email": payload.email,
                "full_name": payload.full_name,
                "location": payload.location,
                "role": payload.role,
            }
        )
        logger.info(f"Registered user {user.id} ({user.username}) as {user.role.value}")
        return user

    def authenticate(self, username: str, password: str) -> UserModel:
        user = self.repo.get_by_username(username)
        if not user or not pwd_context.verify(password, user.password_hash):
            raise PermissionError("Incorrect username or password")
        return user

    def get_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
