# services/user.py
from catalog.exceptions import DuplicateError, UserNotFound, WrongPassword
from catalog.models.database_models import User
from catalog.models.schemas.user import Credentials, UserResponse
from catalog.utils.common import hash_secret, verify_secret
from catalog.utils.logging import get_logger

from catalog.services.base import BaseService

logger = get_logger(__name__)


class UserService(BaseService[User]):
    async def get_by_mail(self, mail: str):
        return await self._handle_db_operation(
            lambda: self.db.query(User).filter(User.mail == mail).first(), commit=False
        )

    async def create(self, data: Credentials) -> UserResponse:
        """Register a user, storing only a salted digest of the password."""
        if await self.get_by_mail(data.mail) is not None:
            raise DuplicateError("Mail already registered")

        user = User(mail=data.mail, password_hash=hash_secret(data.password))

        def insert():
            self.db.add(user)
            self.db.flush()
            return UserResponse.model_validate(user)

        created = await self._handle_db_operation(insert)
        logger.info("Registered user {}", created.id)
        return created

    async def authenticate(self, mail: str, password: str) -> User:
        user = await self.get_by_mail(mail)
        if user is None:
            raise UserNotFound("User Don't Exist")
        if not verify_secret(password, user.password_hash):
            raise WrongPassword("Password is Wrong")
        return user
