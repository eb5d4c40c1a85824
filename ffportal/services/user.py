"""User service"""

from sqlalchemy.sql import func

from ffportal.errors.common import NotFoundError
from ffportal.models.user import User
from ffportal.passwords import hash_password
from ffportal.services.base import BaseService


class UserService(BaseService[User]):
    model = User

    def get_by_username(self, username: str) -> User:
        db_obj = (
            self.db.query(self.model)
            .filter(func.lower(self.model.username) == func.lower(username))
            .first()
        )
        if not db_obj:
            raise NotFoundError(f"{self.model.__name__} {username=}")
        return db_obj

    def set_password(self, username: str, password: str) -> User:
        """Create a user or reset the password of an existing one"""
        try:
            user = self.get_by_username(username)
            user.password_hash = hash_password(password)
            user.touch()
        except NotFoundError:
            user = self.model(username=username, password_hash=hash_password(password))
            self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        return user
