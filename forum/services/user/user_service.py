from sqlalchemy.ext.asyncio import AsyncSession

from forum.models import User
from forum.repositories.user_repository import UserRepository
from forum.schemas.user import UserLogInDTO, UserSignUpDTO
from forum.utils.exceptions import ConstraintViolation, InvalidCredential, NotFound


class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def create_user(self, user_data: UserSignUpDTO) -> User:
        new_user = User.create_user(user_data)
        # Duplicate email or username trips the UNIQUE constraints.
        created_user = await self.user_repository.insert_one(new_user)
        if not created_user:
            raise ConstraintViolation("Email or username already in use")
        return created_user

    async def authenticate_user(self, user_data: UserLogInDTO) -> User:
        user = await self.user_repository.find_by_email(user_data.email)
        if not user:
            raise NotFound("user not found")
        if not user.check_password(user_data.password):
            raise InvalidCredential("invalid password")
        return user

    async def get_user_by_email(self, email: str) -> User | None:
        if not email:
            return None
        return await self.user_repository.find_by_email(email)
