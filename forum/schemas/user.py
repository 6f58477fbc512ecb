from pydantic import BaseModel


class UserSignUpDTO(BaseModel):
    email: str
    username: str
    password: str


class UserLogInDTO(BaseModel):
    email: str
    password: str
