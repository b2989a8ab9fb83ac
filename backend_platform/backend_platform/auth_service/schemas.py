from pydantic import BaseModel


class Credentials(BaseModel):
    email: str
    password: str


class UserPublic(BaseModel):
    id: str
    email: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    user: UserPublic
    token: str


class MessageResponse(BaseModel):
    message: str
