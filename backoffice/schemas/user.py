from datetime import datetime

from backoffice.schemas.base import ApiSchema, partial_model


class UserCreate(ApiSchema):
    username: str
    password: str
    email: str
    role: str = "user"
    is_active: bool = True


UserUpdate = partial_model(UserCreate)


class UserRead(ApiSchema):
    # No password here: it is write-only
    id: str
    username: str
    email: str
    role: str
    is_active: bool
    created_at: datetime
