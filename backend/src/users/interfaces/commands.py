from datetime import datetime
from typing import ClassVar

from pydantic import EmailStr, Field

from shared.interfaces.mirror import MirrorModel, ResultModel
from shared.timestamps import parse_timestamp


class CreateUserCommand(MirrorModel):
    namespace: ClassVar[str] = "commands"

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr


class CreateUserResult(ResultModel):
    namespace: ClassVar[str] = "commands"

    id: str | None = None
    name: str | None = None
    email: str | None = None
    created_at: str | None = None

    @property
    def created_at_datetime(self) -> datetime | None:
        return parse_timestamp(self.created_at, "created_at")
