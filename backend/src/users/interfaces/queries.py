from datetime import datetime
from typing import ClassVar

from pydantic import Field

from shared.interfaces.mirror import MirrorModel, ResultModel
from shared.timestamps import parse_timestamp


class GetUserQuery(MirrorModel):
    namespace: ClassVar[str] = "queries"

    id: str = Field(min_length=1)


class GetUserResult(ResultModel):
    namespace: ClassVar[str] = "queries"

    id: str | None = None
    name: str | None = None
    email: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def created_at_datetime(self) -> datetime | None:
        return parse_timestamp(self.created_at, "created_at")

    @property
    def updated_at_datetime(self) -> datetime | None:
        return parse_timestamp(self.updated_at, "updated_at")
