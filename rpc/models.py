import base64
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Pydantic-модель для value из ответа getAccountInfo ---
class AccountInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    lamports: int
    owner: str
    data: bytes
    executable: bool = False
    rent_epoch: Optional[int] = Field(default=None, alias="rentEpoch")
    space: Optional[int] = None

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value):
        # RPC отдаёт ["<base64>", "base64"]
        if isinstance(value, (list, tuple)):
            if len(value) != 2 or value[1] != "base64":
                raise ValueError(f"Неподдерживаемая кодировка данных аккаунта: {value[1:] if value else value}")
            return base64.b64decode(value[0])
        if isinstance(value, str):
            return base64.b64decode(value)
        return value
