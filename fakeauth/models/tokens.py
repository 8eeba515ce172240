from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Fixed values returned on every exchange. A client under test can hard-code
# these in its assertions.
AUTHORIZATION_CODE = "xxxxxx"
ACCESS_TOKEN = "123access"
REFRESH_TOKEN = "123refresh"
TOKEN_TTL_SEC = 86400


class TokenPair(BaseModel):
    token_type: str = "bearer"
    access_token: str = ACCESS_TOKEN
    refresh_token: str | None = None
    expires_in: int = TOKEN_TTL_SEC

    def to_payload(self) -> dict[str, Any]:
        """Wire form: refresh_token is dropped entirely when unset, never null."""
        return self.model_dump(exclude_none=True)
