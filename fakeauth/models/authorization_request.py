from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

# •	response_type: str   (expected "code", never checked)
# •	client_id: str       (not looked up anywhere)
# •	redirect_uri: str    (echoed back as the consent target)
# •	scope: str | None
# •	state: str | None    (carried through to the client untouched)


@dataclass(frozen=True, slots=True)
class AuthorizationRequest:
    response_type: str | None
    client_id: str | None
    redirect_uri: str
    scope: str | None
    state: str | None

    @staticmethod
    def from_params(params: Mapping[str, str]) -> AuthorizationRequest:
        return AuthorizationRequest(
            response_type=params.get("response_type"),
            client_id=params.get("client_id"),
            redirect_uri=params.get("redirect_uri") or "",
            scope=params.get("scope"),
            state=params.get("state"),
        )
