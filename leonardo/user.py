"""Account info endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport


class User(WireModel):
    id: str | None = None
    username: str | None = None


class UserDetails(WireModel):
    user: User = Field(default_factory=User)
    api_plan_token_renewal_date: str | None = None
    api_concurrency_slots: int | None = None
    api_paid_tokens: int | None = None
    api_subscription_tokens: int | None = None
    paid_tokens: int | None = None
    subscription_gpt_tokens: int | None = None
    subscription_model_tokens: int | None = None
    subscription_tokens: int | None = None
    token_renewal_date: str | None = None


class UserInfoResponse(WireModel):
    user_details: list[UserDetails] = Field(default_factory=list, alias="user_details")


class UserAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def me(self, *, timeout: float | None = None) -> UserInfoResponse:
        """Details of the account owning the API key."""
        return self._http.request("GET", "/me", response_model=UserInfoResponse, timeout=timeout)
