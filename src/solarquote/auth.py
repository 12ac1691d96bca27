"""Supabase (GoTrue) password authentication.

The signed-in user's id is the owner key for every store call; it always
comes from a verified session, never from a hard-coded user.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from solarquote.models import User

log = logging.getLogger("solarquote.auth")


class AuthError(Exception):
    """Authentication failure (bad credentials, expired or revoked token)."""


@dataclass(frozen=True)
class Session:
    access_token: str
    refresh_token: str
    user: User


def _user_from_payload(payload: dict[str, Any]) -> User:
    metadata = payload.get("user_metadata") or {}
    return User(
        id=str(payload["id"]),
        email=payload.get("email") or "",
        full_name=metadata.get("full_name") or "",
    )


def _call(
    method: str,
    url: str,
    api_key: str,
    access_token: str | None = None,
    params: dict[str, str] | None = None,
    json: Any = None,
    client: httpx.Client | None = None,
) -> httpx.Response:
    headers = {"apikey": api_key}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    http = client or httpx.Client(timeout=10)
    try:
        return http.request(method, url, params=params, json=json, headers=headers)
    finally:
        if client is None:
            http.close()


def sign_in(
    url: str,
    api_key: str,
    email: str,
    password: str,
    client: httpx.Client | None = None,
) -> Session:
    """Exchange email/password for a session.

    Raises:
        AuthError: On rejected credentials.
        httpx.HTTPStatusError: On any other non-2xx answer.
    """
    resp = _call(
        "POST",
        f"{url.rstrip('/')}/auth/v1/token",
        api_key,
        params={"grant_type": "password"},
        json={"email": email, "password": password},
        client=client,
    )
    if resp.status_code in (400, 401):
        log.warning("sign-in rejected for %s", email)
        raise AuthError("Invalid login credentials")
    resp.raise_for_status()
    data = resp.json()
    log.info("signed in %s", email)
    return Session(
        access_token=data["access_token"],
        refresh_token=data.get("refresh_token") or "",
        user=_user_from_payload(data["user"]),
    )


def get_user(
    url: str, api_key: str, access_token: str, client: httpx.Client | None = None
) -> User:
    """Return the user the token belongs to; AuthError if it is no longer valid."""
    resp = _call(
        "GET",
        f"{url.rstrip('/')}/auth/v1/user",
        api_key,
        access_token=access_token,
        client=client,
    )
    if resp.status_code in (401, 403):
        raise AuthError("Session expired")
    resp.raise_for_status()
    return _user_from_payload(resp.json())


def sign_out(
    url: str, api_key: str, access_token: str, client: httpx.Client | None = None
) -> None:
    resp = _call(
        "POST",
        f"{url.rstrip('/')}/auth/v1/logout",
        api_key,
        access_token=access_token,
        client=client,
    )
    # An already-expired token is as good as signed out
    if resp.status_code not in (401, 403):
        resp.raise_for_status()
