"""Storage layer — Supabase (PostgREST) tables reached over httpx.

Every read and write is scoped by the owning user's id. Rows are converted
to the frozen dataclasses in solarquote.models at this boundary.
"""

import datetime
import logging
import os
from collections.abc import Mapping
from typing import Any

import httpx

from solarquote.compute import default_valid_until, next_quote_number, quote_total
from solarquote.models import Client, Project, Quote, QuoteItem

log = logging.getLogger("solarquote.store")

_SINGLE = "application/vnd.pgrst.object+json"
_NO_ROWS = "PGRST116"

_PROJECT_SELECT = "*,client:clients(*)"
_QUOTE_SELECT = "*,project:projects(*),client:clients(*)"


class StoreError(Exception):
    """Database call failure."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NotFoundError(StoreError):
    """A single-row read matched nothing (or a row owned by someone else)."""


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def _error_from_response(resp: httpx.Response) -> StoreError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    message = body.get("message") or resp.reason_phrase or "request failed"
    if body.get("code") == _NO_ROWS:
        return NotFoundError(message, resp.status_code)
    return StoreError(message, resp.status_code)


class SupabaseStore:
    """Table access for clients, projects, and quotes.

    Args:
        url: Project URL, e.g. https://xyz.supabase.co
        api_key: Anon key of the project.
        access_token: Signed-in user's JWT; falls back to the anon key.
        client: Preconfigured httpx.Client (tests pass one with a MockTransport).
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        access_token: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._client = client or httpx.Client(timeout=10)
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {access_token or api_key}",
        }

    def close(self) -> None:
        self._client.close()

    # --- Low-level request helpers ---

    def _request(
        self,
        method: str,
        table: str,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        single: bool = False,
        returning: bool = False,
    ) -> Any:
        headers = dict(self._headers)
        if single:
            headers["Accept"] = _SINGLE
        if returning:
            headers["Prefer"] = "return=representation"
        try:
            resp = self._client.request(
                method,
                f"{self.url}/rest/v1/{table}",
                params=params,
                json=json,
                headers=headers,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            err = _error_from_response(e.response)
            if not isinstance(err, NotFoundError):
                log.error("%s %s failed: %s (%s)", method, table, err, err.status)
            raise err from e
        except httpx.TransportError as e:
            log.error("%s %s unreachable: %s", method, table, e)
            raise StoreError(f"Database unreachable: {e}") from e
        if not resp.content:
            return None
        return resp.json()

    def _select(
        self,
        table: str,
        filters: Mapping[str, str],
        select: str = "*",
        order: str | None = "created_at.desc",
    ) -> list[dict[str, Any]]:
        params = {"select": select, **filters}
        if order:
            params["order"] = order
        return self._request("GET", table, params=params) or []

    def _select_one(
        self, table: str, filters: Mapping[str, str], select: str = "*"
    ) -> dict[str, Any]:
        return self._request(
            "GET", table, params={"select": select, **filters}, single=True
        )

    def _insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        now = _now_iso()
        row = {**row, "created_at": now, "updated_at": now}
        return self._request("POST", table, json=[row], single=True, returning=True)

    def _update(
        self, table: str, filters: Mapping[str, str], fields: Mapping[str, Any]
    ) -> dict[str, Any]:
        changes = {**fields, "updated_at": _now_iso()}
        return self._request(
            "PATCH", table, params=filters, json=changes, single=True, returning=True
        )

    def _delete(self, table: str, filters: Mapping[str, str]) -> None:
        self._request("DELETE", table, params=filters)

    # --- Clients ---

    def list_clients(self, user_id: str) -> list[Client]:
        rows = self._select("clients", {"user_id": f"eq.{user_id}"})
        return [Client.from_row(r) for r in rows]

    def get_client(self, client_id: str, user_id: str) -> Client:
        row = self._select_one(
            "clients", {"id": f"eq.{client_id}", "user_id": f"eq.{user_id}"}
        )
        return Client.from_row(row)

    def create_client(self, user_id: str, fields: Mapping[str, Any]) -> Client:
        row = self._insert("clients", {**fields, "user_id": user_id})
        log.info("client %s created", row.get("id"))
        return Client.from_row(row)

    def update_client(
        self, client_id: str, user_id: str, fields: Mapping[str, Any]
    ) -> Client:
        row = self._update(
            "clients", {"id": f"eq.{client_id}", "user_id": f"eq.{user_id}"}, fields
        )
        return Client.from_row(row)

    def delete_client(self, client_id: str, user_id: str) -> None:
        """Delete a client with its quotes and projects."""
        owner = {"client_id": f"eq.{client_id}", "user_id": f"eq.{user_id}"}
        self._delete("quotes", owner)
        self._delete("projects", owner)
        self._delete("clients", {"id": f"eq.{client_id}", "user_id": f"eq.{user_id}"})
        log.info("client %s deleted", client_id)

    # --- Projects ---

    def list_projects(self, user_id: str, client_id: str | None = None) -> list[Project]:
        filters = {"user_id": f"eq.{user_id}"}
        if client_id:
            filters["client_id"] = f"eq.{client_id}"
        rows = self._select("projects", filters, select=_PROJECT_SELECT)
        return [Project.from_row(r) for r in rows]

    def get_project(self, project_id: str, user_id: str) -> Project:
        row = self._select_one(
            "projects",
            {"id": f"eq.{project_id}", "user_id": f"eq.{user_id}"},
            select=_PROJECT_SELECT,
        )
        return Project.from_row(row)

    def create_project(self, user_id: str, fields: Mapping[str, Any]) -> Project:
        row = self._insert("projects", {**fields, "user_id": user_id})
        log.info("project %s created", row.get("id"))
        return Project.from_row(row)

    def update_project(
        self, project_id: str, user_id: str, fields: Mapping[str, Any]
    ) -> Project:
        row = self._update(
            "projects", {"id": f"eq.{project_id}", "user_id": f"eq.{user_id}"}, fields
        )
        return Project.from_row(row)

    def delete_project(self, project_id: str, user_id: str) -> None:
        """Delete a project after its quotes."""
        self._delete(
            "quotes", {"project_id": f"eq.{project_id}", "user_id": f"eq.{user_id}"}
        )
        self._delete(
            "projects", {"id": f"eq.{project_id}", "user_id": f"eq.{user_id}"}
        )
        log.info("project %s deleted", project_id)

    # --- Quotes ---

    def list_quotes(self, user_id: str, project_id: str | None = None) -> list[Quote]:
        filters = {"user_id": f"eq.{user_id}"}
        if project_id:
            filters["project_id"] = f"eq.{project_id}"
        rows = self._select("quotes", filters, select=_QUOTE_SELECT)
        return [Quote.from_row(r) for r in rows]

    def create_quote(
        self,
        user_id: str,
        fields: Mapping[str, Any],
        items: tuple[QuoteItem, ...] = (),
        today: datetime.date | None = None,
    ) -> Quote:
        """Insert a quote for a project the user owns.

        The client id is taken from the project. The quote number, validity
        date and (when items are given) total amount are filled in here.
        """
        today = today or datetime.date.today()
        project_id = str(fields["project_id"])
        project = self._select_one(
            "projects",
            {"id": f"eq.{project_id}", "user_id": f"eq.{user_id}"},
            select="client_id",
        )
        numbers = self._select(
            "quotes", {"user_id": f"eq.{user_id}"}, select="quote_number", order=None
        )
        row: dict[str, Any] = {
            "valid_until": default_valid_until(today).isoformat(),
            **fields,
            "user_id": user_id,
            "client_id": project["client_id"],
            "quote_number": next_quote_number(
                (r.get("quote_number") or "" for r in numbers), today
            ),
        }
        if items:
            row["items"] = [i.to_row() for i in items]
            row["total_amount"] = quote_total(items)
        created = self._insert("quotes", row)
        log.info("quote %s created", created.get("quote_number"))
        return Quote.from_row(created)


def store_from_env(access_token: str | None = None) -> SupabaseStore:
    """Build a store from SUPABASE_URL / SUPABASE_ANON_KEY."""
    return SupabaseStore(
        url=os.environ["SUPABASE_URL"],
        api_key=os.environ["SUPABASE_ANON_KEY"],
        access_token=access_token,
    )
