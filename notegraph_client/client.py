"""
HTTP client for the note graph API.

The client keeps the access/refresh token pair in a ``TokenStore``. Before
every protected call it checks the access token's ``exp`` claim and, when the
token is missing or expires within ``grace`` seconds, exchanges the refresh
token for a new pair. A session that cannot be refreshed is cleared and
reported with ``SessionExpired``.
"""
import logging

import httpx

from .graph import mark_roots
from .tokens import token_expires_within

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code, message, error=None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.error = error


class SessionExpired(ApiError):
    def __init__(self, message="Session expired"):
        super().__init__(401, message)


class TokenStore:
    def __init__(self, access_token=None, refresh_token=None):
        self.access_token = access_token
        self.refresh_token = refresh_token

    def set(self, access_token, refresh_token=None):
        self.access_token = access_token
        if refresh_token:
            self.refresh_token = refresh_token

    def clear(self):
        self.access_token = None
        self.refresh_token = None


class NoteGraphClient:
    def __init__(self, base_url, store=None, grace=60, transport=None, timeout=10.0):
        self.store = store or TokenStore()
        self.grace = grace
        self._http = httpx.Client(base_url=base_url.rstrip("/"), transport=transport, timeout=timeout)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method, path, json=None, token=None):
        headers = {"Authorization": f"Bearer {token}"} if token else None
        response = self._http.request(method, path, json=json, headers=headers)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                body = {}
            raise ApiError(
                response.status_code,
                body.get("message") or response.reason_phrase,
                body.get("error"),
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Malformed response body") from exc

    def _authed(self, method, path, json=None):
        return self._request(method, path, json=json, token=self.ensure_access_token())

    # Auth

    def signup(self, email, password):
        return self._request("POST", "/api/signup", json={"email": email, "password": password})

    def login(self, email, password, remember_me=False):
        data = self._request(
            "POST",
            "/api/login",
            json={"email": email, "password": password, "rememberMe": remember_me},
        )
        self.store.clear()
        self.store.set(data["accessToken"], data.get("refreshToken"))
        return data["user"]

    def logout(self):
        self.store.clear()

    def ensure_access_token(self):
        token = self.store.access_token
        if token and not token_expires_within(token, self.grace):
            return token

        if not self.store.refresh_token:
            self.store.clear()
            raise SessionExpired()

        try:
            data = self._request("POST", "/api/refresh", json={"token": self.store.refresh_token})
        except ApiError as exc:
            logger.warning("Token refresh failed: %s", exc)
            self.store.clear()
            raise SessionExpired(exc.message) from exc

        if not data.get("accessToken"):
            self.store.clear()
            raise SessionExpired()
        self.store.set(data["accessToken"], data.get("refreshToken"))
        return self.store.access_token

    # Notes

    def get_graph(self):
        data = self._authed("GET", "/api/graph")
        return {"nodes": mark_roots(data["nodes"], data["links"]), "links": data["links"]}

    def get_note(self, note_id):
        return self._authed("GET", f"/api/notes/{note_id}")

    def create_note(self, title, parent_id=None):
        return self._authed("POST", "/api/notes", json={"title": title, "parentId": parent_id})

    def update_note(self, note_id, title, content, parent_id=None):
        data = self._authed(
            "PUT",
            f"/api/notes/{note_id}",
            json={"title": title, "content": content, "parentId": parent_id},
        )
        return data["note"]

    def delete_note(self, note_id):
        return self._authed("DELETE", f"/api/notes/{note_id}")
