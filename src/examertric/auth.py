"""Authentication delegated to Firebase over its Identity Toolkit REST API.

``AuthSession`` plays the role of the app-wide auth context: it keeps the
signed-in user and turns every provider outcome into a ``Notice``. Nothing
credential-related is persisted locally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .models import User
from .notices import Notice, failure, success

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"

PROVIDER_MESSAGES = {
    "EMAIL_NOT_FOUND": "Invalid email or password",
    "INVALID_PASSWORD": "Invalid email or password",
    "INVALID_LOGIN_CREDENTIALS": "Invalid email or password",
    "USER_DISABLED": "This account has been disabled",
    "EMAIL_EXISTS": "An account with this email already exists",
    "INVALID_EMAIL": "Please enter a valid email address",
    "MISSING_PASSWORD": "Please enter a password",
    "WEAK_PASSWORD": "Password should be at least 6 characters",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many attempts, please try again later",
    "OPERATION_NOT_ALLOWED": "Email/password sign-in is disabled for this project",
}

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when the identity provider rejects or cannot serve a request."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass
class ProviderAccount:
    uid: str
    email: Optional[str]
    display_name: Optional[str]
    id_token: str = ""

    def to_user(self) -> User:
        return User.from_provider(self.uid, self.email, self.display_name)


def provider_message(code: str) -> str:
    # Firebase sometimes appends detail: "WEAK_PASSWORD : Password should be at least 6 characters"
    key = code.split(":", 1)[0].strip()
    if key in PROVIDER_MESSAGES:
        return PROVIDER_MESSAGES[key]
    detail = code.split(":", 1)[1].strip() if ":" in code else ""
    return detail or key.replace("_", " ").capitalize()


class FirebaseAuthClient:
    def __init__(self, api_key: str, http_client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.api_key = api_key
        self._client = http_client or httpx.Client(base_url=IDENTITY_TOOLKIT_URL, timeout=timeout)

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise AuthError("Identity provider is not configured")
        try:
            response = self._client.post(f"/accounts:{endpoint}", params={"key": self.api_key}, json=payload)
        except httpx.HTTPError as exc:
            raise AuthError(f"Could not reach identity provider: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error:
            code = str(body.get("error", {}).get("message", "")) if isinstance(body, dict) else ""
            raise AuthError(provider_message(code) if code else f"Identity provider error ({response.status_code})", code=code or None)
        return body

    @staticmethod
    def _account(body: Dict[str, Any]) -> ProviderAccount:
        return ProviderAccount(
            uid=str(body.get("localId", "")),
            email=body.get("email"),
            display_name=body.get("displayName") or None,
            id_token=str(body.get("idToken", "")),
        )

    def sign_in(self, email: str, password: str) -> ProviderAccount:
        body = self._post("signInWithPassword", {"email": email, "password": password, "returnSecureToken": True})
        return self._account(body)

    def sign_up(self, email: str, password: str) -> ProviderAccount:
        body = self._post("signUp", {"email": email, "password": password, "returnSecureToken": True})
        return self._account(body)

    def update_profile(self, id_token: str, display_name: str) -> ProviderAccount:
        body = self._post("update", {"idToken": id_token, "displayName": display_name, "returnSecureToken": True})
        account = self._account(body)
        if not account.id_token:
            account.id_token = id_token
        return account

    def close(self) -> None:
        self._client.close()


class AuthSession:
    """Current user plus login/signup/logout, each reported as a Notice."""

    def __init__(self, provider: FirebaseAuthClient):
        self.provider = provider
        self.user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, email: str, password: str) -> Notice:
        try:
            account = self.provider.sign_in(email, password)
        except AuthError as exc:
            logger.error(f"Login failed for {email}: {exc.message}")
            return failure("Login failed", exc.message or "Invalid email or password")

        self.user = account.to_user()
        logger.info(f"User {self.user.id} logged in")
        return success("Welcome back!", f"Logged in as {account.display_name or account.email}")

    def signup(self, email: str, password: str, name: str) -> Notice:
        try:
            account = self.provider.sign_up(email, password)
            account = self.provider.update_profile(account.id_token, name)
        except AuthError as exc:
            logger.error(f"Signup failed for {email}: {exc.message}")
            return failure("Signup failed", exc.message or "Could not create account")

        self.user = account.to_user()
        logger.info(f"User {self.user.id} signed up")
        return success("Account created!", f"Welcome, {name}!")

    def logout(self) -> Notice:
        if self.user is not None:
            logger.info(f"User {self.user.id} logged out")
        self.user = None
        return success("Logged out", "You have been logged out successfully")
