"""Credencial SMS.RU: api_id ou login + senha."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from smsru.domain.values import ApiId, Login, Password


class Auth(ABC):
    """Base da união de credenciais (ApiIdAuth | LoginPasswordAuth)."""

    @staticmethod
    def api_id(value: str) -> ApiIdAuth:
        return ApiIdAuth(ApiId(value))

    @staticmethod
    def login_password(login: str, password: str) -> LoginPasswordAuth:
        return LoginPasswordAuth(Login(login), Password(password))

    @abstractmethod
    def to_params(self) -> list[tuple[str, str]]:
        """Parâmetros de credencial, na ordem enviada ao SMS.RU."""


@dataclass(frozen=True)
class ApiIdAuth(Auth):
    api_id: ApiId

    def to_params(self) -> list[tuple[str, str]]:
        return [(ApiId.FIELD, self.api_id.value)]


@dataclass(frozen=True)
class LoginPasswordAuth(Auth):
    login: Login
    password: Password

    def to_params(self) -> list[tuple[str, str]]:
        return [
            (Login.FIELD, self.login.value),
            (Password.FIELD, self.password.value),
        ]
