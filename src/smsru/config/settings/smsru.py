"""Settings do cliente SMS.RU.

Credenciais, URL base, timeout e retries carregados de variáveis de
ambiente (SMSRU_*). O endpoint de cada operação é derivado da URL base.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from functools import lru_cache

from smsru.constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Operation
from smsru.domain.auth import Auth


@dataclass(frozen=True)
class SmsRuEndpoints:
    """URL completa de cada operação, configurável individualmente."""

    send_sms: str
    check_cost: str
    check_status: str
    start_call_auth: str
    check_call_auth_status: str
    check_auth: str
    get_balance: str
    get_free_usage: str
    get_limit_usage: str
    get_senders: str
    add_stoplist_entry: str
    remove_stoplist_entry: str
    get_stoplist: str
    add_callback: str
    remove_callback: str
    get_callbacks: str

    @classmethod
    def from_base_url(cls, base_url: str = DEFAULT_BASE_URL) -> SmsRuEndpoints:
        """Deriva todos os endpoints de uma URL base (ex: https://sms.ru)."""
        base = base_url.rstrip("/")
        return cls(**{op.name.lower(): f"{base}/{op.value}" for op in Operation})

    def url_for(self, operation: Operation) -> str:
        return getattr(self, operation.name.lower())

    def validate(self) -> list[str]:
        errors: list[str] = []
        for item in fields(self):
            url = getattr(self, item.name)
            if not url.startswith(("http://", "https://")):
                errors.append(f"endpoint {item.name} deve ser URL http(s)")
        return errors


@dataclass(frozen=True)
class SmsRuSettings:
    """Configurações do cliente SMS.RU.

    Attributes:
        api_id: Token de API (tem prioridade sobre login/senha)
        login: Login da conta
        password: Senha da conta
        base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Retentativas do transporte (0 = uma troca por chamada)
        user_agent: Identificação do chamador no header User-Agent
    """

    # Credenciais
    api_id: str = ""
    login: str = ""
    password: str = ""

    # API
    base_url: str = DEFAULT_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    user_agent: str = DEFAULT_USER_AGENT

    @property
    def endpoints(self) -> SmsRuEndpoints:
        return SmsRuEndpoints.from_base_url(self.base_url)

    def auth(self) -> Auth:
        """Monta a credencial; api_id vence quando ambos estão configurados.

        Raises:
            ValueError: Se nenhuma credencial estiver configurada
        """
        if self.api_id.strip():
            return Auth.api_id(self.api_id)
        if self.login.strip() and self.password:
            return Auth.login_password(self.login, self.password)
        raise ValueError("SMSRU_API_ID ou SMSRU_LOGIN/SMSRU_PASSWORD não configurados")

    def validate(self) -> list[str]:
        """Valida configurações mínimas do SMS.RU.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        has_api_id = bool(self.api_id.strip())
        has_login = bool(self.login.strip()) and bool(self.password)
        if not has_api_id and not has_login:
            errors.append("SMSRU_API_ID ou SMSRU_LOGIN/SMSRU_PASSWORD não configurados")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("SMSRU_BASE_URL deve ser URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SMSRU_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SMSRU_MAX_RETRIES deve ser >= 0")

        if not self.user_agent.strip():
            errors.append("SMSRU_USER_AGENT não pode ser vazio")

        return errors


def _load_from_env() -> SmsRuSettings:
    """Carrega SmsRuSettings a partir de variáveis de ambiente."""
    return SmsRuSettings(
        api_id=os.getenv("SMSRU_API_ID", ""),
        login=os.getenv("SMSRU_LOGIN", ""),
        password=os.getenv("SMSRU_PASSWORD", ""),
        base_url=os.getenv("SMSRU_BASE_URL", DEFAULT_BASE_URL),
        request_timeout_seconds=float(os.getenv("SMSRU_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SMSRU_MAX_RETRIES", "0")),
        user_agent=os.getenv("SMSRU_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_smsru_settings() -> SmsRuSettings:
    """Retorna instância cacheada de SmsRuSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
