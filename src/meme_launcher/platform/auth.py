"""
Authentication — проверка, что вызывающий контролирует заявленную identity

SignedCall описывает один вызов: identity вызывающего + подпись
canonical JSON payload инструкции. KeyringAuthenticator проверяет
HMAC-SHA256 подписи по секретам, зарегистрированным для каждой identity.
"""

import hashlib
import hmac
import json
import secrets
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from meme_launcher.core.domain.errors import AuthenticationError


@dataclass(frozen=True)
class SignedCall:
    caller: str
    signature: str


class Authenticator(Protocol):
    def verify(self, call: SignedCall, payload: Dict[str, Any]) -> None: ...


def new_identity() -> str:
    """Новая случайная identity (32 байта, hex)."""
    return secrets.token_hex(32)


def canonical_payload(payload: Dict[str, Any]) -> bytes:
    """
    Canonical JSON payload.

    Детерминирован: одинаковый payload всегда даёт одинаковые байты.
    """
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


class KeyringAuthenticator:
    """Authenticator на HMAC-SHA256 с секретом на каждую identity."""

    def __init__(self):
        self._secrets: Dict[str, bytes] = {}

    def register(self, identity: str, secret: bytes | None = None) -> bytes:
        """
        Регистрация identity.

        Returns:
            Секрет identity (сгенерированный, если не передан)
        """
        if identity in self._secrets:
            raise ValueError(f"identity {identity} already registered")
        key = secrets.token_bytes(32) if secret is None else secret
        self._secrets[identity] = key
        return key

    def sign(self, identity: str, payload: Dict[str, Any]) -> SignedCall:
        """Подпись payload от имени identity (клиентская сторона)."""
        key = self._secrets.get(identity)
        if key is None:
            raise AuthenticationError(f"unknown identity {identity}")
        signature = hmac.new(key, canonical_payload(payload), hashlib.sha256).hexdigest()
        return SignedCall(caller=identity, signature=signature)

    def verify(self, call: SignedCall, payload: Dict[str, Any]) -> None:
        """
        Проверка подписи вызова.

        Raises:
            AuthenticationError: Если identity неизвестна или подпись неверна
        """
        key = self._secrets.get(call.caller)
        if key is None:
            raise AuthenticationError(f"unknown identity {call.caller}")

        expected = hmac.new(key, canonical_payload(payload), hashlib.sha256).hexdigest()
        if not hmac.compare_digest(expected, call.signature):
            raise AuthenticationError(f"invalid signature for {call.caller}")
