# Client identity for round ownership.
# By default a client is its IP address. A signed token (issued when a round
# starts) pins the identity so it survives address changes.

from __future__ import annotations
from typing import Optional
from itsdangerous import TimestampSigner, BadSignature
from .config import SECRET_KEY, CLIENT_TOKEN_MAX_AGE

TOKEN_HEADER = "X-Client-Token"

class InvalidClientToken(ValueError):
    pass

class ClientIdentifier:
    def __init__(self, secret_key: str = SECRET_KEY, max_age: int = CLIENT_TOKEN_MAX_AGE):
        self._signer = TimestampSigner(secret_key)
        self.max_age = max_age

    def issue(self, client_id: str) -> str:
        return self._signer.sign(client_id.encode()).decode()

    def resolve(self, host: Optional[str], token: Optional[str] = None) -> str:
        if token:
            try:
                return self._signer.unsign(token, max_age=self.max_age).decode()
            except BadSignature:
                raise InvalidClientToken("Invalid client token")
        return host or "unknown"
