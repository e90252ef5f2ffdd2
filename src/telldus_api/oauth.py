"""
OAuth 1.0a request signing for the Telldus Live API.

Signing is delegated to oauthlib using the HMAC-SHA1 signature method.
Nonce and timestamp are always passed in by the caller, so a header can be
reproduced from its inputs alone.
"""

from typing import Dict

from oauthlib.common import generate_nonce as _oauthlib_nonce
from oauthlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_TYPE_AUTH_HEADER, Client
from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """An OAuth key/secret pair (consumer or token)."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Public key")
    secret: str = Field(description="Shared secret used for signing")


def generate_nonce() -> str:
    """Return a new random nonce."""
    return _oauthlib_nonce()


def authorization_header(
    url: str,
    method: str,
    consumer: Credentials,
    token: Credentials,
    nonce: str,
    timestamp: int,
) -> Dict[str, str]:
    """
    Compute the OAuth Authorization header for a single request.

    Args:
        url: Final request URL including the query string
        method: HTTP method
        consumer: Consumer (application) credentials
        token: Access token credentials
        nonce: Unique value for this request
        timestamp: Request time in unix seconds

    Returns:
        Headers dict with the ``Authorization`` entry
    """
    client = Client(
        consumer.key,
        client_secret=consumer.secret,
        resource_owner_key=token.key,
        resource_owner_secret=token.secret,
        signature_method=SIGNATURE_HMAC_SHA1,
        signature_type=SIGNATURE_TYPE_AUTH_HEADER,
        nonce=nonce,
        timestamp=str(timestamp),
    )
    _, headers, _ = client.sign(url, http_method=method.upper())
    return {"Authorization": headers["Authorization"]}
