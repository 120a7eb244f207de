"""Client key check for the stateful /cards endpoints.

The tip catalog is static content and stays public; anything that reads or
mutates the engine's ledgers goes through `require_client_key`.
"""

import hmac
import logging

from fastapi import HTTPException, Header

from cardkernel.config import settings

logger = logging.getLogger(__name__)


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


async def require_client_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> None:
    """No-op while KERNEL_API_KEY is unset; otherwise 401 on a missing or wrong key."""
    expected = settings.kernel_api_key
    if expected is None:
        return

    presented = _presented_key(x_api_key, authorization)
    if presented is None or not hmac.compare_digest(presented.encode(), expected.encode()):
        logger.warning("Rejected card request: %s client key", "missing" if presented is None else "invalid")
        raise HTTPException(status_code=401, detail="Invalid or missing client key")
