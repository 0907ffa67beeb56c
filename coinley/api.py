# =============================================================================
# coinley/api.py  -  HTTP client for the Coinley deposit API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns one tool call into exactly one HTTP request and hands back the
#   parsed body.  It knows the three deposit endpoints and nothing about
#   payments themselves: confirmation counting, sweeps and expiry all live
#   upstream and come back as pass-through JSON.
#
# WHAT IT DELIBERATELY DOES NOT DO:
#   - No status-code inspection.  A 4xx/5xx with a JSON error body is
#     returned like any other body; the caller reads the error fields.
#   - No retries.  A failed request raises and the dispatcher reports it.
#   - No shared connection pool.  Each call opens its own Session and
#     closes it before returning.
# =============================================================================

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

CHAINS_PATH = "/api/deposits/chains"
CREATE_PATH = "/api/deposits/create"
STATUS_PATH = "/api/deposits/status/{payment_id}"

USER_AGENT = "CoinleyAgent/0.1 (+MCP; merchant config discovery)"


class CoinleyClient:
    """Thin, stateless wrapper around the deposit endpoints."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug("%s %s", method, url)
        with requests.Session() as session:
            response = session.request(method, url, timeout=self.timeout, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def list_networks(self, api_base_url: str) -> Any:
        return self._request("GET", f"{api_base_url}{CHAINS_PATH}").json()

    def create_deposit_payment(
        self, api_base_url: str, public_key: str, body: dict[str, Any]
    ) -> Any:
        # json= sets Content-Type: application/json for us.
        response = self._request(
            "POST",
            f"{api_base_url}{CREATE_PATH}",
            headers={"x-public-key": public_key},
            json=body,
        )
        return response.json()

    def get_payment_status(self, api_base_url: str, payment_id: str) -> Any:
        path = STATUS_PATH.format(payment_id=payment_id)
        return self._request("GET", f"{api_base_url}{path}").json()

    def fetch_page(self, url: str) -> str:
        """Fetch a merchant page as raw text (never parsed as JSON)."""
        return self._request("GET", url, headers={"User-Agent": USER_AGENT}).text
