"""
Shared fixtures for the Coinley MCP test suite.

HTTP is never real: tests use the `responses` library to register canned
upstream replies and to count the requests the dispatcher actually sent.
"""

import pytest

from coinley.api import CoinleyClient
from coinley.dispatcher import ToolDispatcher

API_BASE_URL = "https://api.example.com"
PAGE_URL = "https://shop.example.com/checkout"
PAYMENT_ID = "123e4567-e89b-12d3-a456-426614174000"

DEPOSIT_ARGS = {
    "apiBaseUrl": API_BASE_URL,
    "publicKey": "pk_test_abc123",
    "amount": 25.5,
    "network": "base",
    "agentId": "agent-42",
    "agentOwner": "ops@example.com",
}

CHAINS = {
    "chains": [
        {"shortName": "ethereum", "tokens": ["USDT", "USDC"]},
        {"shortName": "base", "tokens": ["USDC"]},
    ]
}


@pytest.fixture
def dispatcher():
    return ToolDispatcher(client=CoinleyClient(timeout=5))
