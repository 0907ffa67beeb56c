# =============================================================================
# coinley/dispatcher.py  -  Tool Dispatcher (name → handler → envelope)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Routes one tool call to exactly one handler and always returns a
#   ToolCallResponse.  It never raises: every failure mode ends up as an
#   error envelope the transport can send back as-is.
#
# HOW IT WORKS (the flow):
#   1. The name is matched against the closed ToolName enum.
#      No match → "Unknown tool: {name}", no network call.
#   2. The handler narrows the loose JSON arguments into what it needs and
#      makes (at most) one HTTP call through CoinleyClient.
#   3. The parsed result is pretty-printed into a success envelope.
#   4. Any exception from steps 2-3 is caught HERE, once, and reported as
#      "Error calling {name}: {message}".
#
# STATELESS:
#   Nothing is cached between calls.  Calling list_networks twice makes two
#   requests.  Multi-step flows (create, then poll) are chained by the caller
#   using the id from the previous response.
# =============================================================================

import logging
import re
from typing import Any, Callable, Mapping, Optional

from coinley.api import CoinleyClient
from coinley.catalog import DEFAULT_CURRENCY
from coinley.discovery import API_META_NAME, PUBLIC_KEY_META_NAME, read_merchant_config
from coinley.models import ToolCallResponse, ToolName
from coinley.settings import Settings

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

INVALID_PAYMENT_ID = "Invalid paymentId: must be a valid UUID"

Arguments = Mapping[str, Any]


def is_valid_payment_id(value: Any) -> bool:
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


class ToolDispatcher:
    """Execute catalog tools against the Coinley API.

    Args:
        client: HTTP client to use.  Built from ``settings`` when omitted.
        settings: Runtime settings; only consulted when ``client`` is None.
    """

    def __init__(
        self,
        client: Optional[CoinleyClient] = None,
        settings: Optional[Settings] = None,
    ):
        if client is None:
            settings = settings or Settings()
            client = CoinleyClient(timeout=settings.http_timeout)
        self.client = client
        self._handlers: dict[ToolName, Callable[[Arguments], ToolCallResponse]] = {
            ToolName.LIST_NETWORKS: self._list_networks,
            ToolName.CREATE_DEPOSIT_PAYMENT: self._create_deposit_payment,
            ToolName.GET_PAYMENT_STATUS: self._get_payment_status,
            ToolName.READ_MERCHANT_CONFIG: self._read_merchant_config,
        }

    def dispatch(self, name: str, arguments: Optional[Arguments] = None) -> ToolCallResponse:
        try:
            tool = ToolName(name)
        except ValueError:
            logger.warning("Unknown tool requested: %r", name)
            return ToolCallResponse.error(f"Unknown tool: {name}")

        handler = self._handlers[tool]
        try:
            return handler(arguments or {})
        except Exception as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return ToolCallResponse.error(f"Error calling {name}: {exc}")

    # -------------------------------------------------------------------------
    # Handlers - one per ToolName.  Each may raise; dispatch() catches.
    # -------------------------------------------------------------------------

    def _list_networks(self, args: Arguments) -> ToolCallResponse:
        return ToolCallResponse.success(self.client.list_networks(args.get("apiBaseUrl")))

    def _create_deposit_payment(self, args: Arguments) -> ToolCallResponse:
        body: dict[str, Any] = {
            "amount": args.get("amount"),
            "currency": args.get("currency") or DEFAULT_CURRENCY,
            "network": args.get("network"),
            "agentId": args.get("agentId"),
            "agentOwner": args.get("agentOwner"),
        }
        # Absent metadata stays absent; an explicit null is sent as null.
        if "metadata" in args:
            body["metadata"] = args["metadata"]

        data = self.client.create_deposit_payment(
            args.get("apiBaseUrl"), args.get("publicKey"), body
        )
        return ToolCallResponse.success(data)

    def _get_payment_status(self, args: Arguments) -> ToolCallResponse:
        payment_id = args.get("paymentId")
        # The only local short-circuit: a bad id never reaches the network.
        if not is_valid_payment_id(payment_id):
            return ToolCallResponse.error(INVALID_PAYMENT_ID)
        data = self.client.get_payment_status(args.get("apiBaseUrl"), payment_id)
        return ToolCallResponse.success(data)

    def _read_merchant_config(self, args: Arguments) -> ToolCallResponse:
        page_url = args.get("pageUrl")
        config = read_merchant_config(self.client.fetch_page(page_url))
        if not config.found:
            return ToolCallResponse.error(
                f'No <meta name="{API_META_NAME}"> or <meta name="{PUBLIC_KEY_META_NAME}"> '
                f"tags found on {page_url}. The merchant may not have enabled "
                "agent discovery on this page."
            )
        return ToolCallResponse.success(config.to_dict())

