# =============================================================================
# coinley/catalog.py  -  Tool Catalog (what the agent can discover)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every tool the adapter exposes: a stable name, a description
#   written for an LLM caller, and a JSON input schema.  The catalog is
#   static data, built once at import time and never mutated.
#
# THE DESCRIPTIONS MATTER:
#   The LLM reads these strings to decide WHEN to call a tool and WHICH
#   fields of the result to look at.  They say what to do with the output
#   (e.g. "poll until completed"), not just what the tool is.
#
# SCHEMAS ARE GUIDANCE, NOT ENFORCEMENT:
#   The dispatcher does not run full JSON Schema validation.  A missing
#   apiBaseUrl shows up as a failed HTTP call, not as a pre-check.  The one
#   local check is the paymentId UUID format (see coinley/dispatcher.py).
# =============================================================================

from typing import Optional

from coinley.models import ToolDefinition, ToolName

DEFAULT_CURRENCY = "USDT"

_API_BASE_URL = {"type": "string", "description": "Coinley API base URL"}


_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=ToolName.LIST_NETWORKS.value,
        description=(
            "List all supported blockchain networks and tokens available for payment. "
            "Call this before create_deposit_payment to pick a valid network shortname."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "apiBaseUrl": {
                    "type": "string",
                    "description": "Coinley API base URL (e.g. https://api.example.com)",
                },
            },
            "required": ["apiBaseUrl"],
        },
    ),
    ToolDefinition(
        name=ToolName.CREATE_DEPOSIT_PAYMENT.value,
        description=(
            "Create a crypto payment and get a deposit address. Send tokens to this "
            "address to complete the payment. Returns: id (payment ID for status "
            "polling), depositAddress (send tokens here), amount, currency, network, "
            "expiresAt."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "apiBaseUrl": _API_BASE_URL,
                "publicKey": {
                    "type": "string",
                    "description": "Merchant public key (pk_live_... or pk_test_...)",
                },
                "amount": {"type": "number", "description": "Payment amount in USD"},
                "currency": {
                    "type": "string",
                    "description": "Token symbol: USDT or USDC",
                    "default": DEFAULT_CURRENCY,
                },
                "network": {
                    "type": "string",
                    "description": "Network shortname e.g. ethereum, base, polygon, solana",
                },
                "agentId": {
                    "type": "string",
                    "description": "Unique identifier for this agent instance",
                },
                "agentOwner": {
                    "type": "string",
                    "description": "Human or entity accountable for this agent",
                },
                "metadata": {
                    "type": "object",
                    "description": "Optional additional metadata to attach to the payment",
                },
            },
            "required": [
                "apiBaseUrl",
                "publicKey",
                "amount",
                "network",
                "agentId",
                "agentOwner",
            ],
        },
    ),
    ToolDefinition(
        name=ToolName.GET_PAYMENT_STATUS.value,
        description=(
            "Check the status of a payment. Poll until status is 'completed' or "
            "'failed'. Returns: status, confirmations, requiredConfirmations, "
            "depositTxHash (set when tokens detected), sweepTxHash (set when "
            "completed), isExpired."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "apiBaseUrl": _API_BASE_URL,
                "paymentId": {
                    "type": "string",
                    "description": "Payment ID returned from create_deposit_payment",
                },
            },
            "required": ["apiBaseUrl", "paymentId"],
        },
    ),
    ToolDefinition(
        name=ToolName.READ_MERCHANT_CONFIG.value,
        description=(
            "Discover a merchant's Coinley configuration from their web page. Reads "
            '<meta name="coinley:api"> and <meta name="coinley:public-key"> tags and '
            "returns apiBaseUrl and publicKey (either may be null). Call this first "
            "when you only know the merchant's page URL, then pass the values to the "
            "other tools."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "pageUrl": {
                    "type": "string",
                    "description": "URL of the merchant page to inspect",
                },
            },
            "required": ["pageUrl"],
        },
    ),
)

_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in _TOOLS}


def list_tools() -> list[ToolDefinition]:
    """Return every tool definition, in a stable order."""
    return list(_TOOLS)


def get_tool(name: str) -> Optional[ToolDefinition]:
    return _BY_NAME.get(name)


def tool_names() -> list[str]:
    return [tool.name for tool in _TOOLS]
