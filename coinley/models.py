# =============================================================================
# coinley/models.py  -  Data Models (the "nouns" of the adapter)
# =============================================================================
#
# Nothing here is persisted.  Tool definitions live for the whole process;
# everything else is built fresh for one tool call and thrown away.
#
# TOOL NAMES:
#   The set of tools is closed.  ToolName(name) raises ValueError for any
#   name outside it, and that is the only unknown-tool check.
# =============================================================================

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ToolName(str, Enum):
    LIST_NETWORKS = "list_networks"
    CREATE_DEPOSIT_PAYMENT = "create_deposit_payment"
    GET_PAYMENT_STATUS = "get_payment_status"
    READ_MERCHANT_CONFIG = "read_merchant_config"


# -----------------------------------------------------------------------------
# ToolDefinition - one entry of the catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-described tool as advertised to the caller."""

    name: str
    description: str                   # Read by the LLM to decide WHEN to call
    input_schema: dict[str, Any]       # JSON Schema ("type": "object", ...)

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


@dataclass
class TextContent:
    text: str
    type: str = "text"


# -----------------------------------------------------------------------------
# ToolCallResponse - the envelope every call resolves to
# -----------------------------------------------------------------------------
# A response always carries at least one content entry, including errors.
# `isError` is only emitted when true; callers treat its absence as success.
# -----------------------------------------------------------------------------
@dataclass
class ToolCallResponse:
    """Normalized outcome of one tool call."""

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, payload: Any) -> "ToolCallResponse":
        """Wrap a JSON-serializable payload as pretty-printed text."""
        text = json.dumps(payload, indent=2, ensure_ascii=False)
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolCallResponse":
        return cls(content=[TextContent(text=message)], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "content": [{"type": item.type, "text": item.text} for item in self.content],
        }
        if self.is_error:
            result["isError"] = True
        return result


# -----------------------------------------------------------------------------
# MerchantConfig - what meta-tag discovery finds on a merchant page
# -----------------------------------------------------------------------------
@dataclass
class MerchantConfig:
    api_base_url: Optional[str] = None     # <meta name="coinley:api">
    public_key: Optional[str] = None       # <meta name="coinley:public-key">

    @property
    def found(self) -> bool:
        """True when at least one of the two tags was present."""
        return self.api_base_url is not None or self.public_key is not None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"apiBaseUrl": self.api_base_url, "publicKey": self.public_key}
