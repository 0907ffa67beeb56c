# =============================================================================
# coinley/discovery.py  -  Meta-tag discovery on merchant pages
# =============================================================================
#
# A merchant that wants agents to pay it publishes two tags:
#
#   <meta name="coinley:api" content="https://api.example.com">
#   <meta name="coinley:public-key" content="pk_live_...">
#
# We match them textually with two patterns, one per attribute order
# (name before content, content before name).  This is not an HTML parser:
# unquoted attribute values, and tags split by other attribute orders the
# two patterns cannot express, are not recognised.
# =============================================================================

import re
from typing import Optional

from coinley.models import MerchantConfig

API_META_NAME = "coinley:api"
PUBLIC_KEY_META_NAME = "coinley:public-key"


def _patterns(name: str) -> tuple[re.Pattern, re.Pattern]:
    quoted = re.escape(name)
    name_attr = r"name\s*=\s*(?P<nq>[\"'])" + quoted + r"(?P=nq)"
    # The value runs to the closing quote of the same kind it opened with.
    content_attr = r"content\s*=\s*(?P<cq>[\"'])(?P<value>[^>]*?)(?P=cq)"
    name_first = re.compile(
        r"<meta\s[^>]*?" + name_attr + r"[^>]*?" + content_attr, re.IGNORECASE
    )
    content_first = re.compile(
        r"<meta\s[^>]*?" + content_attr + r"[^>]*?" + name_attr, re.IGNORECASE
    )
    return name_first, content_first


_PATTERNS = {
    API_META_NAME: _patterns(API_META_NAME),
    PUBLIC_KEY_META_NAME: _patterns(PUBLIC_KEY_META_NAME),
}


def extract_meta_content(html: str, name: str) -> Optional[str]:
    """Return the content of the first <meta name=...> tag, or None.

    The name-before-content order is tried first; the first match wins.
    The value is returned as written, with no URL or key validation.
    """
    patterns = _PATTERNS.get(name) or _patterns(name)
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            return match.group("value")
    return None


def read_merchant_config(html: str) -> MerchantConfig:
    return MerchantConfig(
        api_base_url=extract_meta_content(html, API_META_NAME),
        public_key=extract_meta_content(html, PUBLIC_KEY_META_NAME),
    )
