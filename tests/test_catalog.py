import pytest

from coinley.catalog import DEFAULT_CURRENCY, get_tool, list_tools, tool_names
from coinley.models import ToolName

EXPECTED_REQUIRED = {
    "list_networks": {"apiBaseUrl"},
    "create_deposit_payment": {
        "apiBaseUrl",
        "publicKey",
        "amount",
        "network",
        "agentId",
        "agentOwner",
    },
    "get_payment_status": {"apiBaseUrl", "paymentId"},
    "read_merchant_config": {"pageUrl"},
}


@pytest.mark.unit
def test_every_tool_listed_exactly_once():
    names = [tool.name for tool in list_tools()]
    assert sorted(names) == sorted(EXPECTED_REQUIRED)
    assert len(names) == len(set(names))


@pytest.mark.unit
def test_catalog_names_match_enum():
    assert set(tool_names()) == {member.value for member in ToolName}


@pytest.mark.unit
@pytest.mark.parametrize("name,required", sorted(EXPECTED_REQUIRED.items()))
def test_required_arguments(name, required):
    tool = get_tool(name)
    assert tool is not None
    assert set(tool.required) == required
    # every required property is also described
    assert required <= set(tool.input_schema["properties"])


@pytest.mark.unit
def test_create_deposit_payment_optional_arguments():
    props = get_tool("create_deposit_payment").input_schema["properties"]
    assert props["currency"]["default"] == DEFAULT_CURRENCY == "USDT"
    assert props["metadata"]["type"] == "object"
    assert props["amount"]["type"] == "number"


@pytest.mark.unit
def test_list_tools_is_deterministic_and_detached():
    first = list_tools()
    first.clear()
    assert [t.name for t in list_tools()] == [
        "list_networks",
        "create_deposit_payment",
        "get_payment_status",
        "read_merchant_config",
    ]


@pytest.mark.unit
def test_every_schema_is_an_object():
    for tool in list_tools():
        assert tool.input_schema["type"] == "object"
    assert "Poll" in get_tool("get_payment_status").description


@pytest.mark.unit
def test_get_tool_unknown_returns_none():
    assert get_tool("refund_payment") is None
