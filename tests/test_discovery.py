import pytest

from coinley.discovery import (
    API_META_NAME,
    PUBLIC_KEY_META_NAME,
    extract_meta_content,
    read_merchant_config,
)

FULL_PAGE = """
<!doctype html>
<html>
<head>
  <title>Checkout</title>
  <meta charset="utf-8">
  <meta name="coinley:api" content="https://api.example.com">
  <meta name="coinley:public-key" content="pk_live_123">
</head>
<body></body>
</html>
"""


@pytest.mark.unit
def test_name_before_content():
    assert extract_meta_content(FULL_PAGE, API_META_NAME) == "https://api.example.com"
    assert extract_meta_content(FULL_PAGE, PUBLIC_KEY_META_NAME) == "pk_live_123"


@pytest.mark.unit
def test_content_before_name():
    html = '<meta content="pk_test_999" name="coinley:public-key" />'
    assert extract_meta_content(html, PUBLIC_KEY_META_NAME) == "pk_test_999"


@pytest.mark.unit
def test_keywords_are_case_insensitive_and_single_quotes_work():
    html = "<META NAME='coinley:api' CONTENT='https://API.example.com'>"
    assert extract_meta_content(html, API_META_NAME) == "https://API.example.com"


@pytest.mark.unit
def test_value_may_contain_the_other_quote():
    html = (
        "<meta name=\"coinley:api\" content=\"https://shop.example/joe's\">"
        "<meta content='pk \"live\" key' name='coinley:public-key'>"
    )
    assert extract_meta_content(html, API_META_NAME) == "https://shop.example/joe's"
    assert extract_meta_content(html, PUBLIC_KEY_META_NAME) == 'pk "live" key'


@pytest.mark.unit
def test_extra_attributes_between():
    html = '<meta data-x="1" name="coinley:api" id="cfg" content="https://a.example">'
    assert extract_meta_content(html, API_META_NAME) == "https://a.example"


@pytest.mark.unit
def test_first_match_wins():
    html = (
        '<meta name="coinley:api" content="https://first.example">'
        '<meta name="coinley:api" content="https://second.example">'
    )
    assert extract_meta_content(html, API_META_NAME) == "https://first.example"


@pytest.mark.unit
def test_other_names_do_not_match():
    html = (
        '<meta name="coinley:api-docs" content="https://docs.example">'
        '<meta name="description" content="coinley:api">'
    )
    assert extract_meta_content(html, API_META_NAME) is None


@pytest.mark.unit
def test_value_not_validated():
    html = '<meta name="coinley:api" content="not a url">'
    assert extract_meta_content(html, API_META_NAME) == "not a url"


@pytest.mark.unit
def test_read_merchant_config_partial():
    config = read_merchant_config('<meta name="coinley:api" content="https://api.example.com">')
    assert config.found
    assert config.to_dict() == {"apiBaseUrl": "https://api.example.com", "publicKey": None}


@pytest.mark.unit
def test_read_merchant_config_nothing_found():
    config = read_merchant_config("<html><head><title>Shop</title></head></html>")
    assert not config.found
    assert config.to_dict() == {"apiBaseUrl": None, "publicKey": None}
