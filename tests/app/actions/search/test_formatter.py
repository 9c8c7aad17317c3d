from serper_mcp.actions.models import SearchType
from serper_mcp.actions.search.formatter import format_results, format_server_info
from serper_mcp.server import get_server_info
from tests.app.test_helpers import organic_response

def test_web_results_exact_layout():
    response = {
        "searchParameters": {"q": "python"},
        "organic": [
            {"title": "Python.org", "link": "https://python.org", "snippet": "The official home"},
            {"title": "Docs", "link": "https://docs.python.org"},
        ],
    }

    assert format_results(response, 10, SearchType.WEB) == (
        '## Web Search Results for "python"\n\n'
        "### 1. Python.org\n"
        "**URL:** https://python.org\n"
        "**Snippet:** The official home\n\n"
        "### 2. Docs\n"
        "**URL:** https://docs.python.org\n\n"
    )

def test_web_results_are_capped_with_note():
    text = format_results(organic_response("python", 5), 3, SearchType.WEB)

    assert text.count("### ") == 3
    assert "### 3. Result 3" in text
    assert "Result 4" not in text
    assert text.endswith("*Showing 3 of 5 total results.*\n")

def test_cap_larger_than_results_has_no_note():
    text = format_results(organic_response("python", 2), 10, SearchType.WEB)
    assert text.count("### ") == 2
    assert "Showing" not in text

def test_empty_news_results():
    text = format_results({"searchParameters": {"q": "election"}, "news": []}, 10, SearchType.NEWS)
    assert text == '## News Search Results for "election"\n\nNo search results found.'

def test_missing_result_array():
    text = format_results({"searchParameters": {"q": "cats"}, "organic": [{"title": "x"}]}, 10, SearchType.IMAGES)
    assert text.endswith("No search results found.")
    assert "###" not in text

def test_unknown_query_when_not_echoed():
    text = format_results({}, 10, SearchType.WEB)
    assert text.startswith('## Web Search Results for "Unknown query"')

def test_image_fields():
    response = {"images": [{"title": "Cat", "imageUrl": "https://img/cat.png", "source": "cats.com", "link": "https://cats.com/cat"}]}
    text = format_results(response, 10, SearchType.IMAGES)
    assert text.startswith("## Images Search Results")
    assert "**Image URL:** https://img/cat.png\n" in text
    assert "**Source:** cats.com\n" in text
    assert "**Page:** https://cats.com/cat\n" in text

def test_video_placeholders():
    text = format_results({"videos": [{"title": "Talk", "channel": "PyCon"}]}, 10, SearchType.VIDEOS)
    assert "**Channel:** PyCon\n" in text
    assert "**Duration:** Unknown\n" in text
    assert "**URL:**" not in text

def test_news_fields():
    response = {"news": [{"title": "Launch", "source": "Wire", "date": "2 hours ago", "link": "https://wire/1", "snippet": "It launched"}]}
    text = format_results(response, 10, SearchType.NEWS)
    assert "**Source:** Wire\n**Published:** 2 hours ago\n**URL:** https://wire/1\n**Snippet:** It launched\n" in text

def test_news_without_date():
    text = format_results({"news": [{"title": "Launch", "source": "Wire"}]}, 10, SearchType.NEWS)
    assert "**Published:** Unknown\n" in text

def test_shopping_fields():
    response = {"shopping": [
        {"title": "Kettle", "price": "$29.99", "source": "Store", "link": "https://store/kettle", "rating": "4.5"},
        {"title": "Mug", "source": "Store"},
    ]}
    text = format_results(response, 10, SearchType.SHOPPING)
    assert "**Price:** $29.99\n" in text
    assert "**Rating:** 4.5/5\n" in text
    assert "### 2. Mug\n**Price:** Price not available\n**Source:** Store\n\n" in text

def test_malformed_entries_do_not_raise():
    response = {"organic": ["not a record", {"title": {"nested": True}}, {"title": "Good", "link": "https://ok"}]}
    text = format_results(response, 10, SearchType.WEB)
    assert "### 1. Good" in text

def test_formatting_is_deterministic():
    response = organic_response("repeat", 7)
    assert format_results(response, 4, SearchType.WEB) == format_results(response, 4, SearchType.WEB)

def test_server_info_block():
    text = format_server_info(get_server_info())
    assert text.startswith("**Serper Search MCP Server v2.0.0**")
    assert "**Search Types:** Web, Images, Videos, News, Shopping" in text
    assert "**Transports:** stdio, http" in text
