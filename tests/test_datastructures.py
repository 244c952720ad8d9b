"""
Tests for URL input data structures.
"""

from trailhead._datastructures import URL, QueryItems


class TestQueryItems:

    def test_parse(self):
        items = QueryItems.parse("a=1&b=two")
        assert dict(items) == {"a": "1", "b": "two"}
        assert len(items) == 2

    def test_last_value_wins(self):
        items = QueryItems.parse("page=1&page=2")
        assert items["page"] == "2"
        assert len(items) == 1

    def test_empty_value_kept(self):
        items = QueryItems.parse("name=&a=1")
        assert items["name"] == ""

    def test_key_without_value_is_absent(self):
        items = QueryItems.parse("flag&a=1")
        assert "flag" not in items
        assert dict(items) == {"a": "1"}

    def test_percent_decoding(self):
        items = QueryItems.parse("ids=1%2C2&n%61me=x&q=a%20b")
        assert items["ids"] == "1,2"
        assert items["name"] == "x"
        assert items["q"] == "a b"

    def test_plus_is_not_a_space(self):
        items = QueryItems.parse("q=c++&r=hello+world")
        assert items["q"] == "c++"
        assert items["r"] == "hello+world"

    def test_value_may_contain_equals(self):
        assert QueryItems.parse("token=a=b")["token"] == "a=b"

    def test_missing_key(self):
        items = QueryItems.parse("a=1")
        assert items.get("b") is None
        assert "b" not in items

    def test_from_mapping(self):
        items = QueryItems({"a": "1"})
        assert items["a"] == "1"

    def test_empty(self):
        assert len(QueryItems.parse("")) == 0
        assert len(QueryItems.parse("&&")) == 0
        assert len(QueryItems()) == 0


class TestURL:

    def test_parse_full(self):
        url = URL.parse("https://example.com/newsfeed/12?ref=push#top")
        assert url.scheme == "https"
        assert url.host == "example.com"
        assert url.path == "/newsfeed/12"
        assert url.query == "ref=push"
        assert url.fragment == "top"

    def test_parse_path_only(self):
        url = URL.parse("/search?q=x")
        assert url.path == "/search"
        assert url.query_items["q"] == "x"

    def test_empty_path_is_root(self):
        assert URL.parse("https://example.com").path == "/"
        assert URL.parse("https://example.com?a=1").path == "/"

    def test_path_is_decoded(self):
        assert URL.parse("/users/jane%2Ddoe").path == "/users/jane-doe"

    def test_custom_scheme(self):
        url = URL.parse("myapp://host/newsfeed")
        assert url.host == "host"
        assert url.path == "/newsfeed"
