"""
Unit tests for the URL matcher.

Tests cover:
- Static, wildcard and typed path matching
- Trailing slash normalization
- Required, optional, literal and array query parameters
- Percent-decoding of path and query values
- Global query parameter resolution
"""

import pytest

from trailhead._datastructures import URL
from trailhead.patterns.compiler.compiler import CompiledPattern, ExpressionCompiler
from trailhead.patterns.compiler.params import OptionalParam
from trailhead.patterns.matcher import PatternMatcher, match_url
from trailhead.patterns.types.registry import CastorType, IntType, StringType, TypeRegistry


class TestPathMatching:
    """Test path-only patterns."""

    def setup_method(self):
        """Set up test fixtures."""
        self.compiler = ExpressionCompiler()

    def test_static_match(self):
        pattern = self.compiler.compile("/newsfeed")
        assert match_url("https://example.com/newsfeed", pattern) == {}

    def test_static_mismatch(self):
        pattern = self.compiler.compile("/newsfeed")
        assert match_url("https://example.com/newsfeeds", pattern) is None
        assert match_url("https://example.com/", pattern) is None

    @pytest.mark.parametrize("url", ["/newsfeed", "/newsfeed/"])
    def test_trailing_slash_is_ignored(self, url):
        assert match_url(url, self.compiler.compile("/newsfeed")) == {}
        assert match_url(url, self.compiler.compile("/newsfeed/")) == {}

    def test_root(self):
        pattern = self.compiler.compile("/")
        assert match_url("https://example.com", pattern) == {}
        assert match_url("https://example.com/", pattern) == {}
        assert match_url("https://example.com/a", pattern) is None

    def test_wildcard(self):
        pattern = self.compiler.compile("/newsfeed/.*")
        assert match_url("/newsfeed", pattern) == {}
        assert match_url("/newsfeed/", pattern) == {}
        assert match_url("/newsfeed/notANumber/deep", pattern) == {}
        assert match_url("/settings", pattern) is None

    def test_typed_path_params(self):
        pattern = self.compiler.compile("/newsfeed/:postId{int}/comment/:commentId")
        assert match_url("/newsfeed/55/comment/abc", pattern) == {
            "postId": 55,
            "commentId": "abc",
        }

    def test_path_param_conversion_failure(self):
        pattern = self.compiler.compile("/newsfeed/:postId{int}")
        assert match_url("/newsfeed/notANumber", pattern) is None

    def test_oversized_integer_is_no_match(self):
        pattern = self.compiler.compile("/newsfeed/:postId{int}")
        assert match_url("/newsfeed/" + "1" * 5000, pattern) is None
        query_pattern = self.compiler.compile("/feed/?:page{int?}")
        assert match_url("/feed?page=" + "2" * 5000, query_pattern) is None

    def test_path_param_with_trailing_slash(self):
        pattern = self.compiler.compile("/newsfeed/:postId{int}/")
        assert match_url("/newsfeed/7/", pattern) == {"postId": 7}
        assert match_url("/newsfeed/7", pattern) == {"postId": 7}

    def test_path_param_does_not_span_components(self):
        pattern = self.compiler.compile("/files/:name")
        assert match_url("/files/a/b", pattern) is None

    def test_path_component_characters(self):
        pattern = self.compiler.compile("/files/:name")
        assert match_url("/files/report_v1.2-final~", pattern) == {"name": "report_v1.2-final~"}

    def test_percent_decoded_path(self):
        pattern = self.compiler.compile("/users/:handle")
        assert match_url("/users/jane%2Ddoe", pattern) == {"handle": "jane-doe"}
        # A decoded space is outside the component alphabet
        assert match_url("/users/jane%20doe", pattern) is None

    def test_bool_path_param(self):
        pattern = self.compiler.compile("/flags/:on{bool}")
        assert match_url("/flags/yes", pattern) == {"on": True}
        assert match_url("/flags/0", pattern) == {"on": False}
        assert match_url("/flags/maybe", pattern) is None

    def test_unusable_path_regex_never_matches(self):
        pattern = self.compiler.compile("/newsfeed/?:postId[int}&:::commentId{string}")
        assert match_url("/newsfeed", pattern) is None
        assert match_url("/newsfeed/?postId=1", pattern) is None

    def test_accepts_url_object(self):
        pattern = self.compiler.compile("/a/:b")
        assert match_url(URL(path="/a/c"), pattern) == {"b": "c"}


class TestQueryMatching:
    """Test query parameter matching."""

    def setup_method(self):
        """Set up test fixtures."""
        self.compiler = ExpressionCompiler()

    def test_required_present(self):
        pattern = self.compiler.compile("/search/?:query")
        assert match_url("/search?query=hello%20world", pattern) == {"query": "hello world"}

    def test_plus_kept_literally(self):
        pattern = self.compiler.compile("/search/?:q")
        assert match_url("/search?q=c++", pattern) == {"q": "c++"}

    def test_key_without_value_is_missing(self):
        pattern = self.compiler.compile("/search/?:q")
        assert match_url("/search?q", pattern) is None

    def test_key_without_value_skips_optional(self):
        pattern = self.compiler.compile("/search/?:page{int?}")
        assert match_url("/search?page", pattern) == {}

    def test_required_missing(self):
        pattern = self.compiler.compile("/search/?:query")
        assert match_url("/search", pattern) is None

    def test_required_empty_value(self):
        pattern = self.compiler.compile("/search/?:query")
        assert match_url("/search?query=", pattern) == {"query": ""}

    def test_required_conversion_failure(self):
        pattern = self.compiler.compile("/?:postId{int}&:commentId")
        assert match_url("/?postId=abc&commentId=x", pattern) is None
        assert match_url("/?postId=18&commentId=x", pattern) == {"postId": 18, "commentId": "x"}

    def test_optional_absent(self):
        pattern = self.compiler.compile("/search/?:query&:page{int?}")
        assert match_url("/search?query=q", pattern) == {"query": "q"}

    def test_optional_present(self):
        pattern = self.compiler.compile("/search/?:query&:page{int?}")
        assert match_url("/search?query=q&page=3", pattern) == {"query": "q", "page": 3}

    def test_optional_present_but_invalid(self):
        pattern = self.compiler.compile("/search/?:query&:page{int?}")
        assert match_url("/search?query=q&page=three", pattern) is None

    def test_literal(self):
        pattern = self.compiler.compile("/newsfeed/:post{int}/?:action{'like_post'}")
        assert match_url("/newsfeed/4?action=like_post", pattern) == {
            "post": 4,
            "action": "like_post",
        }
        assert match_url("/newsfeed/4?action=share", pattern) is None
        assert match_url("/newsfeed/4", pattern) is None

    def test_literal_is_case_sensitive(self):
        pattern = self.compiler.compile("/feed/?:mode{'dark'}")
        assert match_url("/feed?mode=Dark", pattern) is None

    def test_required_array(self):
        pattern = self.compiler.compile("/feed/?:postIds{[int]}")
        assert match_url("/feed?postIds=981,215,91", pattern) == {"postIds": [981, 215, 91]}
        assert match_url("/feed?postIds=18%2C2222192", pattern) == {"postIds": [18, 2222192]}

    @pytest.mark.parametrize("value", ["71,", ",71", "1,,2", "1,x"])
    def test_invalid_array(self, value):
        pattern = self.compiler.compile("/feed/?:postIds{[int]}")
        assert match_url(f"/feed?postIds={value}", pattern) is None

    def test_optional_array(self):
        pattern = self.compiler.compile("/feed/?:tags{[string]?}")
        assert match_url("/feed", pattern) == {}
        assert match_url("/feed?tags=hello,world,123", pattern) == {"tags": ["hello", "world", "123"]}

    def test_extra_query_params_ignored(self):
        pattern = self.compiler.compile("/search/?:query")
        assert match_url("/search?query=q&utm_source=mail", pattern) == {"query": "q"}

    def test_repeated_key_last_value_wins(self):
        pattern = self.compiler.compile("/search/?:page{int}")
        assert match_url("/search?page=1&page=2", pattern) == {"page": 2}

    def test_query_order_in_url_is_irrelevant(self):
        pattern = self.compiler.compile("/newsfeed/:post{int}/?:action{'like'}&:ref{string?}")
        assert match_url("/newsfeed/1?ref=home&action=like", pattern) == {
            "post": 1,
            "ref": "home",
            "action": "like",
        }

    def test_custom_type(self):
        registry = TypeRegistry([CastorType("hex", lambda v: int(v, 16))])
        pattern = ExpressionCompiler(registry).compile("/colors/:rgb{hex}/?:alpha{hex?}")
        assert match_url("/colors/ff00ff?alpha=80", pattern) == {"rgb": 0xFF00FF, "alpha": 128}
        assert match_url("/colors/zz", pattern) is None


class TestPatternMatcher:
    """Test matcher reuse and global parameters."""

    def test_matcher_reused_across_patterns(self):
        compiler = ExpressionCompiler()
        matcher = PatternMatcher("https://example.com/newsfeed/12?ref=push")
        assert matcher.path == "/newsfeed/12"
        assert matcher.match(compiler.compile("/settings")) is None
        assert matcher.match(compiler.compile("/newsfeed/:id{int}")) == {"id": 12}
        assert matcher.match(compiler.compile("/newsfeed/:id{int}/?:ref")) == {"id": 12, "ref": "push"}

    def test_global_params(self):
        compiler = ExpressionCompiler(global_query_params=["sessionId", "locale"])
        pattern = compiler.compile("/newsfeed")
        matcher = PatternMatcher("/newsfeed?sessionId=abc")
        assert matcher.match(pattern) == {}
        assert matcher.global_params(pattern.global_query_params) == {"sessionId": "abc"}

    def test_global_params_not_in_match_result(self):
        compiler = ExpressionCompiler(global_query_params=["sessionId"])
        pattern = compiler.compile("/newsfeed/?:ref")
        assert match_url("/newsfeed?ref=a&sessionId=abc", pattern) == {"ref": "a"}

    def test_global_params_failure_empties_result(self):
        matcher = PatternMatcher("/?count=abc&name=x")
        params = [OptionalParam("name", StringType()), OptionalParam("count", IntType())]
        assert matcher.global_params(params) == {}

    def test_global_params_absent(self):
        matcher = PatternMatcher("/")
        assert matcher.global_params([OptionalParam("count", IntType())]) == {}

    def test_matching_does_not_mutate_pattern(self):
        pattern = ExpressionCompiler().compile("/a/:b{int}")
        before = pattern.to_dict()
        match_url("/a/1", pattern)
        match_url("/a/x", pattern)
        assert pattern.to_dict() == before
        assert isinstance(pattern, CompiledPattern)
