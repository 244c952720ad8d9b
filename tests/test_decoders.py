"""
Tests for dataclass decoders used by router registrations.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import pytest

from trailhead.routing.decoders import DecodeError, decode, decoder_for


@dataclass
class Newsfeed:
    pass


@dataclass
class ViewPost:
    postId: int
    ref: Optional[str] = None


@dataclass
class FeedSelection:
    postIds: List[int]


@dataclass
class Flags:
    enabled: bool
    level: int = 1
    tags: List[str] = field(default_factory=list)


@dataclass
class Score:
    value: float


@dataclass
class Either:
    key: Union[int, str]
    note: str | None = None


class TestDecode:

    def test_simple(self):
        assert decode({"postId": 5}, ViewPost) == ViewPost(postId=5)

    def test_optional_present(self):
        assert decode({"postId": 5, "ref": "home"}, ViewPost) == ViewPost(postId=5, ref="home")

    def test_empty_dataclass(self):
        assert decode({}, Newsfeed) == Newsfeed()

    def test_extra_keys_ignored(self):
        assert decode({"postId": 5, "sessionId": "x"}, ViewPost) == ViewPost(postId=5)

    def test_missing_required(self):
        with pytest.raises(DecodeError, match="postId"):
            decode({}, ViewPost)

    def test_wrong_type(self):
        with pytest.raises(DecodeError):
            decode({"postId": "5"}, ViewPost)

    def test_bool_is_not_int(self):
        with pytest.raises(DecodeError):
            decode({"postId": True}, ViewPost)

    def test_int_is_not_bool(self):
        with pytest.raises(DecodeError):
            decode({"enabled": 1}, Flags)

    def test_defaults_used(self):
        assert decode({"enabled": False}, Flags) == Flags(enabled=False)

    def test_list_elements_checked(self):
        assert decode({"postIds": [1, 2]}, FeedSelection) == FeedSelection(postIds=[1, 2])
        with pytest.raises(DecodeError):
            decode({"postIds": [1, "2"]}, FeedSelection)
        with pytest.raises(DecodeError):
            decode({"postIds": 1}, FeedSelection)

    def test_float_accepts_int(self):
        assert decode({"value": 3}, Score) == Score(value=3)

    def test_unions(self):
        assert decode({"key": 1}, Either).key == 1
        assert decode({"key": "a"}, Either).key == "a"
        assert decode({"key": "a"}, Either).note is None
        with pytest.raises(DecodeError):
            decode({"key": [1]}, Either)

    def test_decode_error_is_value_error(self):
        assert issubclass(DecodeError, ValueError)

    def test_not_a_dataclass(self):
        with pytest.raises(TypeError):
            decode({}, dict)
        with pytest.raises(TypeError):
            decode({}, ViewPost(postId=1))


class TestDecoderFor:

    def test_decoder(self):
        decoder = decoder_for(ViewPost)
        assert decoder({"postId": 9}) == ViewPost(postId=9)
        assert decoder.__name__ == "decode_ViewPost"

    def test_decoder_raises(self):
        with pytest.raises(DecodeError):
            decoder_for(ViewPost)({"postId": "nine"})

    def test_requires_dataclass(self):
        with pytest.raises(TypeError):
            decoder_for(int)
