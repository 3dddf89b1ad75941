"""Tests for the ParsedMusicUrl model and its invariants."""

import pytest
from pydantic import ValidationError

from tunelink.models import ContentType, MusicProvider, ParsedMusicUrl, UrlMetadata


def _track(**overrides):
    fields = {
        "provider": MusicProvider.SOUNDCLOUD,
        "content_type": ContentType.TRACK,
        "is_private": False,
        "sanitized_url": "https://soundcloud.com/a/b",
        "metadata": UrlMetadata(artist_slug="a", track_slug="b"),
        "original_url": "soundcloud.com/a/b?si=1",
    }
    fields.update(overrides)
    return ParsedMusicUrl(**fields)


class TestEnums:
    def test_provider_values(self):
        assert [p.value for p in MusicProvider] == [
            "soundcloud",
            "spotify",
            "youtube",
            "apple-music",
        ]

    def test_content_type_values(self):
        assert {c.value for c in ContentType} == {"track", "playlist", "album", "artist"}

    def test_str(self):
        assert str(MusicProvider.APPLE_MUSIC) == "apple-music"
        assert str(ContentType.PLAYLIST) == "playlist"


class TestParsedMusicUrlInvariants:
    def test_valid_track(self):
        result = _track()
        assert result.metadata.track_slug == "b"

    def test_query_in_sanitized_url_rejected(self):
        with pytest.raises(ValidationError, match="query string"):
            _track(sanitized_url="https://soundcloud.com/a/b?si=1")

    def test_private_without_token_rejected(self):
        with pytest.raises(ValidationError, match="secret token"):
            _track(is_private=True)

    def test_token_without_private_flag_rejected(self):
        with pytest.raises(ValidationError, match="secret token"):
            _track(metadata=UrlMetadata(artist_slug="a", track_slug="b", secret_token="s-X"))

    def test_empty_token_is_not_private(self):
        result = _track(metadata=UrlMetadata(artist_slug="a", track_slug="b", secret_token=""))
        assert result.is_private is False

    def test_track_requires_slugs(self):
        with pytest.raises(ValidationError, match="track_slug"):
            _track(metadata=UrlMetadata(artist_slug="a"))

    def test_playlist_requires_slugs(self):
        with pytest.raises(ValidationError, match="playlist_slug"):
            _track(
                content_type=ContentType.PLAYLIST,
                metadata=UrlMetadata(artist_slug="a", track_slug="b"),
            )

    def test_album_has_no_slug_requirements(self):
        result = _track(content_type=ContentType.ALBUM, metadata=UrlMetadata())
        assert result.content_type is ContentType.ALBUM

    def test_frozen(self):
        result = _track()
        with pytest.raises(ValidationError):
            result.provider = MusicProvider.SPOTIFY  # type: ignore[misc]


class TestSerialization:
    def test_to_dict_uses_camel_case(self):
        data = _track().to_dict()
        assert data == {
            "provider": "soundcloud",
            "contentType": "track",
            "isPrivate": False,
            "sanitizedUrl": "https://soundcloud.com/a/b",
            "metadata": {"artistSlug": "a", "trackSlug": "b"},
            "originalUrl": "soundcloud.com/a/b?si=1",
        }

    def test_accepts_camel_case_input(self):
        result = ParsedMusicUrl.model_validate(
            {
                "provider": "soundcloud",
                "contentType": "playlist",
                "isPrivate": True,
                "sanitizedUrl": "https://soundcloud.com/a/sets/p/s-T",
                "metadata": {"artistSlug": "a", "playlistSlug": "p", "secretToken": "s-T"},
                "originalUrl": "https://soundcloud.com/a/sets/p/s-T",
            }
        )
        assert result.provider is MusicProvider.SOUNDCLOUD
        assert result.metadata.secret_token == "s-T"

    def test_str_and_repr(self):
        result = _track()
        assert str(result) == "soundcloud:track:https://soundcloud.com/a/b"
        assert "content_type='track'" in repr(result)
