"""
Genius lookups on behalf of a caller.

Every request builds its own `GeniusService` from the caller's token, so the
credential lives only as long as the request that carried it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import lyricsgenius
from requests.exceptions import HTTPError

from lyrics_gateway.exceptions import NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Return the credential carried by an Authorization header, if any."""
    if not header_value:
        return None
    value = header_value.strip()
    scheme, _, rest = value.partition(" ")
    token = rest.strip() if scheme.lower() == BEARER_SCHEME else value
    return token or None


def _status_of(err: HTTPError) -> Optional[int]:
    # lyricsgenius re-raises as HTTPError(status_code, description)
    if err.response is not None:
        return err.response.status_code
    if err.args and isinstance(err.args[0], int):
        return err.args[0]
    return None


@dataclass
class ArtistRecord:
    id: int
    name: str
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_hit(cls, data: dict) -> "ArtistRecord":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            url=data.get("url"),
            thumbnail=data.get("image_url"),
            image=data.get("header_image_url"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "thumbnail": self.thumbnail,
            "image": self.image,
        }


@dataclass
class SongRecord:
    """The song fields the gateway exposes; built from a provider hit."""

    id: int
    title: str
    full_title: str
    featured_title: Optional[str]
    url: str
    thumbnail: Optional[str]
    image: Optional[str]
    released_at: Optional[str]
    artist: ArtistRecord

    @classmethod
    def from_hit(cls, data: dict) -> "SongRecord":
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            full_title=data.get("full_title"),
            featured_title=data.get("title_with_featured"),
            url=data.get("url"),
            thumbnail=data.get("song_art_image_thumbnail_url"),
            image=data.get("song_art_image_url"),
            released_at=data.get("release_date_for_display"),
            artist=ArtistRecord.from_hit(data.get("primary_artist") or {}),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "fullTitle": self.full_title,
            "featuredTitle": self.featured_title,
            "url": self.url,
            "thumbnail": self.thumbnail,
            "image": self.image,
            "releasedAt": self.released_at,
            "artist": self.artist.to_dict(),
        }


class GeniusService:
    def __init__(self, token: str, timeout: Optional[float] = None):
        self._client = lyricsgenius.Genius(
            token,
            timeout=timeout,
            retries=0,
            verbose=False,
        )

    def _call(self, method, *args, **kwargs):
        try:
            return method(*args, **kwargs)
        except HTTPError as err:
            status = _status_of(err)
            if status == 404:
                raise NotFoundError(str(err)) from err
            if status == 401:
                raise UnauthorizedError(str(err)) from err
            raise

    def lyrics(self, song_id: int) -> str:
        """Lyrics text of the song with the given Genius id."""
        response = self._call(self._client.song, song_id)
        song = (response or {}).get("song")
        if not song:
            raise NotFoundError(f"No song with id {song_id}")

        text = self._call(self._client.lyrics, song_url=song["url"])
        if not text:
            logger.info("Song %s has no lyrics on its page", song_id)
            raise NotFoundError(f"No lyrics for song {song_id}")
        return text

    def search(self, query: Optional[str]) -> List[SongRecord]:
        response = self._call(self._client.search_songs, query)
        hits = (response or {}).get("hits") or []
        return [
            SongRecord.from_hit(hit["result"])
            for hit in hits
            if hit.get("type") == "song" and hit.get("result")
        ]
