"""Test configuration and fixtures.

Provides:
- A Flask app and test client
- A fake lyricsgenius client that records how it was built and called
- Sample song pages and search-engine result pages
"""

import pytest
import requests

from lyrics_gateway import create_app
from lyrics_gateway.services import genius as genius_service


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app():
    return create_app({
        "TESTING": True,
        "UPSTREAM_TIMEOUT": None,
        "USER_AGENT": "test-agent",
        "SEARCH_USER_AGENT": "test-search-agent",
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer secret-token"}


# =============================================================================
# Genius Fixtures
# =============================================================================


def make_hit(song_id, title, artist="Adele", hit_type="song"):
    return {
        "type": hit_type,
        "index": hit_type,
        "highlights": [],
        "result": {
            "id": song_id,
            "title": title,
            "full_title": f"{title} by {artist}",
            "title_with_featured": title,
            "url": f"https://genius.com/{artist}-{title}-lyrics".replace(" ", "-"),
            "path": f"/{artist}-{title}-lyrics".replace(" ", "-"),
            "song_art_image_thumbnail_url": "https://images.genius.com/thumb.jpg",
            "song_art_image_url": "https://images.genius.com/art.jpg",
            "release_date_for_display": "October 23, 2015",
            "lyrics_state": "complete",
            "primary_artist": {
                "id": 2300,
                "name": artist,
                "url": f"https://genius.com/artists/{artist}",
                "image_url": "https://images.genius.com/artist.jpg",
                "header_image_url": "https://images.genius.com/header.jpg",
                "api_path": "/artists/2300",
            },
        },
    }


class FakeGenius:
    """Stands in for lyricsgenius.Genius; behaviour is set per test."""

    instances = []

    songs = {}
    lyrics_by_url = {}
    hits = []
    error = None

    def __init__(self, access_token, **kwargs):
        self.access_token = access_token
        self.kwargs = kwargs
        self.calls = []
        FakeGenius.instances.append(self)

    def _maybe_fail(self):
        if FakeGenius.error is not None:
            raise FakeGenius.error

    def song(self, song_id):
        self.calls.append(("song", song_id))
        self._maybe_fail()
        return {"song": FakeGenius.songs[song_id]}

    def lyrics(self, song_id=None, song_url=None):
        self.calls.append(("lyrics", song_url))
        return FakeGenius.lyrics_by_url.get(song_url)

    def search_songs(self, search_term, per_page=None, page=None):
        self.calls.append(("search_songs", search_term))
        self._maybe_fail()
        return {"hits": FakeGenius.hits, "next_page": None}


@pytest.fixture
def fake_genius(monkeypatch):
    FakeGenius.instances = []
    FakeGenius.songs = {}
    FakeGenius.lyrics_by_url = {}
    FakeGenius.hits = []
    FakeGenius.error = None
    monkeypatch.setattr(genius_service.lyricsgenius, "Genius", FakeGenius)
    return FakeGenius


# =============================================================================
# HTML Fixtures
# =============================================================================


@pytest.fixture
def song_page_html():
    """Trimmed-down azlyrics song page."""
    return """
    <html><body>
    <div class="col-xs-12 col-lg-8 text-center">
      <div class="ringtone"><span id="cf_text_top"></span></div>
      <b>"Hello"</b>
      <br>
      <br>
      <div>
    <!-- Usage of azlyrics.com content by any third-party lyrics provider is prohibited. -->
    Hello, it's me<br>
    I was wondering if after all these years you'd like to meet<br>
      </div>
      <br><br>
      <div class="noprint" style="margin-left:10px;margin-right:10px;">Submit Corrections</div>
    </div>
    </body></html>
    """


@pytest.fixture
def search_page_html():
    """No-JavaScript search result page with two organic results."""
    return """
    <html><body><div id="main">
      <div class="Gx5Zad fP1Qef xpd EtOod pkphOe">
        <div class="egMi0 kCrYT">
          <a href="/url?q=https://www.azlyrics.com/lyrics/adele/hello.html&amp;sa=U&amp;ved=abc">
            <h3 class="zBAuLc l97dzf"><div class="BNeawe vvjwJb AP7Wnd">Adele - Hello Lyrics | AZLyrics.com</div></h3>
            <div class="BNeawe UPmit AP7Wnd">www.azlyrics.com &rsaquo; lyrics &rsaquo; adele</div>
          </a>
        </div>
        <div class="kCrYT"><div><div class="BNeawe s3v9rd AP7Wnd">Lyrics to "Hello" song by Adele: Hello, it's me.</div></div></div>
      </div>
      <div class="Gx5Zad fP1Qef xpd EtOod pkphOe">
        <div class="egMi0 kCrYT">
          <a href="/url?q=https://www.azlyrics.com/lyrics/adele/hello.html&amp;sa=U&amp;ved=dup">
            <h3 class="zBAuLc l97dzf"><div class="BNeawe vvjwJb AP7Wnd">Adele - Hello Lyrics | AZLyrics.com</div></h3>
          </a>
        </div>
      </div>
      <div class="Gx5Zad fP1Qef xpd EtOod pkphOe">
        <div class="egMi0 kCrYT">
          <a href="/url?q=https://www.azlyrics.com/lyrics/lionelrichie/hello.html&amp;sa=U&amp;ved=def">
            <h3 class="zBAuLc l97dzf"><div class="BNeawe vvjwJb AP7Wnd">Lionel Richie - Hello Lyrics | AZLyrics.com</div></h3>
          </a>
        </div>
      </div>
      <a href="/url?q=https://maps.google.com/&amp;sa=U">Maps</a>
    </div></body></html>
    """


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_response():
    return FakeResponse
