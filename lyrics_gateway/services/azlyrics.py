import logging

import requests
from bs4 import BeautifulSoup

from lyrics_gateway import config
from lyrics_gateway.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def fetch_page(url, timeout=None, user_agent=config.USER_AGENT):
    headers = {"User-Agent": user_agent}
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    return response.text


def extract_lyrics(html, selector=config.LYRICS_SELECTOR):
    """
    Pull the lyrics block out of a song page.

    This is the only place that knows the page layout; if the site changes
    its markup, change the selector (or this function) and nothing else.
    Returns None when the page has no matching element.
    """
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one(selector)
    if block is None:
        return None
    return block.get_text().strip()


def scrape_lyrics(url, timeout=None, user_agent=config.USER_AGENT,
                  selector=config.LYRICS_SELECTOR):
    html = fetch_page(url, timeout=timeout, user_agent=user_agent)
    lyrics = extract_lyrics(html, selector=selector)
    if lyrics is None:
        logger.info("No lyrics block matching %r at %s", selector, url)
        raise NotFoundError(f"No lyrics found at {url}")
    return lyrics
