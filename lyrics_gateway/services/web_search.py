"""
Site-restricted web search, scraped from the search engine's HTML results.

Only organic results are returned, each as
``{"type": "ORGANIC", "title": ..., "link": ..., "description": ...}``.
"""

import logging
import urllib.parse

import requests
from bs4 import BeautifulSoup

from lyrics_gateway import config

logger = logging.getLogger(__name__)

ORGANIC = "ORGANIC"

# Markup of the engine's no-JavaScript result page
RESULT_LINK_SELECTOR = 'a[href^="/url?q="]'
TITLE_SELECTOR = "h3, div.vvjwJb"
RESULT_CONTAINER_CLASS = "Gx5Zad"
DESCRIPTION_SELECTOR = "div.BNeawe.s3v9rd"


def build_query(query, site):
    # a missing query is spelled "null"
    return f"site:{site} {'null' if query is None else query} lyrics"


def unwrap_link(href):
    """Turn the engine's ``/url?q=<target>&...`` redirect into ``<target>``."""
    parsed = urllib.parse.urlparse(href)
    if parsed.path == "/url":
        target = urllib.parse.parse_qs(parsed.query).get("q")
        if target:
            return target[0]
    return href


def parse_organic_results(html):
    soup = BeautifulSoup(html, "html.parser")
    results = []
    seen = set()
    for anchor in soup.select(RESULT_LINK_SELECTOR):
        title = anchor.select_one(TITLE_SELECTOR)
        if title is None:
            # sitelinks, "more results" and other non-result anchors
            continue
        link = unwrap_link(anchor["href"])
        if link in seen:
            continue
        seen.add(link)

        description = None
        container = anchor.find_parent("div", class_=RESULT_CONTAINER_CLASS)
        if container is not None:
            node = container.select_one(DESCRIPTION_SELECTOR)
            if node is not None:
                description = node.get_text(" ", strip=True)

        results.append({
            "type": ORGANIC,
            "title": title.get_text(" ", strip=True),
            "link": link,
            "description": description,
        })
    return results


def site_search(query, site=config.AZLYRICS_SITE, engine_url=config.SEARCH_ENGINE_URL,
                timeout=None, user_agent=config.SEARCH_USER_AGENT):
    params = {
        "q": build_query(query, site),
        "safe": "active",
    }
    response = requests.get(
        engine_url,
        params=params,
        headers={"User-Agent": user_agent},
        timeout=timeout,
    )
    response.raise_for_status()
    results = parse_organic_results(response.text)
    logger.debug("Search %r returned %d organic results", params["q"], len(results))
    return results
