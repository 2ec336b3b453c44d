from typing import Optional, Tuple

from bs4 import BeautifulSoup

from .reader_options import DEFAULT_HTML_FEATURES


def parse_html(
    stream, features: str = DEFAULT_HTML_FEATURES
) -> Tuple[Optional[BeautifulSoup], Optional[Exception]]:
    try:
        return BeautifulSoup(stream, features), None
    except Exception as e:
        return None, e
