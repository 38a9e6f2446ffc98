# word_source.py
# Dictionary loading. A source is a file path or an http(s) URL; either way
# the result is the list of trimmed, uppercased, non-empty lines in order.

import time
import requests

import utils
from errors import WordSourceUnavailable
from utils import log_with_time, normalize_word, vlog


def is_url(source):
    return str(source).lower().startswith(("http://", "https://"))


def normalize_lines(lines):
    """Yield trimmed uppercase words, skipping blank lines."""
    for line in lines:
        word = normalize_word(line)
        if word:
            yield word


def fetch_text(url):
    try:
        resp = requests.get(url, timeout=utils.HTTP_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise WordSourceUnavailable(f"Unable to download dictionary {url}: {e}") from e
    return resp.text


def read_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise WordSourceUnavailable(f"Unable to find the file: {path}") from e


def load_words(source):
    """Return the normalized words of ``source``.

    Raises WordSourceUnavailable if the file or URL cannot be read.
    """
    t0 = time.time()
    if is_url(source):
        log_with_time(f"⟳ Downloading dictionary {source}…")
        text = fetch_text(source)
    else:
        text = read_text(source)
    words = list(normalize_lines(text.splitlines()))
    vlog(f"Dictionary loaded ({len(words)} words)", t0)
    return words
