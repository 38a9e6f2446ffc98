import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import requests
import word_source
from word_source import load_words, is_url, normalize_lines
from errors import WordSourceUnavailable


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_normalize_lines():
    assert list(normalize_lines([' cat ', '', '   ', 'Wheat\t', 'hat'])) == ['CAT', 'WHEAT', 'HAT']


def test_is_url():
    assert is_url('https://example.com/words.txt')
    assert is_url('HTTP://example.com/words.txt')
    assert not is_url('words.txt')
    assert not is_url('/tmp/http/words.txt')


def test_load_words_from_file(tmp_path):
    path = tmp_path / 'dict.txt'
    path.write_text('cat\nrat\n\n  hat  \nCat\n')
    assert load_words(str(path)) == ['CAT', 'RAT', 'HAT', 'CAT']


def test_load_words_missing_file(tmp_path):
    with pytest.raises(WordSourceUnavailable) as exc:
        load_words(str(tmp_path / 'nope.txt'))
    assert isinstance(exc.value.__cause__, OSError)


def test_load_words_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse('cat\nheat\n')

    monkeypatch.setattr(word_source.requests, 'get', fake_get)
    assert load_words('https://example.com/words.txt') == ['CAT', 'HEAT']
    assert calls[0][0] == 'https://example.com/words.txt'
    assert calls[0][1] is not None


def test_load_words_http_error(monkeypatch):
    monkeypatch.setattr(word_source.requests, 'get', lambda url, timeout=None: FakeResponse('', status=404))
    with pytest.raises(WordSourceUnavailable):
        load_words('https://example.com/words.txt')


def test_load_words_connection_error(monkeypatch):
    def boom(url, timeout=None):
        raise requests.ConnectionError('down')

    monkeypatch.setattr(word_source.requests, 'get', boom)
    with pytest.raises(WordSourceUnavailable) as exc:
        load_words('http://example.com/words.txt')
    assert isinstance(exc.value.__cause__, requests.ConnectionError)
