import threading
import time

import pytest

from faq_matcher import FAQMatcher, FaqEntry

PASSWORD_Q = "How do I reset my password?"
CONTACT_Q = "How do I contact support?"


class FakeLexicon:
    """Dict-backed stand-in for WordNet, with optional delays and failures."""

    def __init__(self, table=None, delays=None, failing=()):
        self.table = dict(table or {})
        self.delays = dict(delays or {})
        self.failing = set(failing)
        self.calls = []
        self._lock = threading.Lock()

    def synonyms(self, word):
        with self._lock:
            self.calls.append(word)
        delay = self.delays.get(word)
        if delay:
            time.sleep(delay)
        if word in self.failing:
            raise RuntimeError(f"lexicon unavailable for {word}")
        return list(self.table.get(word, []))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_lexicon():
    return FakeLexicon


@pytest.fixture
def sample_entries():
    return [
        FaqEntry(question=PASSWORD_Q, answer="Use the reset link."),
        FaqEntry(question=CONTACT_Q, answer="Call 16221."),
    ]


@pytest.fixture
def make_matcher():
    def _make(entries, config=None, lexicon=None):
        corpus = list(entries)
        matcher = FAQMatcher(lambda: list(corpus), config=config, lexicon=lexicon or FakeLexicon())
        matcher.reload()
        return matcher

    return _make
