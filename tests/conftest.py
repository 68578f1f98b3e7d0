"""Pytest configuration and shared fixtures."""

import pytest

from wdym.config import WdymConfig
from wdym.exceptions import ProviderLookupError
from wdym.models import (
    Definition,
    KeyEvent,
    LanguageId,
    LookupResult,
    ProviderId,
    SearchConfig,
)

ENGLISH = LanguageId("en")
JAPANESE = LanguageId("ja")


@pytest.fixture
def test_config(tmp_path):
    """Provide an application configuration with temporary paths."""
    return WdymConfig(
        google_translate_url="https://translate.test/single",
        jisho_api_url="https://jisho.test/api/v1/search/words",
        request_timeout=2.0,
        log_file=tmp_path / "wdym.log",
    )


@pytest.fixture
def book_config():
    """The "book" English to Japanese search."""
    return SearchConfig(
        query="book",
        source_language=ENGLISH,
        target_language=JAPANESE,
        provider=ProviderId.GOOGLE_TRANSLATE,
    )


@pytest.fixture
def make_definition():
    """Factory fixture for creating Definition instances with sensible defaults."""

    def _make(
        meaning="本",
        part_of_speech="noun",
        reverse_translations=("book",),
        confidence=0.9,
        examples=None,
    ):
        return Definition(
            meaning=meaning,
            part_of_speech=part_of_speech,
            reverse_translations=list(reverse_translations) if reverse_translations else None,
            confidence=confidence,
            examples=examples,
        )

    return _make


@pytest.fixture
def book_result(make_definition):
    """A result holding one definition and nothing else."""
    return LookupResult(
        provider=ProviderId.GOOGLE_TRANSLATE,
        definitions=[make_definition()],
        detected_source_language="en",
    )


class StubProvider:
    """A real SearchProvider implementation that records calls for assertion."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "Stub"

    def lookup(self, config: SearchConfig) -> LookupResult:
        self.calls.append(config)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def stub_provider(book_result):
    """Provide a provider that always answers with ``book_result``."""
    return StubProvider(result=book_result)


@pytest.fixture
def failing_provider():
    """Provide a provider that always fails."""
    return StubProvider(error=ProviderLookupError("no answer possible"))


class ScriptedTerminal:
    """A real TerminalBackend that replays scripted events and records frames.

    Reading past the end of the script fails the test instead of blocking.
    """

    def __init__(self, events=None, on_read=None):
        self.events = list(events if events is not None else [KeyEvent("q")])
        self.frames = []
        self.reads = 0
        self.on_read = on_read

    def draw(self, blocks) -> None:
        self.frames.append(blocks)

    def read_event(self):
        self.reads += 1
        if self.on_read is not None:
            self.on_read(self)
        if not self.events:
            pytest.fail("terminal read past the end of the scripted events")
        return self.events.pop(0)


@pytest.fixture
def scripted_terminal():
    """Provide a terminal that presses 'q' on the first read."""
    return ScriptedTerminal()


@pytest.fixture
def make_provider():
    """Factory fixture for StubProvider instances."""
    return StubProvider


@pytest.fixture
def make_terminal():
    """Factory fixture for ScriptedTerminal instances."""
    return ScriptedTerminal
