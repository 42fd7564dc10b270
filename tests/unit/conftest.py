"""
Pytest configuration for unit tests.

Provides NITF fixtures loaded from tests/fixtures and keeps the config
singletons isolated between tests.
"""

from pathlib import Path

import pytest

from nitf_text import Document
from nitf_text.config import reset_config


FIXTURES_DIR = Path(__file__).resolve().parent.parent / 'fixtures'


def fixture_path(name: str) -> Path:
    return FIXTURES_DIR / name


def load_fixture(name: str) -> str:
    return fixture_path(name).read_text(encoding='utf-8')


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """
    Reset config singletons around every test.

    Tests that set NITF_* environment variables through monkeypatch get a
    freshly built config and leave nothing behind for the next test.
    """
    reset_config()
    yield
    reset_config()


@pytest.fixture
def simple_article_xml() -> str:
    return load_fixture('simple_article.xml')


@pytest.fixture
def doc(simple_article_xml) -> Document:
    """The full sample article (head, body, media, docdata)."""
    return Document(simple_article_xml)


@pytest.fixture
def footnotes_doc() -> Document:
    return Document(load_fixture('with_footnotes.xml'))


@pytest.fixture
def line_breaks_doc() -> Document:
    return Document(load_fixture('with_line_breaks.xml'))


@pytest.fixture
def nested_doc() -> Document:
    return Document(load_fixture('nested_entities.xml'))


@pytest.fixture
def minimal_doc() -> Document:
    return Document(load_fixture('minimal.xml'))


@pytest.fixture
def head_only_doc() -> Document:
    return Document(load_fixture('head_only.xml'))


@pytest.fixture
def body_only_doc() -> Document:
    return Document(load_fixture('body_only.xml'))


@pytest.fixture
def empty_body_doc() -> Document:
    return Document(load_fixture('empty_body.xml'))


@pytest.fixture
def unicode_doc() -> Document:
    return Document(load_fixture('unicode.xml'))


@pytest.fixture
def bad_values_doc() -> Document:
    return Document(load_fixture('bad_values.xml'))


@pytest.fixture
def load():
    """Loader for any fixture file by name."""
    return load_fixture
