"""Shared test fixtures for domdiff."""

import pytest

from domdiff.config.models import DomDiffConfig
from domdiff.hashing import HashCache


SCENARIO_A = "<div><h1>Hi</h1></div>"
SCENARIO_B = "<div><h1>Hi</h1><p>New</p></div>"


@pytest.fixture
def markup_a():
    return SCENARIO_A


@pytest.fixture
def markup_b():
    return SCENARIO_B


@pytest.fixture
def multiline_page():
    return (
        "<html>\n"
        "  <body>\n"
        '    <div   class="main"\n'
        '         id="content">\n'
        "      <h1>Title</h1>\n"
        "      <p>\n"
        "        First paragraph\n"
        "      </p>\n"
        "    </div>\n"
        "  </body>\n"
        "</html>\n"
    )


@pytest.fixture
def sample_config():
    return DomDiffConfig()


@pytest.fixture
def cache():
    return HashCache()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no domdiff.yaml in cwd or $HOME and no $DOMDIFF_CONFIG."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("DOMDIFF_CONFIG", raising=False)
    return tmp_path
