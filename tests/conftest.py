"""Pytest configuration and fixtures for movabletype tests.

This module provides shared fixtures for testing the movabletype package:
- Sample export documents
- Environment isolation for configuration loading
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Isolate configuration loading from the developer's machine.

    Removes all MOVABLETYPE_* environment variables, points HOME at an empty
    directory and changes into a fresh working directory. Returns that
    working directory.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("MOVABLETYPE_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Provide a helper to set MOVABLETYPE_* environment variables.

    Example:
        def test_env_loading(clean_env, mock_env):
            mock_env["ENCODING"] = "cp1252"
            # MOVABLETYPE_ENCODING is now set
    """

    class EnvSetter(dict[str, str]):
        def __setitem__(self, key: str, value: str) -> None:
            super().__setitem__(key, value)
            monkeypatch.setenv(f"MOVABLETYPE_{key}", value)

    return EnvSetter()


# ============================================================================
# Export Fixtures
# ============================================================================


@pytest.fixture
def two_entry_export() -> str:
    """Two complete records as exported by a real blog."""
    return """AUTHOR: catatsuy
TITLE: ポエム
BASENAME: poem
STATUS: Publish
ALLOW COMMENTS: 1
ALLOW PINGS: 1
CONVERT BREAKS: 0
DATE: 04/22/2017 20:41:58
PRIMARY CATEGORY: ブログ
CATEGORY: ポエム
CATEGORY: 技術系
-----
BODY:
<p>body</p>
<p>bodybody</p>
<p>bodybodybody</p>
-----
EXTENDED BODY:
<p>extended body</p>
<p>extended body body</p>
<p>extended body body body</p>
-----
EXCERPT:
ここに概要が表示されます。
-----
--------
AUTHOR: catatsuy
TITLE: 風邪で声を失った話
BASENAME: 2017/04/09/194939
STATUS: Publish
ALLOW COMMENTS: 1
CONVERT BREAKS: 0
DATE: 04/09/2017 07:49:39 PM
CATEGORY: 日常
-----
BODY:
<p>bodybodybody</p>
-----
EXTENDED BODY:
<p>extended body body body</p>
-----
EXCERPT:
ここに概要が表示されます。
-----
KEYWORDS:
keywords
-----
COMMENT:
AUTHOR: 紗菜
EMAIL:
-----

--------
"""


@pytest.fixture
def three_entry_export() -> str:
    """Three short records, one per status."""
    return """AUTHOR: author1
TITLE: Title 1
STATUS: Publish
DATE: 01/01/2023 12:00:00
-----
BODY:
Body 1
-----
--------
AUTHOR: author2
TITLE: Title 2
STATUS: Draft
DATE: 01/02/2023 12:00:00
-----
BODY:
Body 2
-----
--------
AUTHOR: author3
TITLE: Title 3
STATUS: Future
DATE: 01/03/2023 12:00:00
-----
BODY:
Body 3
-----
--------
"""
