"""
共通フィクスチャ。

- テスト向けの環境変数を毎テスト自動設定（autouse）
- 設定キャッシュを毎テストでクリア
- ルートを `sys.path` に追加して `import pagesmith.*` を解決
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テスト用の環境変数を設定し、設定キャッシュを初期化する。"""
    from pagesmith.config import clear_settings_cache

    env: dict[str, str] = {
        "PAGESMITH_LOG_LEVEL": "DEBUG",
    }
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    for k in ("PAGESMITH_DEFAULT_STAGING", "PAGESMITH_LOG_FILE"):
        monkeypatch.delenv(k, raising=False)

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Directory holding page templates, outside any project."""
    directory = tmp_path / "entries"
    directory.mkdir()
    return directory


@pytest.fixture
def write_template(template_dir: Path) -> Callable[[str, str], Path]:
    """Write a template file into ``template_dir`` and return its path."""

    def _write(name: str, content: str) -> Path:
        path = template_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
