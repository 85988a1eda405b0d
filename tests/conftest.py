"""
typejuice 테스트 공용 픽스처.

- 경로 픽스처: tests/fixtures 아래 샘플 선언 파일
- 파싱 픽스처: 소스 문자열을 바로 StructureEntry 목록으로 만드는 헬퍼
"""

from pathlib import Path

import pytest

from typejuice.config import Settings
from typejuice.parsing.extractors import StructureExtractor
from typejuice.parsing.ts_parser import TypeScriptParser


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def ts_parser() -> TypeScriptParser:
    return TypeScriptParser()


@pytest.fixture
def extractor() -> StructureExtractor:
    return StructureExtractor()


@pytest.fixture
def extract(ts_parser, extractor):
    """TypeScript 소스 문자열 → StructureEntry 리스트."""

    def _extract(text: str):
        source = text.encode("utf-8")
        tree = ts_parser.parse_source(source)
        return extractor.extract(tree, source)

    return _extract


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    """환경변수와 .env 영향을 받지 않는 기본 설정."""
    monkeypatch.chdir(tmp_path)
    for name in ("TYPEJUICE_TYPE_ROOT", "TYPEJUICE_WRAP_WIDTH", "TYPEJUICE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return Settings()
