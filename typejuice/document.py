"""
선언 파일 문서화 모듈.

파일 하나를 읽어 파싱 → 구조 추출 → Markdown 렌더링까지 한 번에 수행한다.

사용 예:
    tj = TypeJuice("types/index.d.ts")
    print(tj.to_markdown())

    # 또는 한 번에
    markdown = render_file("types/index.d.ts")
"""

from __future__ import annotations

import logging
from pathlib import Path

from typejuice.config import Settings
from typejuice.models import StructureEntry
from typejuice.parsing.extractors import StructureExtractor
from typejuice.parsing.ts_parser import TypeScriptParser
from typejuice.rendering.markdown import render_markdown

logger = logging.getLogger(__name__)


class TypeJuice:
    """
    선언 파일 하나에 대한 추출 결과.

    생성 시점에 파일을 한 번 읽고 구조를 만들며, 이후에는 바뀌지 않는다.
    파일을 읽을 수 없으면 OSError가 그대로 전파된다.
    """

    def __init__(
        self,
        path: str | Path,
        settings: Settings | None = None,
        parser: TypeScriptParser | None = None,
        extractor: StructureExtractor | None = None,
    ):
        self.path = Path(path)
        self.settings = settings or Settings()
        parser = parser or TypeScriptParser()
        extractor = extractor or StructureExtractor()

        tree, self.source = parser.parse_file(self.path)
        self.structure: list[StructureEntry] = extractor.extract(tree, self.source)
        logger.debug("%s → %d entries", self.path.name, len(self.structure))

    def to_markdown(self) -> str:
        return render_markdown(self.structure, width=self.settings.wrap_width)


def render_file(path: str | Path, settings: Settings | None = None) -> str:
    """선언 파일 경로를 받아 렌더링된 Markdown을 반환한다."""
    return TypeJuice(path, settings=settings).to_markdown()
