"""
포함 지시자 확장 모듈.

Markdown 문서에서 다음 형태의 줄을 찾아, 해당 선언 파일의 렌더링 결과로 바꾼다.

    <<< typejuice:api/index.d.ts

경로는 type_root 기준 상대 경로이다 (type_root / "api/index.d.ts").
지시자가 아닌 줄은 그대로 유지된다.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from typejuice.config import Settings
from typejuice.document import render_file

logger = logging.getLogger(__name__)

INCLUDE_DIRECTIVE = re.compile(r"^<<< typejuice:(.+?)$")


def expand_includes(
    document: str,
    type_root: Path | None = None,
    settings: Settings | None = None,
) -> str:
    """
    문서의 모든 포함 지시자 줄을 렌더링된 Markdown으로 치환한다.

    Args:
        document: Markdown 원문
        type_root: 지시자 경로의 기준 디렉토리. None이면 설정값(Settings.type_root) 사용
        settings: 렌더링 설정. None이면 환경변수/.env에서 로드

    Returns:
        치환된 Markdown 문자열. 원래 줄바꿈 문자는 유지된다.
    """
    settings = settings or Settings()
    root = Path(type_root) if type_root is not None else settings.type_root

    parts: list[str] = []
    for line in document.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        match = INCLUDE_DIRECTIVE.match(body)
        if not match:
            parts.append(line)
            continue
        target = root / match.group(1).strip()
        logger.debug("including %s", target)
        rendered = render_file(target, settings=settings)
        # 렌더링 결과는 줄바꿈으로 끝나므로, 지시자 줄의 줄바꿈은 중복해서 붙이지 않는다
        if rendered and not rendered.endswith("\n"):
            rendered += line[len(body):]
        parts.append(rendered)
    return "".join(parts)


def expand_file(path: str | Path, type_root: Path | None = None, settings: Settings | None = None) -> str:
    """Markdown 파일을 읽어 포함 지시자를 확장한 결과를 반환한다."""
    document = Path(path).read_text(encoding="utf-8")
    return expand_includes(document, type_root=type_root, settings=settings)
