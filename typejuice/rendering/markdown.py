"""
Markdown 렌더링 모듈.

StructureEntry 목록을 사람이 읽는 참조 문서 텍스트로 변환한다.

포맷 구조 (인터페이스 예시):
    ## Interface: Example

    ### Properties

    - **`id`**: **string**
      Unique identifier.
    - **`count`**: **number** (optional)
      Occurrence count.
"""

from __future__ import annotations

from typejuice.models import FieldMeta, StructureEntry, TypeAlternative
from typejuice.parsing.comment_extractor import (
    DEFAULT_WRAP_WIDTH,
    format_comment_block,
    wrap_paragraph,
)

# 항목 설명 줄의 들여쓰기 (리스트 항목의 연속 줄)
CONTINUATION_INDENT = "  "


def render_markdown(structure: list[StructureEntry], width: int = DEFAULT_WRAP_WIDTH) -> str:
    """
    추출된 구조 전체를 하나의 Markdown 문서로 렌더링한다.

    항목 사이는 빈 줄 하나로 구분된다.

    Args:
        structure: StructureExtractor.extract() 결과
        width: 주석 줄바꿈 폭

    Returns:
        Markdown 문자열. 항목이 없으면 빈 문자열.
    """
    sections = [_render_entry(entry, width) for entry in structure]
    return "\n".join(sections)


def format_field_list(fields: tuple[FieldMeta, ...], width: int = DEFAULT_WRAP_WIDTH) -> str:
    """FieldMeta 목록을 글머리표 목록으로 포맷. 항목마다 줄바꿈으로 끝난다."""
    lines: list[str] = []
    for field in fields:
        line = f"- **`{field.name}`**: {format_types(field.types)}"
        if field.optional:
            line += " (optional)"
        lines.append(line)
        comment = " ".join(field.comments).strip()
        if comment:
            lines.append(wrap_paragraph(comment, width, indent=CONTINUATION_INDENT))
    return "".join(f"{line}\n" for line in lines)


def format_types(types: tuple[TypeAlternative, ...]) -> str:
    """유니온 대안마다 굵게 표시하고 " | "로 잇는다. 해석 못 한 타입은 빈 토큰이 된다."""
    return " | ".join(f"**{_format_alternative(alternative)}**" for alternative in types)


# ── 내부 헬퍼 함수 ──────────────────────────────────────────


def _format_alternative(alternative: TypeAlternative) -> str:
    return ", ".join(name for name in alternative if name is not None)


def _render_entry(entry: StructureEntry, width: int) -> str:
    meta = entry.meta
    markdown = f"## {entry.kind}: {meta.name}\n"

    # 클래스 생성자: 주석 문단 → 파라미터 목록
    constructor_meta = getattr(meta, "constructor_meta", None)
    if constructor_meta is not None:
        if constructor_meta.comments:
            markdown += "\n"
            markdown += f"{format_comment_block(constructor_meta.comments, width)}\n"
        markdown += "\n"
        markdown += format_field_list(constructor_meta.params, width)

    # 함수: 파라미터가 없어도 제목은 항상 출력
    params = getattr(meta, "params", None)
    if params is not None:
        markdown += "\n"
        markdown += "### Parameters\n"
        if params:
            markdown += "\n"
            markdown += format_field_list(params, width)

    # 인터페이스/클래스: 프로퍼티가 있을 때만 출력
    props = getattr(meta, "props", None)
    if props:
        markdown += "\n"
        markdown += "### Properties\n"
        markdown += "\n"
        markdown += format_field_list(props, width)

    return markdown
