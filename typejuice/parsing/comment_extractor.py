"""
주석 추출 모듈.

선언 노드 바로 앞에 붙어 있는 라인 주석(// ...) 블록을 문단 목록으로 추출한다.

tree-sitter는 주석을 별도의 comment 형제 노드로 파싱하고, 선언 노드의
start_byte는 선언 자체에서 시작한다. 그래서 "이전 형제(주석 제외)의 끝"부터
노드 끝까지를 잘라내 원문 텍스트를 줄 단위로 훑는다.

    interface_body
    ├── "{"                  ← 이전 형제: 여기 끝에서 구간 시작
    ├── comment              // 고유 식별자.
    └── property_signature   id: string   ← 여기 끝에서 구간 끝

줄 분류:
    주석 줄  ^\\s*//(.+?)$
    빈 줄    ^\\s*$
    코드 줄  그 외
"""

import re
import textwrap
from enum import Enum

from tree_sitter import Node

COMMENT_LINE = re.compile(r"^\s*//(.+?)$")
BLANK_LINE = re.compile(r"^\s*$")

DEFAULT_WRAP_WIDTH = 80


class ScanState(Enum):
    SEEKING = "seeking"          # 아직 주석을 못 만남
    IN_BLOCK = "in_block"        # 직전 줄이 주석 (같은 문단 이어붙이기)
    AFTER_BREAK = "after_break"  # 주석 이후 빈 줄을 만남 (다음 주석은 새 문단)
    DONE = "done"                # 주석 바로 뒤에 코드가 와서 종료


class CommentScanner:
    """
    줄 단위 유한 상태 기계.

    상태 전이:
        SEEKING     --주석--> IN_BLOCK (새 문단)
        IN_BLOCK    --주석--> IN_BLOCK (마지막 문단에 공백으로 이어붙임)
        IN_BLOCK    --빈줄--> AFTER_BREAK
        IN_BLOCK    --코드--> DONE
        AFTER_BREAK --주석--> IN_BLOCK (새 문단)
        그 외 (빈 줄/코드) 는 상태 유지
    """

    def __init__(self):
        self.state = ScanState.SEEKING
        self.paragraphs: list[str] = []

    def feed(self, line: str) -> ScanState:
        """한 줄을 처리하고 전이된 상태를 반환한다."""
        if self.state is ScanState.DONE:
            return self.state

        match = COMMENT_LINE.match(line)
        if match:
            text = match.group(1).strip()
            if self.state is ScanState.IN_BLOCK:
                self.paragraphs[-1] += f" {text}"
            else:
                self.paragraphs.append(text)
            self.state = ScanState.IN_BLOCK
        elif BLANK_LINE.match(line):
            if self.state is ScanState.IN_BLOCK:
                self.state = ScanState.AFTER_BREAK
        elif self.state is ScanState.IN_BLOCK:
            self.state = ScanState.DONE
        return self.state

    def scan(self, text: str) -> list[str]:
        """텍스트 전체를 줄 단위로 훑어 주석 문단 목록을 반환한다."""
        for line in re.split(r"\r?\n", text):
            if self.feed(line) is ScanState.DONE:
                break
        return self.paragraphs


def leading_span(node: Node) -> tuple[int, int]:
    """
    노드의 앞쪽 주석까지 포함한 [start, end) 바이트 구간을 계산한다.

    start는 주석이 아닌 직전 형제 노드("{", ",", ";" 같은 토큰 포함)의 끝이고,
    직전 형제가 없으면 부모 노드의 시작이다.
    """
    prev = node.prev_sibling
    while prev is not None and prev.type == "comment":
        prev = prev.prev_sibling
    if prev is not None:
        start = prev.end_byte
    elif node.parent is not None:
        start = node.parent.start_byte
    else:
        start = 0
    return start, node.end_byte


def extract_node_comments(node: Node, source: bytes) -> list[str]:
    """
    선언 노드 바로 앞의 라인 주석 블록을 문단 목록으로 추출한다.

    Args:
        node: 프로퍼티/파라미터/생성자 등의 선언 노드
        source: 원본 소스 바이트

    Returns:
        주석 문단 리스트 (먼저 나온 순서). 빈 줄로 구분된 주석은 별도 문단이 된다.
    """
    start, end = leading_span(node)
    text = source[start:end].decode("utf-8", errors="replace")
    return CommentScanner().scan(text)


def format_comment_block(paragraphs: list[str] | tuple[str, ...], width: int = DEFAULT_WRAP_WIDTH) -> str:
    """
    문단들을 빈 줄로 잇고, 각 문단을 width 열에서 줄바꿈한다.

    공백에서만 줄을 바꾸며 단어 중간은 자르지 않는다.
    """
    return "\n\n".join(wrap_paragraph(paragraph, width) for paragraph in paragraphs)


def wrap_paragraph(text: str, width: int = DEFAULT_WRAP_WIDTH, indent: str = "") -> str:
    if not text:
        return indent.rstrip()
    return textwrap.fill(
        text,
        width=width,
        initial_indent=indent,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )
