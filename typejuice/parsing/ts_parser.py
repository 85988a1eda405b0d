"""
TypeScript 선언 파일 파서 모듈.

tree-sitter와 tree-sitter-typescript 바인딩을 사용하여
.ts / .d.ts 소스 코드를 AST(Abstract Syntax Tree)로 변환한다.

사용 예:
    parser = TypeScriptParser()
    tree, source = parser.parse_file(Path("index.d.ts"))
    # tree.root_node (program)에서 순회 시작
"""

from pathlib import Path

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Parser, Tree

# tree-sitter-typescript의 언어 객체를 모듈 수준에서 한 번만 초기화.
# TSX가 아닌 순수 TypeScript 문법을 사용한다.
TYPESCRIPT_LANGUAGE = Language(tstypescript.language_typescript())


class TypeScriptParser:
    """
    TypeScript 소스 파일을 tree-sitter AST로 변환하는 파서.

    tree-sitter는 바이트 단위로 파싱하므로 반환되는 source도 bytes이다.
    노드의 start_byte/end_byte로 원본에서 텍스트를 잘라낼 수 있다.
    """

    def __init__(self):
        self.parser = Parser(TYPESCRIPT_LANGUAGE)

    def parse_file(self, file_path: Path) -> tuple[Tree, bytes]:
        """
        파일을 한 번에 읽어 파싱하고 (AST, 원본 바이트)를 반환한다.

        파일을 읽을 수 없으면 OSError(FileNotFoundError 등)가 그대로 전파된다.
        """
        source = file_path.read_bytes()
        tree = self.parser.parse(source)
        return tree, source

    def parse_source(self, source: bytes | str) -> Tree:
        """소스 문자열(또는 바이트)을 직접 파싱한다. 테스트에서 주로 사용된다."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self.parser.parse(source)
