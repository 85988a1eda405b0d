"""
선언 구조 추출 모듈.

tree-sitter AST를 순회하여 TypeScript 선언 파일에서 인터페이스, 클래스, 함수의
메타데이터를 추출한다. 이 모듈은 파이프라인에서 가장 복잡한 핵심 모듈이다.

AST 순회 흐름:
    program
    ├── interface_declaration → ("Interface", InterfaceMeta)
    │   └── interface_body
    │       └── property_signature → FieldMeta
    ├── class_declaration → ("Class", ClassMeta)
    │   └── class_body
    │       ├── method_definition ("constructor") → ConstructorMeta
    │       └── public_field_definition → FieldMeta
    ├── function_declaration / function_signature → ("Function", FunctionMeta)
    ├── export_statement / ambient_declaration → 안쪽 선언을 꺼내서 처리
    └── internal_module / module (namespace) → statement_block 재귀 처리
        (결과는 현재 목록에 평평하게 이어붙이고, 네임스페이스 이름은 버린다)
"""

import logging

from tree_sitter import Node, Tree

from typejuice.models import (
    ClassMeta,
    ConstructorMeta,
    FieldMeta,
    FunctionMeta,
    InterfaceMeta,
    StructureEntry,
)
from typejuice.parsing.comment_extractor import extract_node_comments
from typejuice.parsing.type_names import extract_node_types

logger = logging.getLogger(__name__)

# 구조를 담을 수 있는 노드 (최상위 소스, 네임스페이스 본문)
CONTAINER_TYPES = ("program", "statement_block")

INTERFACE_TYPES = ("interface_declaration",)
# "class", "function_expression"은 export default 뒤의 이름 없는 선언
CLASS_TYPES = ("class_declaration", "abstract_class_declaration", "class")
FUNCTION_TYPES = (
    "function_declaration",
    "function_signature",
    "generator_function_declaration",
    "function_expression",
)
DEFAULT_EXPORT_TYPES = ("class", "function_expression")
NAMESPACE_TYPES = ("internal_module", "module")


class UnsupportedContainerError(ValueError):
    """program / statement_block 이 아닌 노드로 구조 순회를 시작했을 때 발생한다."""


class StructureExtractor:
    """
    tree-sitter AST에서 StructureEntry 목록을 추출하는 추출기.

    하나의 소스 파일을 입력받아, 인식된 선언을 만난 순서대로 반환한다.
    상태를 갖지 않으므로 여러 파일에 재사용할 수 있다.
    """

    def extract(self, tree: Tree, source: bytes) -> list[StructureEntry]:
        """
        AST 전체에서 선언 구조를 추출한다.

        Args:
            tree: tree-sitter 파싱 결과 AST
            source: 원본 소스 바이트 (노드 텍스트와 주석 추출에 사용)

        Returns:
            StructureEntry 리스트 (소스 등장 순서)
        """
        return self.extract_structure(tree.root_node, source)

    def extract_structure(self, node: Node, source: bytes) -> list[StructureEntry]:
        """
        컨테이너 노드의 문장들을 순회하며 선언을 종류별로 분기 처리한다.

        네임스페이스를 만나면 그 본문을 재귀 순회한 결과를 그 자리에 펼쳐 넣는다.
        """
        if node.type not in CONTAINER_TYPES:
            raise UnsupportedContainerError(
                f"node kind must be either program or statement_block, got {node.type!r}"
            )

        entries: list[StructureEntry] = []
        for statement in node.named_children:
            declaration = self._unwrap(statement)
            if declaration is None:
                continue
            if declaration.type in INTERFACE_TYPES:
                entries.append(StructureEntry(kind="Interface", meta=self.extract_interface(declaration, source)))
            elif declaration.type in CLASS_TYPES:
                entries.append(StructureEntry(kind="Class", meta=self.extract_class(declaration, source)))
            elif declaration.type in FUNCTION_TYPES:
                entries.append(StructureEntry(kind="Function", meta=self.extract_function(declaration, source)))
            elif declaration.type in NAMESPACE_TYPES or declaration.type == "statement_block":
                body = self._namespace_body(declaration)
                if body is not None:
                    entries.extend(self.extract_structure(body, source))
        return entries

    def extract_interface(self, node: Node, source: bytes) -> InterfaceMeta:
        """property_signature 멤버만 FieldMeta로 모은다. 메서드 시그니처 등은 버린다."""
        props = []
        body = node.child_by_field_name("body")
        if body is not None:
            for member in body.named_children:
                if member.type == "property_signature":
                    props.append(self.extract_node_meta(member, source))
        name = self._get_name(node, source)
        logger.debug("interface %s: %d props", name, len(props))
        return InterfaceMeta(name=name, props=tuple(props))

    def extract_class(self, node: Node, source: bytes) -> ClassMeta:
        """
        클래스 멤버를 생성자와 필드 선언으로 나눈다.

        생성자는 본문이 있는 method_definition이거나, .d.ts처럼 본문 없는
        method_signature일 수 있다. 둘 다 이름이 "constructor"인 것으로 판별한다.
        """
        constructor_meta = None
        props = []
        body = node.child_by_field_name("body")
        if body is not None:
            for member in body.named_children:
                if member.type in ("method_definition", "method_signature"):
                    if self._get_name(member, source) == "constructor":
                        constructor_meta = self.extract_constructor(member, source)
                elif member.type == "public_field_definition":
                    props.append(self.extract_node_meta(member, source))
        name = self._get_name(node, source) or "default"
        logger.debug("class %s: %d props, constructor=%s", name, len(props), constructor_meta is not None)
        return ClassMeta(name=name, constructor_meta=constructor_meta, props=tuple(props))

    def extract_constructor(self, node: Node, source: bytes) -> ConstructorMeta:
        params = self._extract_parameters(node, source)
        comments = extract_node_comments(node, source)
        return ConstructorMeta(params=tuple(params), comments=tuple(comments))

    def extract_function(self, node: Node, source: bytes) -> FunctionMeta:
        """파라미터는 선언 순서대로, 반환 타입은 return_type 어노테이션에서 추출한다."""
        name = self._get_name(node, source) or "default"
        params = self._extract_parameters(node, source)
        logger.debug("function %s: %d params", name, len(params))
        return FunctionMeta(
            name=name,
            params=tuple(params),
            return_types=extract_node_types(node, source, field="return_type"),
        )

    def extract_node_meta(self, node: Node, source: bytes) -> FieldMeta:
        """
        이름과 타입을 가진 노드(파라미터 또는 프로퍼티) 하나를 FieldMeta로 만든다.

        tree-sitter AST 구조:
            property_signature / public_field_definition
            ├── name: property_identifier
            ├── "?"                       (선택적일 때만)
            └── type: type_annotation

            required_parameter / optional_parameter
            ├── pattern: identifier
            ├── "?"                       (optional_parameter)
            └── type: type_annotation
        """
        name_node = node.child_by_field_name("name")
        if name_node is None:
            name_node = node.child_by_field_name("pattern")
        return FieldMeta(
            name=self._text(name_node, source),
            optional=self._is_optional(node),
            types=extract_node_types(node, source),
            comments=tuple(extract_node_comments(node, source)),
        )

    def _extract_parameters(self, node: Node, source: bytes) -> list[FieldMeta]:
        params = []
        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return params
        for child in params_node.named_children:
            if child.type in ("required_parameter", "optional_parameter"):
                params.append(self.extract_node_meta(child, source))
        return params

    def _unwrap(self, statement: Node) -> Node | None:
        """
        선언을 감싸는 문장에서 실제 선언 노드를 꺼낸다.

        - export_statement: export interface Foo {} → declaration 필드
        - export default class {} → value 필드 (이름 없는 클래스/함수만)
        - ambient_declaration: declare class Foo {} / declare global {} → 첫 이름 있는 자식
        - expression_statement: namespace Foo {} 가 표현식 문장으로 파싱되는 경우
        """
        if statement.type == "export_statement":
            declaration = statement.child_by_field_name("declaration")
            if declaration is not None:
                return self._unwrap(declaration)
            value = statement.child_by_field_name("value")
            if value is not None and value.type in DEFAULT_EXPORT_TYPES:
                return value
            return None
        if statement.type == "ambient_declaration":
            children = [c for c in statement.named_children if c.type != "comment"]
            if not children:
                return None
            if children[0].type == "statement_block":
                return children[0]
            return self._unwrap(children[0])
        if statement.type == "expression_statement":
            children = statement.named_children
            if children and children[0].type in NAMESPACE_TYPES:
                return children[0]
            return None
        if statement.type == "statement_block":
            return None
        return statement

    def _namespace_body(self, node: Node) -> Node | None:
        # declare global { ... } 은 statement_block 자체가 본문
        if node.type == "statement_block":
            return node
        # declare module "x"; 처럼 본문이 없을 수 있다
        return node.child_by_field_name("body")

    def _is_optional(self, node: Node) -> bool:
        if node.type == "optional_parameter":
            return True
        return any(child.type == "?" for child in node.children)

    def _get_name(self, node: Node, source: bytes) -> str | None:
        """노드의 name 필드에서 식별자를 추출한다."""
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            return self._text(name_node, source)
        return None

    @staticmethod
    def _text(node: Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
