"""
타입 이름 해석 모듈.

타입 어노테이션 노드를 평평한 문자열 이름으로 변환한다.

tree-sitter AST 구조 (TypeScript):
    type_annotation (": A.B.C")
    └── nested_type_identifier
        ├── module: nested_identifier
        │   ├── object: identifier ("A")
        │   └── property: property_identifier ("B")
        └── name: type_identifier ("C")

한정 이름은 왼쪽(module/object)과 오른쪽(name/property) 연결로 이루어진다.
깊이가 4 이상이면 왼쪽이 member_expression으로 다시 중첩된다.
"""

from types import MappingProxyType

from tree_sitter import Node

# 키워드(내장) 타입 → 표준 소문자 이름. 변경 불가능한 정적 테이블.
KEYWORD_TYPES = MappingProxyType({
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
    "undefined": "undefined",
    "object": "object",
    "any": "any",
    "unknown": "unknown",
    "never": "never",
    "void": "void",
    "symbol": "symbol",
    "bigint": "bigint",
})

# literal_type 안에서 이름으로 인정하는 리터럴 (문자열/숫자 리터럴 타입은 제외)
LITERAL_KEYWORDS = ("null", "undefined")

# 한정 이름 노드 종류 → (왼쪽 필드명, 오른쪽 필드명)
_QUALIFIED_FIELDS = {
    "nested_type_identifier": ("module", "name"),
    "nested_identifier": ("object", "property"),
    "member_expression": ("object", "property"),
}

# 여러 타입을 나열하는 어노테이션 (A | B, A & B)
_COMPOSITE_TYPES = ("union_type", "intersection_type")

# 어노테이션이 없을 때의 암묵적 타입
IMPLICIT_TYPE = "any"


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _split_qualified(node: Node) -> tuple[Node, Node]:
    """한정 이름 노드를 (왼쪽, 오른쪽)으로 나눈다. 필드명이 없는 문법 버전도 처리한다."""
    left_field, right_field = _QUALIFIED_FIELDS[node.type]
    left = node.child_by_field_name(left_field)
    right = node.child_by_field_name(right_field)
    if left is None or right is None:
        named = node.named_children
        left, right = named[0], named[-1]
    return left, right


def extract_type_name(node: Node, source: bytes) -> str:
    """
    단순 또는 한정 타입 참조 노드를 점으로 이어진 이름으로 만든다.

    왼쪽 사슬을 따라 내려가며 오른쪽 조각을 모으고, 마지막에 뒤집어서
    왼쪽→오른쪽 순서로 이어붙인다. 재귀 없이 깊이와 무관하게 동작한다.

    예: A → "A", A.B.C.D → "A.B.C.D"
    """
    segments: list[str] = []
    current = node
    while current.type in _QUALIFIED_FIELDS:
        left, right = _split_qualified(current)
        segments.append(_text(right, source))
        current = left
    segments.append(_text(current, source))
    return ".".join(reversed(segments))


def resolve_keyword(node: Node, source: bytes) -> str | None:
    """
    내장 키워드 타입을 이름으로 매핑한다.

    predefined_type(string, number ...)은 노드 텍스트로,
    literal_type(null, undefined, "abc", 1 ...)은 안쪽 리터럴 노드의 종류로 찾는다.
    테이블에 없으면 None (오류가 아니라 허용되는 빈칸).
    """
    if node.type == "literal_type":
        literal = node.named_children[0] if node.named_children else node
        if literal.type in LITERAL_KEYWORDS:
            return KEYWORD_TYPES[literal.type]
        return None
    if node.type == "predefined_type":
        return KEYWORD_TYPES.get(_text(node, source))
    return KEYWORD_TYPES.get(node.type)


def resolve_type(node: Node, source: bytes) -> str | None:
    """유니온이 아닌 타입 노드 하나를 이름으로 해석한다."""
    if node.type in ("type_identifier", "identifier") or node.type in _QUALIFIED_FIELDS:
        return extract_type_name(node, source)
    if node.type == "generic_type":
        # 타입 인자는 무시하고 기본 이름만 사용 (List<T> → List)
        return extract_type_name(node.child_by_field_name("name"), source)
    if node.type == "parenthesized_type":
        return resolve_type(node.named_children[0], source)
    if node.type == "array_type":
        element = resolve_type(node.named_children[0], source)
        return f"{element}[]" if element else None
    return resolve_keyword(node, source)


def _flatten_composite(node: Node) -> list[Node]:
    """
    A | B | C 는 ((A | B) | C)처럼 왼쪽으로 중첩되므로 한 단계 목록으로 편다.
    """
    members: list[Node] = []
    for child in node.named_children:
        if child.type == "comment":
            continue
        if child.type == node.type:
            members.extend(_flatten_composite(child))
        else:
            members.append(child)
    return members


def extract_node_types(node: Node, source: bytes, field: str = "type") -> tuple[tuple[str | None, ...], ...]:
    """
    파라미터/프로퍼티/함수 노드의 타입 어노테이션을 대안 목록으로 변환한다.

    Args:
        node: 타입 어노테이션을 가진 노드
        source: 원본 소스 바이트
        field: 어노테이션 필드명 (함수 반환 타입은 "return_type")

    Returns:
        대안마다 원소 1개짜리 튜플. 예: string | number → (("string",), ("number",))
    """
    annotation = node.child_by_field_name(field)
    if annotation is None or not annotation.named_children:
        return ((IMPLICIT_TYPE,),)

    type_node = annotation.named_children[0]
    if type_node.type in _COMPOSITE_TYPES:
        return tuple((resolve_type(member, source),) for member in _flatten_composite(type_node))
    return ((resolve_type(type_node, source),),)
