"""
데이터 모델 모듈.

tree-sitter AST에서 추출된 선언 메타데이터를 표현하는 모델을 정의한다.
모든 모델은 frozen이므로 한 번 만들어지면 바뀌지 않고, 구조적 동등성(==)으로 비교된다.

데이터 흐름:
    TypeScript 소스 →[파싱]→ StructureEntry 리스트 →[렌더링]→ Markdown
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

# 하나의 타입 대안(유니온 멤버). 실제로는 항상 원소 1개짜리 튜플이다.
# 해석할 수 없는 키워드 타입은 None으로 남는다.
TypeAlternative = tuple[str | None, ...]

EntryKind = Literal["Interface", "Class", "Function"]


class FieldMeta(BaseModel):
    """
    이름과 타입을 가진 멤버 하나(프로퍼티 또는 파라미터)의 메타데이터.

    types는 유니온 대안의 목록이다:
        id: string           → (("string",),)
        key: string | number → (("string",), ("number",))
    """

    model_config = ConfigDict(frozen=True)

    name: str
    optional: bool = False                    # ? 표식 여부
    types: tuple[TypeAlternative, ...]        # 비어 있지 않음
    comments: tuple[str, ...] = ()            # 앞쪽 주석 문단 (먼저 나온 순서)


class ConstructorMeta(BaseModel):
    """클래스 생성자의 파라미터와 생성자 바로 앞 주석."""

    model_config = ConfigDict(frozen=True)

    params: tuple[FieldMeta, ...] = ()
    comments: tuple[str, ...] = ()


class InterfaceMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    props: tuple[FieldMeta, ...] = ()


class ClassMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    constructor_meta: ConstructorMeta | None = None
    props: tuple[FieldMeta, ...] = ()


class FunctionMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[FieldMeta, ...] = ()
    return_types: tuple[TypeAlternative, ...]


DeclarationMeta = InterfaceMeta | ClassMeta | FunctionMeta


class StructureEntry(BaseModel):
    """
    추출 결과의 한 항목: (종류, 메타데이터) 쌍.

    StructureExtractor가 소스를 위에서 아래로 순회하며 만난 순서대로 생성한다.
    """

    model_config = ConfigDict(frozen=True)

    kind: EntryKind
    meta: DeclarationMeta
