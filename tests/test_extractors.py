"""선언 구조 추출 테스트."""

import pytest

from typejuice.models import (
    ClassMeta,
    ConstructorMeta,
    FieldMeta,
    FunctionMeta,
    InterfaceMeta,
)
from typejuice.parsing.extractors import UnsupportedContainerError


def _kinds_and_names(entries):
    return [(entry.kind, entry.meta.name) for entry in entries]


class TestStructureWalker:
    def test_source_order(self, extract):
        entries = extract(
            "function first(): void {}\n"
            "interface Second { a: string; }\n"
            "class Third {}\n"
            "function fourth(): string { return ''; }\n"
        )
        assert _kinds_and_names(entries) == [
            ("Function", "first"),
            ("Interface", "Second"),
            ("Class", "Third"),
            ("Function", "fourth"),
        ]

    def test_namespace_members_are_flattened_in_place(self, extract):
        """네임스페이스 이름은 결과에 남지 않고, 멤버가 그 위치에 펼쳐진다."""
        entries = extract(
            "interface Before { a: string; }\n"
            "namespace Group {\n"
            "  export class Inside {}\n"
            "  namespace Deeper {\n"
            "    export function deepest(): void {}\n"
            "  }\n"
            "}\n"
            "interface After { b: string; }\n"
        )
        assert _kinds_and_names(entries) == [
            ("Interface", "Before"),
            ("Class", "Inside"),
            ("Function", "deepest"),
            ("Interface", "After"),
        ]
        assert all(entry.meta.name not in ("Group", "Deeper") for entry in entries)

    def test_declare_namespace_and_module(self, extract):
        entries = extract(
            "declare namespace Api {\n"
            "  interface Request { url: string; }\n"
            "}\n"
            "declare module 'legacy' {\n"
            "  export function load(): void;\n"
            "}\n"
            "declare global {\n"
            "  interface Window { app: object; }\n"
            "}\n"
        )
        assert _kinds_and_names(entries) == [
            ("Interface", "Request"),
            ("Function", "load"),
            ("Interface", "Window"),
        ]

    def test_exported_and_ambient_declarations(self, extract):
        entries = extract(
            "export interface Exported { a: string; }\n"
            "declare class Ambient {}\n"
            "export declare function both(): void;\n"
        )
        assert _kinds_and_names(entries) == [
            ("Interface", "Exported"),
            ("Class", "Ambient"),
            ("Function", "both"),
        ]

    def test_anonymous_default_exports_are_named_default(self, extract):
        entries = extract(
            "export default class {\n"
            "  // Shown in the title bar.\n"
            "  title: string;\n"
            "}\n"
            "export default function (a: string, b?: number): void {}\n"
            "export default 42;\n"
        )
        assert _kinds_and_names(entries) == [("Class", "default"), ("Function", "default")]
        title = entries[0].meta.props[0]
        assert (title.name, title.comments) == ("title", ("Shown in the title bar.",))
        assert [(param.name, param.optional) for param in entries[1].meta.params] == [
            ("a", False),
            ("b", True),
        ]

    def test_other_statements_are_ignored(self, extract):
        entries = extract(
            "import { x } from './x';\n"
            "type Alias = string;\n"
            "enum Color { Red }\n"
            "const value = 1;\n"
            "interface Kept { a: string; }\n"
        )
        assert _kinds_and_names(entries) == [("Interface", "Kept")]

    def test_non_container_node_is_rejected(self, ts_parser, extractor):
        source = b"interface Foo { a: string; }\n"
        tree = ts_parser.parse_source(source)
        interface_node = tree.root_node.named_children[0]
        with pytest.raises(UnsupportedContainerError):
            extractor.extract_structure(interface_node, source)

    def test_extraction_is_deterministic(self, fixtures_dir, ts_parser, extractor):
        tree, source = ts_parser.parse_file(fixtures_dir / "client.d.ts")
        first = extractor.extract(tree, source)
        tree, source = ts_parser.parse_file(fixtures_dir / "client.d.ts")
        second = extractor.extract(tree, source)
        assert first == second


class TestInterfaceExtraction:
    def test_property_signatures_only(self, extract):
        entries = extract(
            "interface Service {\n"
            "  name: string;\n"
            "  start(): void;\n"
            "  [key: string]: unknown;\n"
            "  port?: number;\n"
            "}\n"
        )
        meta = entries[0].meta
        assert isinstance(meta, InterfaceMeta)
        assert [prop.name for prop in meta.props] == ["name", "port"]

    def test_optional_marker(self, extract):
        entries = extract("interface Flags { required: boolean; maybe?: boolean; }\n")
        required, maybe = entries[0].meta.props
        assert required.optional is False
        assert maybe.optional is True

    def test_field_meta(self, fixtures_dir, ts_parser, extractor):
        tree, source = ts_parser.parse_file(fixtures_dir / "client.d.ts")
        options = extractor.extract(tree, source)[0].meta
        assert options.name == "RequestOptions"
        assert options.props == (
            FieldMeta(
                name="timeout",
                optional=True,
                types=(("number",),),
                comments=("Request timeout in milliseconds.",),
            ),
            FieldMeta(
                name="body",
                optional=False,
                types=(("string",), ("object",), ("null",)),
                comments=("Payload sent as the request body, serialized as JSON.",),
            ),
        )


class TestClassExtraction:
    def test_constructor_and_properties(self, fixtures_dir, ts_parser, extractor):
        tree, source = ts_parser.parse_file(fixtures_dir / "client.d.ts")
        meta = extractor.extract(tree, source)[1].meta
        assert isinstance(meta, ClassMeta)
        assert meta.name == "Client"
        assert meta.constructor_meta == ConstructorMeta(
            params=(
                FieldMeta(name="host", types=(("string",),)),
                FieldMeta(name="port", optional=True, types=(("number",),)),
            ),
            comments=(
                "Create a new client.",
                "Connections are opened lazily on the first request.",
            ),
        )
        assert [prop.name for prop in meta.props] == ["baseUrl", "retries"]
        assert meta.props[0].comments == ("Base URL every request is resolved against.",)
        assert meta.props[1].optional is True

    def test_constructor_with_body(self, extract):
        entries = extract(
            "class Point {\n"
            "  x: number;\n"
            "  y: number;\n"
            "\n"
            "  // Build a point.\n"
            "  constructor(x: number, y?: number) {\n"
            "    this.x = x;\n"
            "    this.y = y ?? 0;\n"
            "  }\n"
            "\n"
            "  length(): number { return 0; }\n"
            "}\n"
        )
        meta = entries[0].meta
        assert meta.constructor_meta.comments == ("Build a point.",)
        assert [param.name for param in meta.constructor_meta.params] == ["x", "y"]
        assert meta.constructor_meta.params[1].optional is True
        assert [prop.name for prop in meta.props] == ["x", "y"]

    def test_class_without_constructor(self, extract):
        meta = extract("class Empty { label: string; }\n")[0].meta
        assert meta.constructor_meta is None
        assert [prop.name for prop in meta.props] == ["label"]


class TestFunctionExtraction:
    def test_params_and_return_types(self, fixtures_dir, ts_parser, extractor):
        tree, source = ts_parser.parse_file(fixtures_dir / "client.d.ts")
        connect = extractor.extract(tree, source)[2].meta
        assert isinstance(connect, FunctionMeta)
        assert connect.name == "connect"
        assert [(param.name, param.optional) for param in connect.params] == [
            ("url", False),
            ("options", True),
        ]
        assert connect.params[1].types == (("RequestOptions",),)
        assert connect.return_types == (("Client",), ("null",))

    def test_function_without_params(self, extract):
        meta = extract("function now(): number { return 0; }\n")[0].meta
        assert meta.params == ()
        assert meta.return_types == (("number",),)

    def test_missing_return_type_is_implicit_any(self, extract):
        meta = extract("function noop() {}\n")[0].meta
        assert meta.return_types == (("any",),)
