#!/usr/bin/env python3
"""Generate C++ Debug Adapter Protocol records from the DAP JSON schema."""

from __future__ import annotations

import argparse
import contextlib
import json
import pathlib
import shutil
import subprocess
import sys
import urllib.error
import urllib.request
from collections import Counter
from dataclasses import dataclass, field
from typing import TextIO

# fmt: off
CPP_KEYWORDS = {
    "alignas", "alignof", "and", "and_eq", "asm", "auto", "bitand", "bitor", "bool",
    "break", "case", "catch", "char", "char8_t", "char16_t", "char32_t", "class",
    "compl", "concept", "const", "consteval", "constexpr", "constinit", "const_cast",
    "continue", "co_await", "co_return", "co_yield", "decltype", "delete", "do",
    "double", "dynamic_cast", "else", "enum", "explicit", "export", "extern", "false",
    "float", "for", "friend", "goto", "if", "inline", "int", "long", "mutable",
    "namespace", "new", "noexcept", "not", "not_eq", "nullptr", "operator", "or",
    "or_eq", "private", "protected", "public", "register", "reinterpret_cast",
    "requires", "return", "short", "signed", "sizeof", "static", "static_assert",
    "static_cast", "struct", "switch", "template", "this", "thread_local", "throw",
    "true", "try", "typedef", "typeid", "typename", "union", "unsigned", "using",
    "virtual", "void", "volatile", "wchar_t", "while", "xor", "xor_eq",
}
# fmt: on

PRIMITIVE_TYPES = ("boolean", "string", "integer", "number", "object", "null")
ARRAY_TYPE = "array"
REF_PREFIX = "#/definitions/"

# The envelope and its three roles are declared by hand in HEADER_PROLOGUE.
RESERVED_NAMES = ("ProtocolMessage", "Request", "Response", "Event")
# Declared by HEADER_PROLOGUE, so references to them need no emission.
PROLOGUE_RECORDS = ("Request", "Response", "Event")

CATEGORY_REQUEST = "request"
CATEGORY_RESPONSE = "response"
CATEGORY_EVENT = "event"
CATEGORY_TYPES = "types"
CATEGORIES = (CATEGORY_REQUEST, CATEGORY_RESPONSE, CATEGORY_EVENT, CATEGORY_TYPES)
MESSAGE_CATEGORIES = (CATEGORY_REQUEST, CATEGORY_RESPONSE, CATEGORY_EVENT)

ROLE_CATEGORIES = {
    "Request": CATEGORY_REQUEST,
    "Response": CATEGORY_RESPONSE,
    "Event": CATEGORY_EVENT,
}
FIELD_SOURCE_PROPERTY = {"Request": "arguments", "Response": "body", "Event": "body"}
WIRE_TAG_PROPERTY = {"Request": "command", "Event": "event"}

SOURCE_TAG = "scripts/dap_codegen.py"
GENERATED_NAMESPACE = "dap"
DEFAULT_SCHEMA_URL = (
    "https://raw.githubusercontent.com/microsoft/vscode-debugadapter-node/"
    "main/debugProtocol.json"
)
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_FORMATTER = "clang-format"

HEADER_RELPATH = pathlib.Path("include/dap/protocol.h")
SOURCE_RELPATHS = {
    CATEGORY_REQUEST: pathlib.Path("src/protocol_requests.cpp"),
    CATEGORY_RESPONSE: pathlib.Path("src/protocol_response.cpp"),
    CATEGORY_EVENT: pathlib.Path("src/protocol_events.cpp"),
    CATEGORY_TYPES: pathlib.Path("src/protocol_types.cpp"),
}

NOTICE = f"""\
// Copyright 2026 The dap-codegen Authors
//
// Licensed under the Apache License, Version 2.0 (the "License");
// you may not use this file except in compliance with the License.
// You may obtain a copy of the License at
//
//     https://www.apache.org/licenses/LICENSE-2.0
//
// Unless required by applicable law or agreed to in writing, software
// distributed under the License is distributed on an "AS IS" BASIS,
// WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
// See the License for the specific language governing permissions and
// limitations under the License.

// Generated by {SOURCE_TAG}. DO NOT EDIT.
"""

HEADER_PROLOGUE = f"""\
{NOTICE}
#pragma once

#include "dap/optional.h"
#include "dap/typeinfo.h"
#include "dap/typeof.h"
#include "dap/variant.h"

#include <string>
#include <type_traits>
#include <vector>

namespace {GENERATED_NAMESPACE} {{

struct Request {{}};
struct Response {{}};
struct Event {{}};

"""

HEADER_EPILOGUE = f"}}  // namespace {GENERATED_NAMESPACE}\n"

SOURCE_PROLOGUE = f"""\
{NOTICE}
#include "dap/protocol.h"

namespace {GENERATED_NAMESPACE} {{

"""

SOURCE_EPILOGUE = f"}}  // namespace {GENERATED_NAMESPACE}\n"


class CodegenError(RuntimeError):
    def with_context(self, context: str) -> CodegenError:
        return type(self)(f"while processing {context}: {self}")


class SchemaFormatError(CodegenError):
    pass


class BuildError(CodegenError):
    pass


class UnknownReferenceError(BuildError):
    pass


class UnsupportedTypeError(BuildError):
    pass


class EmitError(CodegenError):
    pass


class MissingDependencyError(EmitError):
    pass


class DependencyCycleError(EmitError):
    pass


class SchemaSourceError(CodegenError):
    pass


class FormatterError(CodegenError):
    pass


# Type descriptors. Exactly one of these describes the shape of a property.


@dataclass(frozen=True)
class RefType:
    ref: str


@dataclass(frozen=True)
class PrimitiveType:
    name: str


@dataclass(frozen=True)
class ArrayType:
    items: TypeExpr | None


@dataclass(frozen=True)
class UnionType:
    items: tuple[TypeExpr, ...]


@dataclass(frozen=True)
class UnsupportedType:
    raw: object


TypeExpr = RefType | PrimitiveType | ArrayType | UnionType | UnsupportedType


@dataclass
class Property:
    name: str
    type_expr: TypeExpr
    description: str = ""
    properties: dict[str, Property] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    closed_enum: list[str] = field(default_factory=list)
    open_enum: list[str] = field(default_factory=list)


@dataclass
class Definition:
    type_tag: str | None = None
    title: str = ""
    description: str = ""
    properties: dict[str, Property] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    all_of: list[Definition] = field(default_factory=list)
    ref: str | None = None


@dataclass
class SchemaRoot:
    definitions: dict[str, Definition]
    title: str = ""
    description: str = ""

    def definitions_sorted(self) -> list[tuple[str, Definition]]:
        return sorted(self.definitions.items(), key=lambda item: item[0])

    def resolve_ref(self, ref: str) -> tuple[str, Definition]:
        if not ref.startswith(REF_PREFIX):
            raise UnknownReferenceError(f"unknown $ref {ref!r}")
        name = ref[len(REF_PREFIX) :]
        definition = self.definitions.get(name)
        if definition is None:
            raise UnknownReferenceError(f"unknown $ref {ref!r}")
        return name, definition


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    type_name: str
    optional: bool
    description: str = ""
    default_value: str | None = None


@dataclass(frozen=True)
class TypeAlias:
    name: str
    target: str


@dataclass(frozen=True)
class RecordDescriptor:
    name: str
    category: str
    wire_tag: str = ""
    base: str | None = None
    description: str = ""
    aliases: tuple[TypeAlias, ...] = ()
    fields: tuple[FieldDescriptor, ...] = ()
    dependencies: tuple[str, ...] = ()


def _expect_object(value: object, where: str) -> dict:
    if not isinstance(value, dict):
        raise SchemaFormatError(
            f"{where}: expected an object, got {type(value).__name__}"
        )
    return value


def _string_list(node: dict, key: str, where: str) -> list[str]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise SchemaFormatError(f"{where}.{key}: expected a list of strings")
    return list(value)


def _text(node: dict, key: str, where: str) -> str:
    value = node.get(key, "")
    if not isinstance(value, str):
        raise SchemaFormatError(f"{where}.{key}: expected a string")
    return value


def _ref(node: dict, where: str) -> str | None:
    ref = node.get("$ref")
    if ref is not None and not isinstance(ref, str):
        raise SchemaFormatError(f"{where}.$ref: expected a string")
    return ref


def parse_type(node: dict, where: str) -> TypeExpr:
    ref = _ref(node, where)
    if ref is not None:
        return RefType(ref)
    return _parse_type_value(node.get("type"), node.get("items"), where)


def _parse_type_value(value: object, items: object, where: str) -> TypeExpr:
    if isinstance(value, str):
        if value != ARRAY_TYPE:
            return PrimitiveType(value)
        if items is None:
            return ArrayType(None)
        where = f"{where}.items"
        return ArrayType(parse_type(_expect_object(items, where), where))

    # A list is the union form; its array entries share the node's `items`.
    if isinstance(value, list):
        return UnionType(tuple(_parse_type_value(v, items, where) for v in value))

    return UnsupportedType(value)


def parse_properties(value: object, where: str) -> dict[str, Property]:
    if value is None:
        return {}
    out: dict[str, Property] = {}
    for name, node in _expect_object(value, where).items():
        out[name] = parse_property(name, node, f"{where}.{name}")
    return out


def parse_property(name: str, node: object, where: str) -> Property:
    node = _expect_object(node, where)
    return Property(
        name=name,
        type_expr=parse_type(node, where),
        description=_text(node, "description", where),
        properties=parse_properties(node.get("properties"), f"{where}.properties"),
        required=_string_list(node, "required", where),
        closed_enum=_string_list(node, "enum", where),
        open_enum=_string_list(node, "_enum", where),
    )


def parse_definition(node: object, where: str) -> Definition:
    node = _expect_object(node, where)

    type_tag = node.get("type")
    if type_tag is not None and not isinstance(type_tag, str):
        raise SchemaFormatError(f"{where}.type: expected a string")

    all_of = node.get("allOf", [])
    if not isinstance(all_of, list):
        raise SchemaFormatError(f"{where}.allOf: expected a list")

    return Definition(
        type_tag=type_tag,
        title=_text(node, "title", where),
        description=_text(node, "description", where),
        properties=parse_properties(node.get("properties"), f"{where}.properties"),
        required=_string_list(node, "required", where),
        all_of=[
            parse_definition(entry, f"{where}.allOf[{index}]")
            for index, entry in enumerate(all_of)
        ],
        ref=_ref(node, where),
    )


def parse_schema(data: bytes) -> SchemaRoot:
    try:
        document = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise SchemaFormatError(f"utf-8 decode failed: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SchemaFormatError(f"invalid json: {exc}") from exc

    document = _expect_object(document, "schema")
    if "definitions" not in document:
        raise SchemaFormatError("schema: missing `definitions`")
    definitions = _expect_object(document["definitions"], "definitions")

    return SchemaRoot(
        definitions={
            name: parse_definition(node, f"definitions.{name}")
            for name, node in definitions.items()
        },
        title=_text(document, "title", "schema"),
        description=_text(document, "description", "schema"),
    )


def resolve_type(expr: TypeExpr, root: SchemaRoot) -> tuple[str, list[str]]:
    """Return the C++ type name for ``expr`` and the definitions it references."""
    if isinstance(expr, RefType):
        name, _ = root.resolve_ref(expr.ref)
        return name, [name]

    if isinstance(expr, PrimitiveType):
        if expr.name in PRIMITIVE_TYPES:
            return expr.name, []
        raise UnsupportedTypeError(f"unhandled property type {expr.name!r}")

    if isinstance(expr, ArrayType):
        if expr.items is None:
            return "array<any>", []
        element, refs = resolve_type(expr.items, root)
        return f"array<{element}>", refs

    if isinstance(expr, UnionType):
        names: list[str] = []
        union_refs: list[str] = []
        for item in expr.items:
            name, item_refs = resolve_type(item, root)
            names.append(name)
            union_refs.extend(item_refs)
        return f"variant<{', '.join(names)}>", union_refs

    if expr.raw is None:
        raise UnsupportedTypeError("no type specified")
    raise UnsupportedTypeError(
        f"unsupported type {expr.raw!r} kind: {type(expr.raw).__name__}"
    )


def response_name_for(request_name: str) -> str:
    if request_name.endswith("Request"):
        request_name = request_name[: -len("Request")]
    return f"{request_name}Response"


def enum_note(heading: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{heading} of the following enumeration values:\n{quoted}"


def unique_dependencies(owner: str, names: list[str]) -> tuple[str, ...]:
    out: list[str] = []
    for name in names:
        # Self references need no ordering; the type is complete by then.
        if name == owner or name in out:
            continue
        out.append(name)
    return tuple(out)


class RecordBuilder:
    def __init__(self, root: SchemaRoot):
        self.root = root

    def build(self) -> list[RecordDescriptor]:
        return [
            self.build_record(name, definition)
            for name, definition in self.root.definitions_sorted()
            if name not in RESERVED_NAMES
        ]

    def split_base(
        self, name: str, definition: Definition
    ) -> tuple[str | None, Definition]:
        if not definition.all_of or definition.all_of[0].ref is None:
            return None, definition

        try:
            base, _ = self.root.resolve_ref(definition.all_of[0].ref)
        except BuildError as exc:
            raise exc.with_context(f"{name}.allOf[0]") from exc
        if base not in ROLE_CATEGORIES:
            return None, definition
        if len(definition.all_of) > 2:
            raise UnsupportedTypeError(
                f"{name}: cannot handle allOf with more than 2 entries"
            )
        if len(definition.all_of) == 1:
            return base, Definition()
        return base, definition.all_of[1]

    def field_source(
        self, name: str, own: Definition, property_name: str
    ) -> tuple[dict[str, Property], list[str]]:
        prop = own.properties.get(property_name)
        if prop is None:
            return {}, []
        if isinstance(prop.type_expr, RefType):
            try:
                _, target = self.root.resolve_ref(prop.type_expr.ref)
            except BuildError as exc:
                raise exc.with_context(f"{name}.{property_name}") from exc
            return target.properties, target.required
        return prop.properties, prop.required

    @staticmethod
    def wire_tag(own: Definition, property_name: str) -> str:
        prop = own.properties.get(property_name)
        if prop is None or not prop.closed_enum:
            return ""
        return prop.closed_enum[0]

    @staticmethod
    def make_field(
        prop: Property, type_name: str, optional: bool
    ) -> FieldDescriptor:
        parts = [prop.description] if prop.description else []
        default_value: str | None = None
        if prop.closed_enum:
            parts.append(enum_note("Must be one", prop.closed_enum))
            if not optional:
                default_value = json.dumps(prop.closed_enum[0])
        if prop.open_enum:
            parts.append(enum_note("May be one", prop.open_enum))

        return FieldDescriptor(
            name=prop.name,
            type_name=type_name,
            optional=optional,
            description="\n\n".join(parts),
            default_value=default_value,
        )

    def build_record(self, name: str, definition: Definition) -> RecordDescriptor:
        base, own = self.split_base(name, definition)

        dependencies: list[str] = []
        aliases: list[TypeAlias] = []
        wire_tag = ""
        if base is None:
            properties, required = own.properties, own.required
            category = CATEGORY_TYPES
        else:
            properties, required = self.field_source(
                name, own, FIELD_SOURCE_PROPERTY[base]
            )
            if base in WIRE_TAG_PROPERTY:
                wire_tag = self.wire_tag(own, WIRE_TAG_PROPERTY[base])
            category = ROLE_CATEGORIES[base]

        if base == "Request":
            response = response_name_for(name)
            dependencies.append(response)
            aliases.append(TypeAlias(name="Response", target=response))

        fields: list[FieldDescriptor] = []
        for prop_name, prop in sorted(properties.items(), key=lambda item: item[0]):
            try:
                type_name, refs = resolve_type(prop.type_expr, self.root)
            except BuildError as exc:
                raise exc.with_context(f"{name}.{prop_name}") from exc
            dependencies.extend(refs)
            fields.append(
                self.make_field(prop, type_name, optional=prop_name not in required)
            )

        return RecordDescriptor(
            name=name,
            category=category,
            wire_tag=wire_tag,
            base=base,
            description=own.description or definition.description,
            aliases=tuple(aliases),
            fields=tuple(fields),
            dependencies=unique_dependencies(name, dependencies),
        )


def build_records(root: SchemaRoot) -> list[RecordDescriptor]:
    return RecordBuilder(root).build()


def member_identifier(name: str) -> str:
    text = name.strip("_")
    if text == "default":
        return "def"
    if text in CPP_KEYWORDS:
        return f"{text}_"
    return text


def append_comment(out: list[str], indent: str, text: str) -> None:
    for line in text.splitlines():
        line = line.rstrip()
        out.append(f"{indent}// {line}" if line else f"{indent}//")


def render_declaration(record: RecordDescriptor) -> str:
    lines: list[str] = []
    append_comment(lines, "", record.description)

    head = f"struct {record.name}"
    if record.base:
        head += f" : public {record.base}"
    lines.append(f"{head} {{")
    for alias in record.aliases:
        lines.append(f"  using {alias.name} = {alias.target};")
    if record.aliases:
        lines.append("")

    lines.append(f"  {record.name}();")
    lines.append(f"  ~{record.name}();")

    for fd in record.fields:
        lines.append("")
        append_comment(lines, "  ", fd.description)
        member = member_identifier(fd.name)
        if fd.optional:
            lines.append(f"  optional<{fd.type_name}> {member};")
        elif fd.default_value is not None:
            lines.append(f"  {fd.type_name} {member} = {fd.default_value};")
        else:
            lines.append(f"  {fd.type_name} {member};")

    lines.append("};")
    lines.append("")
    lines.append(f"DAP_DECLARE_STRUCT_TYPEINFO({record.name});")
    return "\n".join(lines) + "\n\n"


def render_definition(record: RecordDescriptor) -> str:
    indent = " " * len("DAP_IMPLEMENT_STRUCT_TYPEINFO(")
    entries = [json.dumps(record.wire_tag)]
    entries.extend(
        f"DAP_FIELD({member_identifier(fd.name)}, {json.dumps(fd.name)})"
        for fd in record.fields
    )

    lines = [
        f"{record.name}::{record.name}() = default;",
        f"{record.name}::~{record.name}() = default;",
        f"DAP_IMPLEMENT_STRUCT_TYPEINFO({record.name},",
    ]
    for index, entry in enumerate(entries):
        terminator = ");" if index + 1 == len(entries) else ","
        lines.append(f"{indent}{entry}{terminator}")
    return "\n".join(lines) + "\n\n"


def emit_records(
    records: list[RecordDescriptor],
    header: TextIO,
    sources: dict[str, TextIO],
) -> int:
    """Write every message record, dependencies first, and return the count.

    Shared types are only written when some message record reaches them.
    """
    missing = [category for category in CATEGORIES if category not in sources]
    if missing:
        raise EmitError(f"no output stream for categories: {', '.join(missing)}")

    header.write(HEADER_PROLOGUE)
    for category in CATEGORIES:
        sources[category].write(SOURCE_PROLOGUE)

    by_name = {record.name: record for record in records}
    visited: set[str] = set()
    in_progress: list[str] = []

    def emit(record: RecordDescriptor) -> None:
        if record.name in visited:
            return
        if record.name in in_progress:
            start = in_progress.index(record.name)
            cycle = " -> ".join([*in_progress[start:], record.name])
            raise DependencyCycleError(f"dependency cycle: {cycle}")

        in_progress.append(record.name)
        for dep in record.dependencies:
            if dep in PROLOGUE_RECORDS:
                continue
            target = by_name.get(dep)
            if target is None:
                raise MissingDependencyError(
                    f"{record.name} depends on {dep!r}, which is not a generated record"
                )
            emit(target)
        in_progress.pop()

        visited.add(record.name)
        header.write(render_declaration(record))
        sources[record.category].write(render_definition(record))

    try:
        for record in records:
            if record.category in MESSAGE_CATEGORIES:
                emit(record)
    except RecursionError as exc:
        raise EmitError(
            f"dependency chain too deep while emitting {in_progress[0]}"
        ) from exc

    header.write(HEADER_EPILOGUE)
    for category in CATEGORIES:
        sources[category].write(SOURCE_EPILOGUE)

    return len(visited)


@dataclass
class OutputPaths:
    header: pathlib.Path
    sources: dict[str, pathlib.Path]

    def all_files(self) -> list[pathlib.Path]:
        return [self.header, *(self.sources[category] for category in CATEGORIES)]


def default_output_paths(output_dir: pathlib.Path) -> OutputPaths:
    return OutputPaths(
        header=output_dir / HEADER_RELPATH,
        sources={
            category: output_dir / relpath
            for category, relpath in SOURCE_RELPATHS.items()
        },
    )


def open_sink(stack: contextlib.ExitStack, path: pathlib.Path) -> TextIO:
    path.parent.mkdir(parents=True, exist_ok=True)
    return stack.enter_context(path.open("w", encoding="utf-8", newline="\n"))


def generate_protocol(schema: bytes, paths: OutputPaths) -> dict[str, object]:
    root = parse_schema(schema)
    records = build_records(root)

    with contextlib.ExitStack() as stack:
        header = open_sink(stack, paths.header)
        sources = {
            category: open_sink(stack, paths.sources[category])
            for category in CATEGORIES
        }
        emitted = emit_records(records, header, sources)

    counts = Counter(record.category for record in records)
    return {
        "definition_count": len(root.definitions),
        "record_counts": {category: counts[category] for category in CATEGORIES},
        "emitted_count": emitted,
        "output_files": [str(path) for path in paths.all_files()],
    }


def load_schema(
    url: str,
    cache: pathlib.Path | None = None,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> bytes:
    if cache is not None and cache.is_file():
        return cache.read_bytes()

    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            payload = response.read()
    except (urllib.error.URLError, ValueError) as exc:
        raise SchemaSourceError(f"download failed: {exc}") from exc

    if cache is not None:
        cache.parent.mkdir(parents=True, exist_ok=True)
        cache.write_bytes(payload)
    return payload


def format_files(
    paths: list[pathlib.Path], formatter: str = DEFAULT_FORMATTER
) -> bool:
    executable = shutil.which(formatter)
    if executable is None:
        print(f"[format] {formatter} not found on PATH, skipping")
        return False

    for path in paths:
        try:
            subprocess.run(
                [executable, "-i", str(path)],
                check=True,
                capture_output=True,
                text=True,
            )
        except (subprocess.CalledProcessError, OSError) as exc:
            raise FormatterError(f"{formatter} failed on {path}: {exc}") from exc
        print(f"[format] {path}")
    return True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate C++ DAP protocol records from the DAP JSON schema"
    )
    parser.add_argument(
        "--cache",
        type=pathlib.Path,
        default=None,
        help="File cache of the JSON schema; downloaded when missing",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_SCHEMA_URL,
        help="Schema download URL (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        type=pathlib.Path,
        default=pathlib.Path("."),
        help="Root for include/dap/protocol.h and src/protocol_*.cpp (default: %(default)s)",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help=f"Do not run {DEFAULT_FORMATTER} on the generated files",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        schema = load_schema(args.url, cache=args.cache)
    except (SchemaSourceError, OSError) as exc:
        print(f"[fetch_schema] {exc}", file=sys.stderr)
        return 1
    source = args.cache if args.cache is not None else args.url
    print(f"[fetch_schema] loaded {len(schema)} bytes from {source}")

    paths = default_output_paths(args.output_dir)
    try:
        summary = generate_protocol(schema, paths)
        if not args.no_format:
            format_files(paths.all_files())
    except (CodegenError, OSError) as exc:
        print(f"[codegen] error: {exc}", file=sys.stderr)
        return 1

    counts: dict[str, int] = summary["record_counts"]  # type: ignore[assignment]
    print(f"[codegen] definitions={summary['definition_count']}")
    print(
        "[codegen] records="
        + " ".join(f"{category}={counts[category]}" for category in CATEGORIES)
    )
    print(f"[codegen] emitted={summary['emitted_count']}")
    for path in summary["output_files"]:  # type: ignore[union-attr]
        print(f"[codegen] wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
