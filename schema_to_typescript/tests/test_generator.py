"""
Tests for the schema compiler driver in both declaration modes.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from schema_to_typescript import CompilerConfig, DeclarationMode, SchemaCompiler, compile_schemas
from schema_to_typescript.pipeline.errors import DuplicateSchemaError, UnresolvedSchemaError, UnresolvedTableError
from schema_to_typescript.pipeline.schema_ast import load_document, load_schemas
from schema_to_typescript.transforms import TRANSFORMS

TEST_DATA = Path(__file__).parent / "test_data"

CLASS_TRANSFORMER_IMPORT = 'import { ClassConstructor, Transform, Type, plainToInstance } from "class-transformer";'
CLASS_VALIDATOR_IMPORT = (
    'import { IsNotEmpty, IsNumber, IsObject, IsBoolean, IsOptional, IsISO8601, IsString, IsEnum, '
    'ValidateNested, IsArray, ValidationError, validateOrReject } from "class-validator";'
)


def field(key, type_, required=False, array=False):
    return {"key": key, "required": required, "array": array, "type": type_}


def native(kind):
    return {"type": "native", "native_type": kind}


def load_model():
    with open(TEST_DATA / "model.json") as f:
        return load_document(json.load(f))


def member_lines(content: str) -> list[str]:
    """Member declarations of the rendered declaration, without decorators."""
    body = content.split(" {\n", 1)[1].rsplit("\n}", 1)[0]
    return [line.strip() for line in body.splitlines() if not line.strip().startswith("@")]


class TestScenarios:
    def test_user_class(self):
        schemas = load_schemas(
            [
                {
                    "name": "User",
                    "items": [
                        field("id", native("number"), required=True),
                        field("roles", {"type": "enum", "enum_name": "Role"}, array=True),
                    ],
                }
            ]
        )
        output = compile_schemas(schemas, {})

        assert [f.filename for f in output.files] == ["./ts-schema/User.ts"]
        assert output.map == {"User": "./ts-schema/User"}

        expected = "\n".join(
            [
                "",
                CLASS_TRANSFORMER_IMPORT,
                CLASS_VALIDATOR_IMPORT,
                "",
                "export class User {",
                "  @IsNotEmpty({ message: 'id cannot be empty' })",
                f"  @Transform({TRANSFORMS['decimal'].typescript})",
                "  @IsNumber({}, { message: 'id must be a number (decimal)' })",
                "  id!: number",
                "  @IsOptional()",
                "  @IsEnum(Role, { message: 'roles must be enum Role', each: true })",
                "  roles?: Role[]",
                "}",
            ]
        )
        assert output.files[0].content == expected

    def test_order_with_missing_table_fails(self):
        schemas = load_schemas([{"name": "Order", "items": [field("product", {"type": "table", "table_name": "Product"})]}])
        with pytest.raises(UnresolvedTableError) as exc_info:
            compile_schemas(schemas, {})
        assert "Product" in str(exc_info.value)
        assert "Order.product" in str(exc_info.value)


class TestInterfaceMode:
    def test_exact_render(self):
        schemas = load_schemas(
            [
                {
                    "name": "Order",
                    "items": [
                        field("id", native("number"), required=True),
                        field("product", {"type": "table", "table_name": "Product"}),
                    ],
                }
            ]
        )
        output = compile_schemas(schemas, {"Product": "./ts-model/table/Product"}, mode="interface")

        assert output.files[0].content == "\n".join(
            [
                "import { Product } from '../ts-model/table/Product'",
                "",
                "export interface Order {",
                "  id: number",
                "  product?: Product",
                "}",
            ]
        )

    def test_no_decorators_or_library_imports(self):
        schemas, tables = load_model()
        output = compile_schemas(schemas, tables, mode=DeclarationMode.INTERFACE)
        for file in output.files:
            assert "@" not in file.content
            assert "class-validator" not in file.content


class TestCompilation:
    def test_one_file_per_schema_in_input_order(self):
        schemas, tables = load_model()
        output = compile_schemas(schemas, tables)
        assert [f.filename for f in output.files] == ["./ts-schema/User.ts", "./ts-schema/Order.ts"]
        assert list(output.map) == ["User", "Order"]

    def test_map_paths_match_imports(self):
        schemas, tables = load_model()
        output = compile_schemas(schemas, tables)
        order = output.files[1].content

        imported = dict(re.findall(r"^import \{ (\w+) \} from '\.(.+)'$", order, re.MULTILINE))
        assert imported == {"User": output.map["User"], "Product": tables["Product"]}

    def test_imports_come_first_in_field_order(self):
        schemas, tables = load_model()
        lines = compile_schemas(schemas, tables).files[1].content.splitlines()
        assert lines[:3] == [
            "import { User } from '../ts-schema/User'",
            "import { Product } from '../ts-model/table/Product'",
            "",
        ]

    def test_members_keep_field_order(self):
        schemas, tables = load_model()
        content = compile_schemas(schemas, tables).files[1].content
        assert member_lines(content) == ["code!: string", "buyer!: User", "products?: Product[]", "paid?: boolean"]

    def test_type_text_is_identical_across_modes(self):
        schemas, tables = load_model()
        annotated = compile_schemas(schemas, tables, mode="class")
        plain = compile_schemas(schemas, tables, mode="interface")

        def types(content):
            return [line.split(": ", 1)[1] for line in member_lines(content)]

        for a, p in zip(annotated.files, plain.files):
            assert types(a.content) == types(p.content)

    def test_optional_number_array(self):
        schemas = load_schemas([{"name": "Stats", "items": [field("scores", native("number"), array=True)]}])
        content = compile_schemas(schemas, {}).files[0].content
        assert "  scores?: number[]" in content
        assert f"  @Transform({TRANSFORMS['array_decimal'].typescript})" in content
        assert "@IsNumber({}, { message: 'scores must be a number (decimal)', each: true })" in content
        assert "@IsOptional()" in content
        assert "@IsNotEmpty" not in content

    def test_nested_schema_array(self):
        schemas = load_schemas(
            [
                {"name": "Line", "items": [field("qty", native("number"), required=True)]},
                {"name": "Cart", "items": [field("lines", {"type": "schema", "schema_name": "Line"}, required=True, array=True)]},
            ]
        )
        content = compile_schemas(schemas, {}).files[1].content
        assert "  @IsArray()\n  @ValidateNested({ each: true })\n  @Type(() => Line)\n  lines!: Line[]" in content

    def test_empty_universe(self):
        output = compile_schemas([], {})
        assert output.files == []
        assert output.map == {}

    def test_schema_without_fields(self):
        output = compile_schemas(load_schemas([{"name": "Empty", "items": []}]), {}, mode="interface")
        assert output.files[0].content == "\nexport interface Empty {\n}"


class TestFailFast:
    def test_missing_schema_aborts_everything(self):
        schemas = load_schemas(
            [
                {"name": "User", "items": [field("id", native("number"))]},
                {"name": "Order", "items": [field("buyer", {"type": "schema", "schema_name": "Customer"})]},
            ]
        )
        compiler = SchemaCompiler()
        with pytest.raises(UnresolvedSchemaError, match='"Customer"'):
            compiler.compile(schemas, {})

    def test_first_unresolved_reference_is_reported(self):
        schemas = load_schemas(
            [
                {"name": "A", "items": [field("b", {"type": "schema", "schema_name": "B"})]},
                {"name": "C", "items": [field("d", {"type": "table", "table_name": "D"})]},
            ]
        )
        with pytest.raises(UnresolvedSchemaError) as exc_info:
            compile_schemas(schemas, {})
        assert exc_info.value.missing_name == "B"


class TestDuplicateNames:
    SCHEMAS = [
        {"name": "User", "items": [field("id", native("number"))]},
        {"name": "User", "items": [field("name", native("string"))]},
    ]

    def test_duplicates_are_rejected_by_default(self):
        with pytest.raises(DuplicateSchemaError, match='"User"'):
            compile_schemas(load_schemas(self.SCHEMAS), {})

    def test_duplicates_allowed_keep_last_map_entry(self):
        config = CompilerConfig(allow_duplicate_names=True)
        output = SchemaCompiler(config).compile(load_schemas(self.SCHEMAS), {})
        assert len(output.files) == 2
        assert output.map == {"User": "./ts-schema/User"}


class TestConfig:
    def test_custom_subdirectory_and_extension(self):
        config = CompilerConfig(output_subdirectory="dto", file_extension=".d.ts")
        schemas = load_schemas(
            [
                {"name": "A", "items": []},
                {"name": "B", "items": [field("a", {"type": "schema", "schema_name": "A"})]},
            ]
        )
        output = SchemaCompiler(config).compile(schemas, {})
        assert output.files[1].filename == "./dto/B.d.ts"
        assert output.map["A"] == "./dto/A"
        assert output.files[1].content.startswith("import { A } from '../dto/A'\n")

    def test_custom_indent(self):
        config = CompilerConfig(mode=DeclarationMode.INTERFACE, indent="    ")
        output = SchemaCompiler(config).compile(load_schemas([{"name": "A", "items": [field("x", native("string"))]}]), {})
        assert "\n    x?: string\n" in output.files[0].content

    def test_round_trip(self):
        config = CompilerConfig.from_dict({"mode": "interface", "indent": "\t", "unknown_option": 1})
        assert config.mode is DeclarationMode.INTERFACE
        assert config.indent == "\t"
        assert not hasattr(config, "unknown_option")
        assert CompilerConfig.from_dict(config.to_dict()) == config

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            CompilerConfig.from_dict({"mode": "struct"})
