import json
import logging
from typing import List, Optional, Sequence

from jsonschemac.context import GeneratorContext
from jsonschemac.model_generator import FieldShape, NestedValidation, TypeShape, ValidationRuleSet
from jsonschemac.schema import COMPLEX_KINDS, Kind

logger = logging.getLogger(__name__)

GO_SCALARS = {
    Kind.STRING: "string",
    Kind.INTEGER: "int",
    Kind.NUMBER: "float64",
    Kind.BOOLEAN: "bool",
}
GO_ANY = "interface{}"

# import path -> identifier whose presence in the body requires it
IMPORT_MARKERS = {
    "errors": "errors.New(",
    "fmt": "fmt.",
}

PRIMITIVE_NEW_FUNCS = [
    "func newString(s string) *string {\n\treturn &s\n}\n",
    "func newInt(i int) *int {\n\treturn &i\n}\n",
    "func newFloat(f float64) *float64 {\n\treturn &f\n}\n",
    "func newBool(b bool) *bool {\n\treturn &b\n}\n",
]


def go_field_type(field: FieldShape) -> str:
    if field.kind in COMPLEX_KINDS:
        return field.type_name
    return GO_SCALARS[field.kind]


def go_element_type(shape: TypeShape) -> str:
    if shape.element_kind in COMPLEX_KINDS:
        return shape.element_type
    return GO_SCALARS.get(shape.element_kind, GO_ANY)


def go_struct_tag(field: FieldShape) -> str:
    return f'`json:"{field.external_name},omitempty"`'


def go_comment(text: str) -> List[str]:
    if not text:
        return []
    return [f"// {line}".rstrip() for line in text.strip().splitlines()]


def align_columns(rows: Sequence[Sequence[str]]) -> List[str]:
    """Pad every column but the last to a common width, like gofmt does for struct fields."""
    if not rows:
        return []
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]) - 1)]
    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        cells.append(row[-1])
        lines.append(" ".join(cells))
    return lines


class GoGenerator:
    @staticmethod
    def src(ctx: GeneratorContext) -> str:
        """Go source for every generated type, without package clause and imports."""
        model = ctx.model

        decls: List[str] = []
        for _, shape in model.types:
            decls.append(GoGenerator.type_src(shape))
        for _, rules in model.validations:
            decls.append(GoGenerator.validate_src(rules))
        decls.extend(PRIMITIVE_NEW_FUNCS)

        logger.debug("rendered %d go declarations", len(decls))
        return "\n" + "\n".join(decls)

    @staticmethod
    def package_src(ctx: GeneratorContext, package: Optional[str] = None) -> str:
        body = GoGenerator.src(ctx)
        lines = [f"package {package or ctx.package}"]

        imports = GoGenerator.imports(body)
        if imports:
            lines += ["", "import ("]
            lines += [f'\t"{i}"' for i in imports]
            lines.append(")")

        return "\n".join(lines) + "\n" + body

    @staticmethod
    def imports(src: str) -> List[str]:
        # doc comments carry schema text, only code lines decide imports
        code = "\n".join(line for line in src.splitlines() if not line.lstrip().startswith("//"))
        return sorted(name for name, marker in IMPORT_MARKERS.items() if marker in code)

    @staticmethod
    def type_src(shape: TypeShape) -> str:
        lines = go_comment(shape.description)

        if shape.kind is Kind.OBJECT:
            rows = [
                (field.name, f"*{go_field_type(field)}", go_struct_tag(field))
                for field in shape.fields
            ]
            lines.append(f"type {shape.name} struct {{")
            lines += [f"\t{line}" for line in align_columns(rows)]
            lines.append("}")
        else:
            lines.append(f"type {shape.name} []{go_element_type(shape)}")

        return "\n".join(lines) + "\n"

    @staticmethod
    def validate_src(rules: ValidationRuleSet) -> str:
        lines = [
            f"func (t *{rules.name}) Validate() error {{",
            "\tif t == nil {",
            "\t\treturn nil",
            "\t}",
        ]

        for check in rules.required:
            lines += [
                f"\tif t.{check.field_name} == nil {{",
                f"\t\treturn errors.New({json.dumps(check.message)})",
                "\t}",
            ]

        lines += GoGenerator._nested_calls_src(rules.nested)

        if rules.elements is not None:
            lines += [
                "\tfor _, a := range *t {",
                "\t\terr := a.Validate()",
                "\t\tif err != nil {",
                "\t\t\treturn err",
                "\t\t}",
                "\t}",
            ]

        lines += ["\treturn nil", "}"]
        return "\n".join(lines) + "\n"

    @staticmethod
    def _nested_calls_src(calls: Sequence[NestedValidation]) -> List[str]:
        # the first call declares err, every later call reuses it
        lines: List[str] = []
        declared = False
        for call in calls:
            op = "=" if declared else ":="
            lines += [
                f"\terr {op} t.{call.field_name}.Validate()",
                "\tif err != nil {",
                "\t\treturn err",
                "\t}",
            ]
            declared = True
        return lines
