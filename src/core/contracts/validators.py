"""
JSON Schema контракты текстовой записи BigInt

Две схемы в contracts/schema/:
- big_int_literal: вход BigInt.from_text, грамматика ['-'] digit+
- big_int_canonical: выход str(BigInt), без ведущих нулей и без "-0"

Схемы проходят meta-validation (Draft 2020-12) при первой загрузке.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator

# contracts/schema/ в корне проекта
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

LITERAL_SCHEMA: Final[str] = "big_int_literal"
CANONICAL_SCHEMA: Final[str] = "big_int_canonical"


class SchemaLoader:
    """Чтение и кэширование схем из каталога (по умолчанию SCHEMA_DIR)."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: нет файла <schema_name>.json
            ValueError: схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


class ContractValidator:
    """Проверка текстовой записи против одной из схем BigInt."""

    schema_name: str = LITERAL_SCHEMA

    def __init__(self):
        self.validator = Draft202012Validator(_SCHEMA_LOADER.load_schema(self.schema_name))

    def validate(self, text: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое нарушение контракта
        """
        self.validator.validate(text)

    def is_valid(self, text: Any) -> bool:
        return self.validator.is_valid(text)

    def iter_errors(self, text: Any) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(text)


class BigIntLiteralValidator(ContractValidator):
    schema_name = LITERAL_SCHEMA


class BigIntCanonicalValidator(ContractValidator):
    schema_name = CANONICAL_SCHEMA


def validate_big_int_literal(text: Any) -> None:
    """Литерал соответствует грамматике ['-'] digit+."""
    BigIntLiteralValidator().validate(text)


def validate_big_int_canonical(text: Any) -> None:
    """Запись каноническая (например, результат str(BigInt))."""
    BigIntCanonicalValidator().validate(text)
