"""
JSON Schema Contract Validators

Модуль для валидации payload инструкций и записей Launch согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (core/contracts/schema/):
- initialize_launch.json
- buy_tokens.json
- launch.json
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from meme_launcher.core.domain.errors import InvalidInstruction


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'buy_tokens')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema и перевод
    ошибок схемы в таксономию launch (InvalidInstruction).
    """

    def __init__(self, schema_name: str):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Данные для валидации (dict)

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """
        Проверка валидности данных без exception.

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def collect_errors(self, data: Dict[str, Any]) -> List[ValidationError]:
        """
        Все ошибки валидации, упорядоченные по пути поля.

        Порядок детерминирован: одинаковый payload всегда даёт одинаковое
        сообщение InvalidInstruction.
        """
        return sorted(
            self.validator.iter_errors(data),
            key=lambda e: [str(p) for p in e.absolute_path],
        )

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Ошибки валидации в виде строк "<путь>: <сообщение>".

        Корень payload обозначается как <root>.
        """
        return [_describe(e) for e in self.collect_errors(data)]

    def require(self, data: Dict[str, Any]) -> None:
        """
        Валидация payload инструкции.

        В отличие от validate(), сообщает все ошибки схемы одним
        InvalidInstruction; исходная ValidationError сохраняется в __cause__.

        Raises:
            InvalidInstruction: Если данные не соответствуют схеме
        """
        errors = self.collect_errors(data)
        if errors:
            details = "; ".join(_describe(e) for e in errors)
            raise InvalidInstruction(f"{self.schema_name}: {details}") from errors[0]


def _describe(error: ValidationError) -> str:
    path = ".".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


class InitializeLaunchValidator(ContractValidator):
    def __init__(self):
        super().__init__("initialize_launch")


class BuyTokensValidator(ContractValidator):
    def __init__(self):
        super().__init__("buy_tokens")


class LaunchRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("launch")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_initialize_launch(data: Dict[str, Any]) -> None:
    """
    Валидация payload initialize_launch.

    Raises:
        InvalidInstruction: Если данные не соответствуют схеме
    """
    InitializeLaunchValidator().require(data)


def validate_buy_tokens(data: Dict[str, Any]) -> None:
    """
    Валидация payload buy_tokens.

    Raises:
        InvalidInstruction: Если данные не соответствуют схеме
    """
    BuyTokensValidator().require(data)


def validate_launch_record(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной записи Launch.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LaunchRecordValidator().validate(data)
