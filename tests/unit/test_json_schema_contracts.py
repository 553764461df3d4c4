"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных payload
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/max/additionalProperties)
- Интеграция с Pydantic моделью Launch
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from meme_launcher.core.contracts import (
    BuyTokensValidator,
    InitializeLaunchValidator,
    LaunchRecordValidator,
    SchemaLoader,
    validate_buy_tokens,
    validate_initialize_launch,
    validate_launch_record,
)
from meme_launcher.core.domain import InvalidInstruction, Launch
from meme_launcher.core.math import U64_MAX


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_initialize_payload():
    return {
        "name": "Doge2",
        "symbol": "DOGE2",
        "initial_supply": 1_000_000,
        "curve_ratio": 10,
    }


@pytest.fixture
def valid_buy_payload():
    return {"launch_id": "launch-1", "amount": 100}


@pytest.fixture
def valid_launch_record():
    return {
        "launch_id": "launch-1",
        "creator": "creator",
        "mint": "mint-1",
        "name": "Doge2",
        "symbol": "DOGE2",
        "initial_supply": 1_000_000,
        "total_supply": 1_000_100,
        "curve_ratio": 10,
        "is_active": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    @pytest.mark.parametrize("schema_name", ["initialize_launch", "buy_tokens", "launch"])
    def test_schemas_are_valid(self, schema_name) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == schema_name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("launch") is loader.load_schema("launch")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# INSTRUCTION PAYLOADS
# =============================================================================


class TestInitializeLaunchContract:
    def test_valid(self, valid_initialize_payload) -> None:
        validate_initialize_launch(valid_initialize_payload)
        assert InitializeLaunchValidator().is_valid(valid_initialize_payload)

    def test_missing_required(self, valid_initialize_payload) -> None:
        del valid_initialize_payload["curve_ratio"]
        with pytest.raises(InvalidInstruction, match="curve_ratio"):
            validate_initialize_launch(valid_initialize_payload)

    def test_symbol_too_long(self, valid_initialize_payload) -> None:
        valid_initialize_payload["symbol"] = "TOOLONGSYM"
        with pytest.raises(InvalidInstruction, match="symbol"):
            validate_initialize_launch(valid_initialize_payload)

    def test_supply_above_u64(self, valid_initialize_payload) -> None:
        valid_initialize_payload["initial_supply"] = U64_MAX + 1
        with pytest.raises(InvalidInstruction, match="initial_supply"):
            validate_initialize_launch(valid_initialize_payload)

    def test_negative_ratio(self, valid_initialize_payload) -> None:
        valid_initialize_payload["curve_ratio"] = -1
        assert not InitializeLaunchValidator().is_valid(valid_initialize_payload)

    def test_unknown_field(self, valid_initialize_payload) -> None:
        valid_initialize_payload["fee_bps"] = 100
        with pytest.raises(InvalidInstruction):
            validate_initialize_launch(valid_initialize_payload)

    def test_error_chained_from_schema_error(self, valid_initialize_payload) -> None:
        valid_initialize_payload["name"] = 42
        with pytest.raises(InvalidInstruction) as exc_info:
            validate_initialize_launch(valid_initialize_payload)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.code == "invalid_instruction"


class TestBuyTokensContract:
    def test_valid(self, valid_buy_payload) -> None:
        validate_buy_tokens(valid_buy_payload)

    def test_zero_amount_allowed(self, valid_buy_payload) -> None:
        valid_buy_payload["amount"] = 0
        validate_buy_tokens(valid_buy_payload)

    def test_bool_amount_rejected(self, valid_buy_payload) -> None:
        valid_buy_payload["amount"] = True
        assert not BuyTokensValidator().is_valid(valid_buy_payload)

    def test_float_amount_rejected(self, valid_buy_payload) -> None:
        valid_buy_payload["amount"] = 1.5
        with pytest.raises(InvalidInstruction, match="amount"):
            validate_buy_tokens(valid_buy_payload)

    def test_all_errors_reported(self) -> None:
        errors = BuyTokensValidator().describe_errors({"amount": -1})

        assert len(errors) == 2
        assert errors[0].startswith("<root>: ")
        assert "launch_id" in errors[0]
        assert errors[1].startswith("amount: ")

    def test_require_joins_all_errors(self) -> None:
        pattern = r"^buy_tokens: <root>: .*launch_id.*; amount: "
        with pytest.raises(InvalidInstruction, match=pattern):
            validate_buy_tokens({"amount": -1})


# =============================================================================
# LAUNCH RECORD
# =============================================================================


class TestLaunchRecordContract:
    def test_valid(self, valid_launch_record) -> None:
        validate_launch_record(valid_launch_record)

    def test_missing_field(self, valid_launch_record) -> None:
        del valid_launch_record["is_active"]
        with pytest.raises(ValidationError):
            validate_launch_record(valid_launch_record)

    def test_pydantic_dump_matches_schema(self, valid_launch_record) -> None:
        """model_dump() Launch соответствует launch.json"""
        launch = Launch(**valid_launch_record)
        assert LaunchRecordValidator().is_valid(launch.model_dump())
        assert json.loads(launch.model_dump_json()) == valid_launch_record
