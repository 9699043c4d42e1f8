# validators for tool arguments
"""Argument validation against pydantic models and JSON schemas"""
from typing import Any, Dict, List, Optional, Type, Union
from pydantic import BaseModel, ValidationError as PydanticValidationError
from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError


class ValidationResult(BaseModel):
    """Result of validation"""
    valid: bool
    errors: Optional[List[str]] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, errors: List[str]) -> "ValidationResult":
        return cls(valid=False, errors=errors)


ArgsSchema = Union[Type[BaseModel], Dict[str, Any], None]


class ArgumentValidator:
    """Validates tool arguments against a model class or a JSON schema"""

    def validate(self, schema: ArgsSchema, args: Any) -> ValidationResult:
        """
        Validate arguments

        Args:
            schema: pydantic model class, JSON schema dict, or None
            args: Arguments to validate

        Returns:
            ValidationResult with error messages when invalid
        """
        if schema is None:
            return ValidationResult.ok()

        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return self.validate_model(schema, args)

        if isinstance(schema, dict):
            return self.validate_json_schema(schema, args)

        raise TypeError(f"Unsupported schema type: {type(schema).__name__}")

    def validate_model(self, model: Type[BaseModel], args: Any) -> ValidationResult:
        try:
            model.model_validate(args)
        except PydanticValidationError as e:
            return ValidationResult.invalid(self._format_pydantic_errors(e))
        return ValidationResult.ok()

    def validate_json_schema(self, schema: Dict[str, Any], args: Any) -> ValidationResult:
        try:
            validator = Draft7Validator(schema)
        except SchemaError as e:
            return ValidationResult.invalid([f"Invalid schema: {e.message}"])

        errors = [
            self._format_json_error(error)
            for error in sorted(validator.iter_errors(args), key=lambda e: list(e.path))
        ]
        if errors:
            return ValidationResult.invalid(errors)
        return ValidationResult.ok()

    @staticmethod
    def _format_pydantic_errors(error: PydanticValidationError) -> List[str]:
        messages = []
        for item in error.errors():
            location = ".".join(str(part) for part in item.get("loc", ()))
            if location:
                messages.append(f"{location}: {item['msg']}")
            else:
                messages.append(item["msg"])
        return messages

    @staticmethod
    def _format_json_error(error) -> str:
        location = ".".join(str(part) for part in error.path)
        if location:
            return f"{location}: {error.message}"
        return error.message


def json_schema_for(schema: ArgsSchema) -> Optional[Dict[str, Any]]:
    """JSON schema dict for a model class or a raw schema"""
    if schema is None:
        return None
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema.model_json_schema()
    return schema
