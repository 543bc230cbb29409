"""
JSON schema checks for the curated content table and system parameters.

Schema violations are collected in full and raised together as a single
ConfigurationError whose ``problems`` list holds one line per violation,
addressed by JSON path (e.g. ``$.categories.ml.courses[0]``).
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from jsonschema import Draft7Validator, FormatChecker, ValidationError
from rich.console import Console
from rich.table import Table

logger = structlog.get_logger(__name__)

DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"
CONTENT_SCHEMA = "curated_content_schema.json"
SYSTEM_PARAMS_SCHEMA = "system_params_schema.json"


class ConfigurationError(Exception):
    """Raised when a configuration document cannot be used."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = problems or []


def describe_error(error: ValidationError) -> str:
    """Render one jsonschema error as "<json path>: <problem>"."""
    where = error.json_path
    keyword = error.validator
    limit = error.validator_value
    value = error.instance

    if keyword == "required":
        missing = [f for f in limit if isinstance(value, dict) and f not in value]
        return f"{where}: missing required field {', '.join(repr(f) for f in missing)}"
    if keyword == "type":
        return f"{where}: expected {limit}, got {type(value).__name__}"
    if keyword == "enum":
        return f"{where}: {value!r} is not one of {limit}"
    if keyword in ("minimum", "exclusiveMinimum"):
        return f"{where}: {value} is below the minimum of {limit}"
    if keyword in ("maximum", "exclusiveMaximum"):
        return f"{where}: {value} is above the maximum of {limit}"
    if keyword in ("minItems", "minProperties", "minLength"):
        return f"{where}: needs at least {limit} item(s)"
    if keyword in ("maxItems", "maxProperties", "maxLength"):
        return f"{where}: allows at most {limit} item(s)"
    if keyword == "additionalProperties" and isinstance(value, dict):
        known = set(error.schema.get("properties", {}))
        extra = sorted(k for k in value if k not in known)
        return f"{where}: unexpected field {', '.join(repr(k) for k in extra)}"
    if keyword == "format":
        return f"{where}: {value!r} is not a valid {limit}"
    return f"{where}: {error.message}"


def read_json_document(path: Path) -> Any:
    """Read a JSON file, turning I/O and syntax problems into ConfigurationError."""
    path = Path(path)
    if not path.exists():
        logger.error("config_file_not_found", config_path=str(path))
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error("config_invalid_json", config_path=str(path), error=str(e))
        raise ConfigurationError(
            f"{path.name} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e


class ConfigValidator:
    """Checks configuration documents against the packaged JSON schemas."""

    def __init__(self, schema_dir: Path = DEFAULT_SCHEMA_DIR):
        self.schema_dir = Path(schema_dir)
        self._validators: Dict[str, Draft7Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a schema by filename, caching the compiled validator.

        Raises:
            ConfigurationError: If the schema file is missing or not valid JSON
        """
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached.schema

        schema_path = self.schema_dir / schema_name
        if not schema_path.exists():
            logger.error("schema_not_found", schema_path=str(schema_path))
            raise ConfigurationError(f"Schema file not found: {schema_path}")

        schema = read_json_document(schema_path)
        self._validators[schema_name] = Draft7Validator(
            schema, format_checker=FormatChecker()
        )
        logger.debug("schema_loaded", schema_name=schema_name)
        return schema

    def check(self, config: Any, schema_name: str) -> List[str]:
        """Return every violation of ``schema_name`` in ``config``, path-ordered."""
        self.load_schema(schema_name)
        errors = self._validators[schema_name].iter_errors(config)
        return [describe_error(e) for e in sorted(errors, key=lambda e: e.json_path)]

    def validate(self, config: Any, schema_name: str, source: str = "") -> None:
        """
        Validate a loaded document.

        Args:
            config: Parsed JSON document
            schema_name: Schema filename under the schema directory
            source: Label used in the error message (defaults to the schema name)

        Raises:
            ConfigurationError: Listing every violation found
        """
        problems = self.check(config, schema_name)
        if not problems:
            logger.debug("validation_passed", schema_name=schema_name)
            return

        label = source or schema_name
        logger.warning("validation_failed", source=label, error_count=len(problems))
        details = "\n".join(f"  - {p}" for p in problems)
        raise ConfigurationError(
            f"{label} has {len(problems)} problem(s):\n{details}", problems
        )

    def validate_file(self, config_path: Path, schema_name: str) -> Dict[str, Any]:
        """Read and validate a JSON file, returning the parsed document."""
        config_path = Path(config_path)
        config = read_json_document(config_path)
        self.validate(config, schema_name, source=config_path.name)
        return config

    def validate_all_configs(
        self,
        content_path: Path,
        system_params_path: Optional[Path] = None,
        console: Optional[Console] = None,
    ) -> Dict[str, Dict[str, Any]]:
        """
        Validate the curated content table and, when present, system parameters.

        Prints a one-row-per-document summary table before returning or raising.

        Returns:
            {"content": {...}, "system_params": {...}}; system_params is empty
            when no file was given or it does not exist

        Raises:
            ConfigurationError: From the first document that fails
        """
        console = console or Console()
        table = Table(title="Configuration check")
        table.add_column("Document")
        table.add_column("Path")
        table.add_column("Result")

        documents = [("curated content", content_path, CONTENT_SCHEMA)]
        if system_params_path is not None and Path(system_params_path).exists():
            documents.append(("system parameters", system_params_path, SYSTEM_PARAMS_SCHEMA))
        else:
            table.add_row("system parameters", "-", "defaults")

        configs: Dict[str, Dict[str, Any]] = {"system_params": {}}
        try:
            for label, path, schema_name in documents:
                try:
                    config = self.validate_file(path, schema_name)
                except ConfigurationError:
                    table.add_row(label, str(path), "[red]invalid[/red]")
                    raise
                table.add_row(label, str(path), "[green]ok[/green]")
                key = "content" if schema_name == CONTENT_SCHEMA else "system_params"
                configs[key] = config
        finally:
            console.print(table)
        return configs
