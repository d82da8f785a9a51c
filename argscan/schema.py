"""Schema validation for declarative vocabulary documents."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import validate, ValidationError


DEFAULT_SCHEMA_PATH = Path(__file__).parent / 'vocabulary-schema.json'


class SchemaValidator:
    """Validates vocabulary documents against the JSON schema"""

    def __init__(self, schema_path: Optional[Path] = None):
        self.schema_path = Path(schema_path) if schema_path is not None else DEFAULT_SCHEMA_PATH
        with open(self.schema_path, 'r', encoding='utf-8') as f:
            self.schema = json.load(f)

    def validate_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Validate an already loaded document and return it"""
        try:
            validate(instance=document, schema=self.schema)
        except ValidationError as e:
            location = '/'.join(str(part) for part in e.absolute_path)
            where = f" at '{location}'" if location else ""
            raise ValueError(f"Invalid vocabulary{where}: {e.message}") from e
        return document

    def validate(self, document_path: Path) -> Dict[str, Any]:
        """Validate a vocabulary file and return parsed data"""
        with open(document_path, 'r', encoding='utf-8') as f:
            document = json.load(f)
        return self.validate_document(document)
