"""
Directive rule objects that generate field decorators.

Each rule represents one class-validator or class-transformer decorator
attached above a class member and knows how to render itself from the
string templates in ``directive_rules_typescript.json``.
"""

import json
from abc import ABC
from pathlib import Path
from typing import Any, Dict, List

from .transforms import TransformFunction


class DirectiveRule(ABC):
    """Base class for all directive rules"""

    # Class-level cache for loaded string templates
    _string_templates: Dict[str, Dict[str, Any]] = {}

    def __init__(self, field_name: str, is_array: bool = False):
        """
        Initialize a directive rule.

        Args:
            field_name: Name of the decorated field
            is_array: Whether the field is an array (selects "each" variants)
        """
        self.field_name = field_name
        self.is_array = is_array

    @classmethod
    def _load_string_templates(cls, language: str = "typescript") -> Dict[str, Any]:
        """
        Load string templates from JSON file for the given language.
        Results are cached to avoid repeated file I/O.
        """
        if language not in cls._string_templates:
            template_file = Path(__file__).parent / f"directive_rules_{language}.json"
            with open(template_file, "r", encoding="utf-8") as f:
                cls._string_templates[language] = json.load(f)
        return cls._string_templates[language]

    def get_string(self, key: str, /, **format_params) -> str:
        """
        Get a string template for this rule and format it.

        Args:
            key: The string key to retrieve (e.g., 'directive')
            **format_params: Parameters to format into the string template

        Returns:
            Formatted string
        """
        templates = self._load_string_templates()
        class_name = self.__class__.__name__

        if class_name not in templates:
            raise KeyError(f"No string templates found for {class_name}")

        rule_templates = templates[class_name]

        if key not in rule_templates:
            raise KeyError(f"Key '{key}' not found in templates for {class_name}")

        return rule_templates[key].format(**format_params)

    def get_field_params(self) -> Dict[str, Any]:
        """Parameters shared by every rule: field key and the array suffix."""
        each = self._load_string_templates()["_template"]["each"] if self.is_array else ""
        return {"key": self.field_name, "each": each}

    def get_template_params(self) -> Dict[str, Any]:
        """
        Get rule-specific parameters for template formatting.

        Returns:
            Dictionary with parameters specific to this rule
        """
        return {}

    def template_key(self) -> str:
        return "directive"

    def generate_code(self) -> List[str]:
        """Generate the decorator lines for this rule."""
        params = self.get_field_params()
        params.update(self.get_template_params())
        return [self.get_string(self.template_key(), **params)]


class NotEmptyDirective(DirectiveRule):
    """Required field, must not be empty"""


class OptionalDirective(DirectiveRule):
    """Optional field, other checks are skipped for missing values"""


class TransformDirective(DirectiveRule):
    """Coerces the incoming value before validation"""

    def __init__(self, field_name: str, transform: TransformFunction):
        super().__init__(field_name)
        self.transform = transform

    def get_template_params(self) -> Dict[str, Any]:
        return {"transform": self.transform.typescript}


class IsNumberDirective(DirectiveRule):
    """Value (or each element) must be a number"""


class IsBooleanDirective(DirectiveRule):
    """Value (or each element) must be a boolean"""


class IsStringDirective(DirectiveRule):
    """Value (or each element) must be a string"""


class IsEnumDirective(DirectiveRule):
    """Value (or each element) must be a member of an enum"""

    def __init__(self, field_name: str, enum_name: str, is_array: bool = False):
        super().__init__(field_name, is_array)
        self.enum_name = enum_name

    def get_template_params(self) -> Dict[str, Any]:
        return {"enum_name": self.enum_name}


class IsArrayDirective(DirectiveRule):
    """Value must be an array"""


class IsObjectDirective(DirectiveRule):
    """Value must be an object"""


class ValidateNestedDirective(DirectiveRule):
    """Validates the nested object, or each nested object of an array"""

    def template_key(self) -> str:
        return "directive_each" if self.is_array else "directive"


class TypeDirective(DirectiveRule):
    """Tells class-transformer which class to instantiate for nested values"""

    def __init__(self, field_name: str, type_name: str):
        super().__init__(field_name)
        self.type_name = type_name

    def get_template_params(self) -> Dict[str, Any]:
        return {"type_name": self.type_name}
