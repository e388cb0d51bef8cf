"""
Module Manifest Schema - Structural Validation

Lightweight Pydantic models for a module manifest (namespace, name, type,
version, annotations, dependencies) and the rules that decide whether a
declared module identity is well-formed before registries, dependency
resolvers or build systems accept it.

This package does no I/O. A manifest loader builds the entities and calls
``validate()``:

    from modspec import DependencyDirection, Module, ModuleDependency, ModuleVersion

    module = Module(
        namespace="com.example",
        name="product",
        type="go",
        version=ModuleVersion(name="v1.0.0"),
        dependencies=[
            ModuleDependency(
                namespace="com.example",
                name="library",
                type="go",
                version="2021-08-30",
                direction=DependencyDirection.UPSTREAM,
            )
        ],
    )
    module.validate()  # raises SpecValidationError if not well-formed
"""

from modspec.config import DEFAULT_RULES, ValidationRules
from modspec.errors import Failure, FailureReason, SpecValidationError
from modspec.logging import PprintLogger
from modspec.module import (
    DependencyDirection,
    Module,
    ModuleDependency,
    ModuleVersion,
    validate_dependency_direction,
    validate_module_annotation_key,
    validate_module_annotation_value,
    validate_module_annotations,
    validate_module_dependencies,
    validate_module_name,
    validate_module_namespace,
    validate_module_type,
    validate_module_version,
    validate_module_version_name,
    validate_module_version_schema,
)
from modspec.report import ValidationReport, report_module
from modspec.rules import (
    FieldRule,
    StartRule,
    must_be_lowercase_alphanumeric_dash_dot,
    must_end_with_lowercase_alphanumeric_character,
    must_have_min_max_length,
    must_start_with_lowercase_alphabetic_character,
    must_start_with_lowercase_alphanumeric_character,
)

__all__ = [
    "DEFAULT_RULES",
    "DependencyDirection",
    "Failure",
    "FailureReason",
    "FieldRule",
    "Module",
    "ModuleDependency",
    "ModuleVersion",
    "PprintLogger",
    "SpecValidationError",
    "StartRule",
    "ValidationReport",
    "ValidationRules",
    "must_be_lowercase_alphanumeric_dash_dot",
    "must_end_with_lowercase_alphanumeric_character",
    "must_have_min_max_length",
    "must_start_with_lowercase_alphabetic_character",
    "must_start_with_lowercase_alphanumeric_character",
    "report_module",
    "validate_dependency_direction",
    "validate_module_annotation_key",
    "validate_module_annotation_value",
    "validate_module_annotations",
    "validate_module_dependencies",
    "validate_module_name",
    "validate_module_namespace",
    "validate_module_type",
    "validate_module_version",
    "validate_module_version_name",
    "validate_module_version_schema",
]

__version__ = "0.1.0"
