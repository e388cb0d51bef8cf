"""Module manifest entities and their field validators.

This module defines the in-memory shape of a module manifest:

- **Module**: namespace + name + type + version, plus optional annotations
  and dependencies
- **ModuleVersion**: a version name, an optional schema and the version
  names it replaces
- **ModuleDependency**: a reference to another module and the direction of
  the relationship
- **DependencyDirection**: ``UPSTREAM`` or ``DOWNSTREAM``

Entities are plain, mutable Pydantic models. A manifest loader builds them
and calls ``validate()`` once before handing them on; ``validate()`` only
reads the entity. Treat a validated entity as immutable afterwards.

Every ``validate_*`` function returns ``None`` on success and raises
:class:`~modspec.errors.SpecValidationError` naming the offending field on
failure. Entities check their fields in declaration order and stop at the
first violation; ``collect_failures()`` keeps going and returns all of them.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from modspec.config import DEFAULT_RULES, ValidationRules
from modspec.errors import Failure, FailureReason, SpecValidationError
from modspec.rules import FieldRule

logger = logging.getLogger(__name__)


class DependencyDirection(str, Enum):
    """How a dependency relates to the module that declares it."""

    UPSTREAM = "UPSTREAM"
    """The declaring module consumes the referenced module."""

    DOWNSTREAM = "DOWNSTREAM"
    """The referenced module depends on the declaring module."""


def _check(rule: FieldRule, value: str, field: str) -> None:
    try:
        rule.check(value)
    except SpecValidationError as exc:
        logger.debug("rejected %s=%r: %s", field, value, exc.failure.message)
        raise exc.with_field(field) from exc


def _required(field: str) -> SpecValidationError:
    logger.debug("rejected %s: missing", field)
    return SpecValidationError(Failure(field=field, reason=FailureReason.REQUIRED, message="is required"))


def validate_module_namespace(namespace: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.namespace, namespace, "namespace")


def validate_module_name(name: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.name, name, "name")


def validate_module_type(type_: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.type, type_, "type")


def validate_module_version(module_version: Optional["ModuleVersion"], rules: ValidationRules = DEFAULT_RULES) -> None:
    """A module's version is mandatory and must itself be valid."""
    if module_version is None:
        raise _required("version")
    try:
        module_version.validate(rules)
    except SpecValidationError as exc:
        raise exc.with_prefix("version") from exc


def validate_module_version_name(name: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    """Check a version name.

    Unlike identifiers, version names may start with a digit, which admits
    plain (``1.0.0``), prefixed (``v1.0.0-abc``) and date-like
    (``2021-08-30``) versions alike.
    """
    _check(rules.version_name, name, "name")


def validate_module_version_schema(schema: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.schema_, schema, "schema")


def validate_module_annotation_key(key: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.annotation_key, key, "annotations")


def validate_module_annotation_value(value: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    _check(rules.annotation_value, value, "annotations")


def validate_module_annotations(annotations: Optional[Dict[str, str]], rules: ValidationRules = DEFAULT_RULES) -> None:
    """Annotations are optional; when present every key and value must be valid.

    A key failure is reported against ``annotations`` with the key as the
    offending value, a value failure against ``annotations[<key>]``.
    """
    if not annotations:
        return
    for key, value in annotations.items():
        validate_module_annotation_key(key, rules)
        try:
            validate_module_annotation_value(value, rules)
        except SpecValidationError as exc:
            raise exc.with_field(f"annotations[{key}]") from exc


def validate_module_dependencies(
    module_dependencies: Optional[List["ModuleDependency"]], rules: ValidationRules = DEFAULT_RULES
) -> None:
    if not module_dependencies:
        return
    for index, dependency in enumerate(module_dependencies):
        try:
            dependency.validate(rules)
        except SpecValidationError as exc:
            raise exc.with_prefix(f"dependencies[{index}]") from exc


def validate_dependency_direction(direction: Optional[Union[DependencyDirection, str]]) -> None:
    """The direction must be set, and set to a recognized value."""
    if direction is None:
        raise _required("direction")
    try:
        DependencyDirection(direction)
    except ValueError:
        logger.debug("rejected direction=%r: not a recognized direction", direction)
        raise SpecValidationError(
            Failure(
                field="direction",
                reason=FailureReason.INVALID_ENUM,
                value=str(direction),
                message="must be one of " + ", ".join(member.value for member in DependencyDirection),
            )
        ) from None


def _collect(check: Callable[..., None], *args) -> List[Failure]:
    try:
        check(*args)
    except SpecValidationError as exc:
        return [exc.failure]
    return []


def _nested(prefix: str, failures: List[Failure]) -> List[Failure]:
    return [SpecValidationError(failure).with_prefix(prefix).failure for failure in failures]


class ModuleVersion(BaseModel):
    """A version of a module.

    Attributes:
        name: The version name, e.g. ``v1.0.0`` or ``2021-08-30``.
        schema_: Optional schema identifier (pass it as ``schema=``).
        replaces: Version names this version supersedes.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Version name, e.g. 'v1.0.0' or '2021-08-30'.")
    schema_: Optional[str] = Field(default=None, alias="schema", description="Optional schema identifier.")
    replaces: Optional[List[str]] = Field(default=None, description="Version names this version supersedes.")

    def validate(self, rules: ValidationRules = DEFAULT_RULES) -> None:  # type: ignore[override]
        validate_module_version_name(self.name, rules)
        if self.schema_ is not None:
            validate_module_version_schema(self.schema_, rules)
        for index, replaced in enumerate(self.replaces or ()):
            try:
                validate_module_version_name(replaced, rules)
            except SpecValidationError as exc:
                raise exc.with_field(f"replaces[{index}]") from exc

    def collect_failures(self, rules: ValidationRules = DEFAULT_RULES) -> List[Failure]:
        failures = _collect(validate_module_version_name, self.name, rules)
        if self.schema_ is not None:
            failures += _collect(validate_module_version_schema, self.schema_, rules)
        for index, replaced in enumerate(self.replaces or ()):
            for failure in _collect(validate_module_version_name, replaced, rules):
                failures.append(failure.model_copy(update={"field": f"replaces[{index}]"}))
        return failures

    def is_valid(self, rules: ValidationRules = DEFAULT_RULES) -> bool:
        return not self.collect_failures(rules)


class ModuleDependency(BaseModel):
    """A reference from one module to another.

    ``direction`` is left as ``None`` when the manifest does not state it.
    A raw string is accepted so that an unrecognized direction reaches
    ``validate()`` and is reported there rather than at construction.
    """

    namespace: str = ""
    name: str = ""
    type: str = ""
    version: str = ""
    direction: Optional[Union[DependencyDirection, str]] = None

    def validate(self, rules: ValidationRules = DEFAULT_RULES) -> None:  # type: ignore[override]
        validate_module_namespace(self.namespace, rules)
        validate_module_name(self.name, rules)
        validate_module_type(self.type, rules)
        try:
            validate_module_version_name(self.version, rules)
        except SpecValidationError as exc:
            raise exc.with_field("version") from exc
        validate_dependency_direction(self.direction)

    def collect_failures(self, rules: ValidationRules = DEFAULT_RULES) -> List[Failure]:
        failures = _collect(validate_module_namespace, self.namespace, rules)
        failures += _collect(validate_module_name, self.name, rules)
        failures += _collect(validate_module_type, self.type, rules)
        for failure in _collect(validate_module_version_name, self.version, rules):
            failures.append(failure.model_copy(update={"field": "version"}))
        failures += _collect(validate_dependency_direction, self.direction)
        return failures

    def is_valid(self, rules: ValidationRules = DEFAULT_RULES) -> bool:
        return not self.collect_failures(rules)


class Module(BaseModel):
    """A named, versioned, typed unit of the manifest schema.

    Attributes:
        namespace: Organizational prefix, e.g. ``com.example``.
        name: Module name within the namespace.
        type: Module type, e.g. ``go``.
        version: The module's version; required for the module to be valid.
        annotations: Free-form metadata keyed by identifier-like keys.
        dependencies: Other modules this one relates to, in declaration order.

    Example:
        ```python
        module = Module(
            namespace="com.example",
            name="product",
            type="go",
            version=ModuleVersion(name="v1.0.0"),
        )
        module.validate()
        ```
    """

    namespace: str = ""
    name: str = ""
    type: str = ""
    version: Optional[ModuleVersion] = None
    annotations: Optional[Dict[str, str]] = None
    dependencies: Optional[List[ModuleDependency]] = None

    def validate(self, rules: ValidationRules = DEFAULT_RULES) -> None:  # type: ignore[override]
        validate_module_namespace(self.namespace, rules)
        validate_module_name(self.name, rules)
        validate_module_type(self.type, rules)
        validate_module_version(self.version, rules)
        validate_module_annotations(self.annotations, rules)
        validate_module_dependencies(self.dependencies, rules)

    def collect_failures(self, rules: ValidationRules = DEFAULT_RULES) -> List[Failure]:
        failures = _collect(validate_module_namespace, self.namespace, rules)
        failures += _collect(validate_module_name, self.name, rules)
        failures += _collect(validate_module_type, self.type, rules)
        if self.version is None:
            failures.append(_required("version").failure)
        else:
            failures += _nested("version", self.version.collect_failures(rules))
        for key, value in (self.annotations or {}).items():
            failures += _collect(validate_module_annotation_key, key, rules)
            for failure in _collect(validate_module_annotation_value, value, rules):
                failures.append(failure.model_copy(update={"field": f"annotations[{key}]"}))
        for index, dependency in enumerate(self.dependencies or ()):
            failures += _nested(f"dependencies[{index}]", dependency.collect_failures(rules))
        return failures

    def is_valid(self, rules: ValidationRules = DEFAULT_RULES) -> bool:
        return not self.collect_failures(rules)
