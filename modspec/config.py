"""Per-field rule configuration.

The defaults reproduce the manifest schema's rules exactly. They are
exposed as configuration so that a field whose rule is not settled (for
example whether a schema name may end in a separator) can be relaxed or
tightened without touching the validators.
"""

from pydantic import BaseModel, ConfigDict, Field

from modspec.rules import ANNOTATION_VALUE_RULE, IDENTIFIER_RULE, VERSION_NAME_RULE, FieldRule


class ValidationRules(BaseModel):
    """One :class:`~modspec.rules.FieldRule` per kind of manifest field.

    Attributes:
        namespace: Rule for ``Module.namespace`` and ``ModuleDependency.namespace``.
        name: Rule for ``Module.name`` and ``ModuleDependency.name``.
        type: Rule for ``Module.type`` and ``ModuleDependency.type``.
        version_name: Rule for ``ModuleVersion.name``, every ``replaces``
            entry and ``ModuleDependency.version``.
        schema_: Rule for ``ModuleVersion.schema`` when it is set.
        annotation_key: Rule for every annotation key.
        annotation_value: Rule for every annotation value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    namespace: FieldRule = Field(default=IDENTIFIER_RULE)
    name: FieldRule = Field(default=IDENTIFIER_RULE)
    type: FieldRule = Field(default=IDENTIFIER_RULE)
    version_name: FieldRule = Field(default=VERSION_NAME_RULE)
    schema_: FieldRule = Field(default=IDENTIFIER_RULE, alias="schema")
    annotation_key: FieldRule = Field(default=IDENTIFIER_RULE)
    annotation_value: FieldRule = Field(default=ANNOTATION_VALUE_RULE)


DEFAULT_RULES = ValidationRules()
