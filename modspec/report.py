"""Aggregated validation reports for modules.

``Module.validate()`` stops at the first violation, which is what a loader
wants when deciding whether to accept a manifest. Tools that show the
violations to a user want all of them at once; :func:`report_module`
collects them into a :class:`ValidationReport`.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from modspec.config import DEFAULT_RULES, ValidationRules
from modspec.errors import Failure
from modspec.logging import PprintLogger
from modspec.module import Module


class ValidationReport(BaseModel, frozen=True):
    """Every failure found in one module.

    Attributes:
        subject: ``namespace/name@version`` label of the module, using
            whatever parts are present.
        failures: Failures in field declaration order.
    """

    subject: str = Field(description="Label identifying the validated module.")
    failures: List[Failure] = Field(default_factory=list, description="All failures, in field order.")

    @property
    def valid(self) -> bool:
        return not self.failures


def module_label(module: Module) -> str:
    label = "/".join(part for part in (module.namespace, module.name) if part) or "<unnamed>"
    if module.version is not None and module.version.name:
        label = f"{label}@{module.version.name}"
    return label


def report_module(
    module: Module,
    rules: ValidationRules = DEFAULT_RULES,
    logger: Optional[PprintLogger] = None,
) -> ValidationReport:
    """Validate ``module`` and return every failure found.

    When a logger is given the report is logged at INFO if the module is
    valid and at WARNING otherwise.
    """
    report = ValidationReport(subject=module_label(module), failures=module.collect_failures(rules))
    if logger is not None:
        if report.valid:
            logger.info(report)
        else:
            logger.warning(report)
    return report
