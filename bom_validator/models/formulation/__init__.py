"""Formulation: manufacturing and build provenance of a document's components."""

from bom_validator.models.formulation.formula import Formula
from bom_validator.models.formulation.workflow import (
    Task,
    TaskType,
    UnknownTaskType,
    Workflow,
)

__all__ = [
    "Formula",
    "Task",
    "TaskType",
    "UnknownTaskType",
    "Workflow",
]
