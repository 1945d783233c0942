"""Workflows and tasks describing how a component was built."""

from dataclasses import dataclass
from enum import Enum

from bom_validator.models.primitives import BomReference, DateTime, NormalizedString
from bom_validator.models.property import Properties
from bom_validator.open_enum import UnknownValue, parse_open_enum
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext
from bom_validator.validation.results import (
    PASSED,
    ValidationError,
    ValidationResult,
)
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import (
    validate_date_time,
    validate_known,
    validate_normalized_string,
)


@dataclass(frozen=True)
class UnknownTaskType(UnknownValue):
    """Task type not known to this library, kept verbatim."""


class TaskType(str, Enum):
    COPY = "copy"
    CLONE = "clone"
    LINT = "lint"
    SCAN = "scan"
    MERGE = "merge"
    BUILD = "build"
    TEST = "test"
    DELIVER = "deliver"
    DEPLOY = "deploy"
    RELEASE = "release"
    CLEAN = "clean"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new_unchecked(cls, value: str) -> "TaskType | UnknownTaskType":
        return parse_open_enum(cls, UnknownTaskType, value)


def validate_task_type(task_type: TaskType | UnknownTaskType) -> ValidationError | None:
    return validate_known(task_type, "Unknown task type")


def _task_type_result(task_type: TaskType | UnknownTaskType) -> ValidationResult:
    error = validate_task_type(task_type)
    if error is None:
        return PASSED
    return ValidationResult.failed_with(error)


@dataclass
class Task(Validate):
    """A single step of a workflow."""

    bom_ref: BomReference
    uid: NormalizedString
    task_types: list[TaskType | UnknownTaskType]
    name: NormalizedString | None = None
    description: NormalizedString | None = None
    time_start: DateTime | None = None
    time_end: DateTime | None = None
    properties: Properties | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field("uid", self.uid, validate_normalized_string)
            .add_field_option("name", self.name, validate_normalized_string)
            .add_field_option(
                "description", self.description, validate_normalized_string
            )
            .add_unique_list("task_types", self.task_types, _task_type_result)
            .add_field_option("time_start", self.time_start, validate_date_time)
            .add_field_option("time_end", self.time_end, validate_date_time)
            .add_struct_option("properties", self.properties, version)
            .build()
        )


@dataclass
class Workflow(Validate):
    """Ordered set of tasks producing one or more components."""

    bom_ref: BomReference
    uid: NormalizedString
    task_types: list[TaskType | UnknownTaskType]
    name: NormalizedString | None = None
    description: NormalizedString | None = None
    tasks: list[Task] | None = None
    time_start: DateTime | None = None
    time_end: DateTime | None = None
    properties: Properties | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field("uid", self.uid, validate_normalized_string)
            .add_field_option("name", self.name, validate_normalized_string)
            .add_field_option(
                "description", self.description, validate_normalized_string
            )
            .add_unique_list_option(
                "tasks", self.tasks, lambda task: task.validate_version(version)
            )
            .add_unique_list("task_types", self.task_types, _task_type_result)
            .add_field_option("time_start", self.time_start, validate_date_time)
            .add_field_option("time_end", self.time_end, validate_date_time)
            .add_struct_option("properties", self.properties, version)
            .build()
        )
