"""Document entities that implement the Validate capability

This package provides:
- Scalar value types (references, normalized strings, date-times)
- Hashes with their open algorithm enumeration
- Components, services and properties
- Formulation entities (formulas, workflows, tasks)
- The document root
"""

from bom_validator.models.bom import Bom, UrnUuid
from bom_validator.models.component import (
    Classification,
    Component,
    Components,
    UnknownClassification,
)
from bom_validator.models.formulation import (
    Formula,
    Task,
    TaskType,
    UnknownTaskType,
    Workflow,
)
from bom_validator.models.hash import (
    Hash,
    HashAlgorithm,
    Hashes,
    HashValue,
    UnknownHashAlgorithm,
)
from bom_validator.models.primitives import BomReference, DateTime, NormalizedString
from bom_validator.models.property import Properties, Property
from bom_validator.models.service import Service, Services

__all__ = [
    "Bom",
    "BomReference",
    "Classification",
    "Component",
    "Components",
    "DateTime",
    "Formula",
    "Hash",
    "HashAlgorithm",
    "HashValue",
    "Hashes",
    "NormalizedString",
    "Properties",
    "Property",
    "Service",
    "Services",
    "Task",
    "TaskType",
    "UnknownClassification",
    "UnknownHashAlgorithm",
    "UnknownTaskType",
    "UrnUuid",
    "Workflow",
]
