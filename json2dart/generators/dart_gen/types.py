"""Dataclasses for Dart class generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class InvalidJsonError(ValueError):
    """Raised when the input text cannot be turned into samples."""


class TypeKind(str, Enum):
    STRING = "String"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    DYNAMIC = "dynamic"
    LIST = "List"
    OBJECT = "object"


@dataclass(frozen=True)
class TypeDescriptor:
    """Resolved type of a field: a primitive, a list of T or a named class."""
    kind: TypeKind
    element: Optional["TypeDescriptor"] = None  # set for LIST
    class_name: Optional[str] = None  # set for OBJECT

    @classmethod
    def list_of(cls, element: "TypeDescriptor") -> "TypeDescriptor":
        return cls(TypeKind.LIST, element=element)

    @classmethod
    def named(cls, class_name: str) -> "TypeDescriptor":
        return cls(TypeKind.OBJECT, class_name=class_name)

    @property
    def is_list(self) -> bool:
        return self.kind == TypeKind.LIST

    @property
    def is_object(self) -> bool:
        return self.kind == TypeKind.OBJECT

    def dart_type(self) -> str:
        """Dart source text for this type, e.g. ``List<Address>``."""
        if self.kind == TypeKind.LIST:
            return f"List<{self.element.dart_type()}>"
        if self.kind == TypeKind.OBJECT:
            return self.class_name
        return self.kind.value

    def contains_object(self) -> bool:
        """True for a named class or a (nested) list whose innermost element is one."""
        if self.is_list:
            return self.element.contains_object()
        return self.is_object


DYNAMIC = TypeDescriptor(TypeKind.DYNAMIC)


@dataclass(frozen=True)
class FieldDefinition:
    """A single field of a generated class."""
    name: str  # formatted per naming convention
    json_key: str  # literal JSON key, never renamed
    type: TypeDescriptor
    nullable: bool


@dataclass(frozen=True)
class ClassDefinition:
    """A generated class and its ordered fields."""
    name: str
    fields: List[FieldDefinition] = field(default_factory=list)

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]
