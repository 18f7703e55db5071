"""Data models for the documentation engine.

The scanner produces MethodDescriptor and Parameter models; callers supply
ExtensionParameter models to fill in gaps on matching parameters.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUEST_BODY = "requestBody"


class Location(str, Enum):
    QUERY = "query"
    PATH = "path"
    HEADER = "header"
    BODY = "body"


class ParamType(str, Enum):
    STRING = "string"
    INT = "int"
    BOOLEAN = "boolean"
    TEXTAREA = "textarea"


class StringDefault(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str


class IntegerDefault(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    value: int


DefaultValue = Annotated[StringDefault | IntegerDefault, Field(discriminator="kind")]


def to_default(value: Any) -> StringDefault | IntegerDefault | None:
    """Wrap a raw scalar in the matching default variant.

    Booleans become their string form, since documents render booleans as a
    "true"/"false" enumeration.
    """
    if value is None or isinstance(value, (StringDefault, IntegerDefault)):
        return value
    if isinstance(value, bool):
        return StringDefault(value=str(value).lower())
    if isinstance(value, int):
        return IntegerDefault(value=value)
    return StringDefault(value=str(value))


class Parameter(BaseModel):
    """A single documented input of a method."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    location: Location
    type: ParamType = ParamType.STRING
    description: str | None = None
    required: bool = False
    default: DefaultValue | None = None
    enumeration: list[str] = Field(default_factory=list, alias="enum")
    enum_descriptions: list[str] = Field(default_factory=list, alias="enumDescriptions")

    @field_validator("default", mode="before")
    @classmethod
    def _coerce_default(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value
        return to_default(value)

    @property
    def key(self) -> str:
        """Key under which the parameter is rendered in its method."""
        if self.location is Location.BODY:
            return REQUEST_BODY
        if self.location is Location.PATH:
            return ":" + self.name
        return self.name

    @property
    def emitted_type(self) -> ParamType:
        """Type as documented; booleans are emitted as a string enumeration."""
        if self.type is ParamType.BOOLEAN:
            return ParamType.STRING
        return self.type

    def matches(self, other: "Parameter") -> bool:
        return (self.name, self.emitted_type, self.location) == (
            other.name,
            other.emitted_type,
            other.location,
        )


class ExtensionParameter(Parameter):
    """Reference parameter whose data fills gaps in matching parameters."""


class MethodDescriptor(BaseModel):
    """One documented operation."""

    name: str
    http_method: str
    path: str
    description: str | None = None
    parameters: list[Parameter] = Field(default_factory=list)


class ApiMeta(BaseModel):
    """API-level header fields of a document."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    title: str
    description: str | None = None
    version: str
    base_path: str = Field(alias="basePath")
