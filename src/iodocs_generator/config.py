"""Generator configuration loaded from a YAML file.

Example::

    name: products
    title: Product API
    description: Everything about products
    version: "1.0"
    basePath: http://api.example.com/
    endpoints:
      - myapp.api:PingApi
      - myapp.api:QueryApi
    extensionParameters:
      - name: Accept
        location: header
        type: string
        description: Accept mime-type
        required: true
        default: text/plain
        enum: [text/plain]
        enumDescriptions: [Plain text]
"""

import importlib
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from iodocs_generator.model import ApiMeta, ExtensionParameter


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or resolved."""


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    title: str
    description: str | None = None
    version: str
    base_path: str = Field(alias="basePath")
    endpoints: list[str] = []
    extension_parameters: list[ExtensionParameter] = Field(
        default_factory=list, alias="extensionParameters"
    )

    def api_meta(self) -> ApiMeta:
        return ApiMeta(
            name=self.name,
            title=self.title,
            description=self.description,
            version=self.version,
            base_path=self.base_path,
        )


def load_config(file_path: Path) -> GeneratorConfig:
    """Parse and validate a YAML configuration file."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{file_path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping at the top level")

    # YAML reads unquoted versions such as 1.0 as floats
    if isinstance(data.get("version"), (int, float)):
        data["version"] = str(data["version"])

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{file_path}: {e}") from e


def resolve_endpoint(reference: str) -> type:
    """Import an endpoint class from a ``package.module:ClassName`` reference."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Invalid endpoint reference '{reference}', expected 'module:ClassName'")

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigError(f"'{module_name}' has no attribute '{attr_path}'") from e

    if not isinstance(target, type):
        raise ConfigError(f"'{reference}' is not a class")
    return target


def resolve_endpoints(references: list[str]) -> list[type]:
    return [resolve_endpoint(ref) for ref in references]
