"""Configuration loader for the frontend stack environments."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from constructs import Node

DEFAULT_ENVIRONMENTS_FILE = "environments.yaml"
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class ConfigError(ValueError):
  """Raised when the stack cannot be configured from context."""


@dataclass
class SiteConfig:
  """Configuration for a single frontend environment."""

  bucket_name: str
  domain_name: str
  asset_path: str = "frontend/dist"
  region: str = "us-east-1"  # CloudFront only accepts us-east-1 certificates

  @classmethod
  def from_mapping(cls, data: dict[str, Any], environment: str = "") -> "SiteConfig":
    """Build a config from a camelCase context record."""
    label = f"environment '{environment}'" if environment else "configuration"

    for key in ("bucketName", "domainName"):
      value = data.get(key)
      if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{label} must define a non-empty '{key}'")

    return cls(
      bucket_name=data["bucketName"],
      domain_name=data["domainName"],
      asset_path=data.get("assetPath", "frontend/dist"),
      region=data.get("region", "us-east-1"),
    )

  @classmethod
  def from_context(cls, node: Node) -> "SiteConfig":
    """Resolve the environment selected with ``cdk -c config=XXX``.

    The record is read from CDK context first (normally ``cdk.json``) and
    falls back to the YAML environments file.
    """
    environment = node.try_get_context("config")
    if not environment:
      raise ConfigError(
        "Environment variable must be passed to cdk: `cdk -c config=XXX`"
      )

    record = node.try_get_context(environment)
    if record is not None:
      if not isinstance(record, Mapping):
        raise ConfigError(
          f"Context value for environment '{environment}' must be a mapping"
        )
      return cls.from_mapping(dict(record), environment)

    environments_file = resolve_project_path(
      node.try_get_context("environmentsFile") or DEFAULT_ENVIRONMENTS_FILE
    )
    if environments_file.exists():
      config = Config.from_yaml(environments_file)
      if environment in config.environments:
        return config.environments[environment]

    raise ConfigError(f"No configuration found for environment '{environment}'")


@dataclass
class Config:
  """All environments declared in an environments file."""

  environments: dict[str, SiteConfig] = field(default_factory=dict)

  @classmethod
  def from_yaml(cls, path: Path | str = DEFAULT_ENVIRONMENTS_FILE) -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    environments: dict[str, SiteConfig] = {}

    for name, env_data in (data.get("environments") or {}).items():
      # Merge defaults with environment-specific config
      merged = {**defaults, **(env_data or {})}
      environments[name] = SiteConfig.from_mapping(merged, name)

    return cls(environments=environments)


def resolve_project_path(path: Path | str) -> Path:
  """Resolve a relative path against the project root."""
  resolved = Path(path)
  if not resolved.is_absolute():
    resolved = PROJECT_ROOT / resolved
  return resolved
