"""Tests for the FrontendStack."""

from pathlib import Path
from typing import Any

import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Template

from infrastructure.config import PROJECT_ROOT, ConfigError, SiteConfig
from infrastructure.stacks import FrontendStack


class TestFrontendStack:
  """Test stack creation from app context."""

  def test_builds_from_context(
    self, app: cdk.App, env: cdk.Environment, asset_dir: Path
  ) -> None:
    """Verify the selected environment drives bucket and domain names."""
    stack = FrontendStack(app, "Frontend", env=env, asset_path=asset_dir)
    template = Template.from_stack(stack)

    assert stack.site_config == SiteConfig(
      bucket_name="site-bucket", domain_name="example.com"
    )
    template.has_resource_properties("AWS::S3::Bucket", {"BucketName": "site-bucket"})
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {"DistributionConfig": {"Aliases": ["example.com"]}},
    )

  def test_explicit_site_config(
    self, env: cdk.Environment, zone_context: dict[str, Any], asset_dir: Path
  ) -> None:
    """Verify a passed config is used without a config context key."""
    app = cdk.App(context=zone_context)
    stack = FrontendStack(
      app,
      "Frontend",
      site_config=SiteConfig(
        bucket_name="explicit-bucket",
        domain_name="example.com",
        asset_path=str(asset_dir),
      ),
      env=env,
    )
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::S3::Bucket", {"BucketName": "explicit-bucket"}
    )

  def test_tags(self, app: cdk.App, env: cdk.Environment, asset_dir: Path) -> None:
    """Verify resources are tagged with project, domain and environment."""
    stack = FrontendStack(app, "Frontend", env=env, asset_path=asset_dir)
    template = Template.from_stack(stack)

    bucket = next(iter(template.find_resources("AWS::S3::Bucket").values()))
    tags = {t["Key"]: t["Value"] for t in bucket["Properties"]["Tags"]}
    assert tags["Project"] == "spa-frontend"
    assert tags["Domain"] == "example.com"
    assert tags["Environment"] == "test"

  def test_default_asset_path_is_project_relative(self) -> None:
    """Verify the bundled build directory resolves from the project root."""
    config = SiteConfig(bucket_name="site-bucket", domain_name="example.com")
    assert (PROJECT_ROOT / config.asset_path).is_dir()


class TestFrontendStackWithoutConfig:
  """Test the stack refuses to build without a config key."""

  def test_missing_config_key(self, env: cdk.Environment, asset_dir: Path) -> None:
    """Verify the error is raised before any construct is created."""
    app = cdk.App()

    with pytest.raises(ConfigError, match="cdk -c config=XXX"):
      FrontendStack(app, "Frontend", env=env, asset_path=asset_dir)

    stack = app.node.find_child("Frontend")
    assert stack.node.try_find_child("Site") is None

  def test_unknown_environment(
    self, env: cdk.Environment, asset_dir: Path, tmp_path: Path
  ) -> None:
    """Verify an undefined environment is rejected."""
    app = cdk.App(
      context={
        "config": "nope",
        "environmentsFile": str(tmp_path / "environments.yaml"),
      }
    )

    with pytest.raises(ConfigError, match="'nope'"):
      FrontendStack(app, "Frontend", env=env, asset_path=asset_dir)
