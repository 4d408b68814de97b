"""Pytest fixtures for CDK construct tests."""

from pathlib import Path
from typing import Any

import aws_cdk as cdk
import pytest

ACCOUNT = "123456789012"
REGION = "us-east-1"
HOSTED_ZONE_ID = "Z0123456789ABCDEFGHIJ"


def hosted_zone_context(domain_name: str) -> dict[str, Any]:
  """Cached lookup result so HostedZone.from_lookup resolves offline."""
  key = f"hosted-zone:account={ACCOUNT}:domainName={domain_name}:region={REGION}"
  return {key: {"Id": f"/hostedzone/{HOSTED_ZONE_ID}", "Name": f"{domain_name}."}}


@pytest.fixture
def env() -> cdk.Environment:
  """Explicit environment, required by hosted zone lookups."""
  return cdk.Environment(account=ACCOUNT, region=REGION)


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
  """A small built SPA."""
  dist = tmp_path / "dist"
  (dist / "assets").mkdir(parents=True)
  (dist / "index.html").write_text("<!doctype html><div id='root'></div>")
  (dist / "assets" / "main.js").write_text("console.log('app');")
  (dist / "assets" / "main.css").write_text("body { margin: 0; }")
  return dist


@pytest.fixture
def context() -> dict[str, Any]:
  """App context selecting a 'test' environment."""
  return {
    "config": "test",
    "test": {"bucketName": "site-bucket", "domainName": "example.com"},
    **hosted_zone_context("example.com"),
  }


@pytest.fixture
def app(context: dict[str, Any]) -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App(context=context)


@pytest.fixture
def zone_context() -> dict[str, Any]:
  """App context holding the example.com hosted zone lookup."""
  return hosted_zone_context("example.com")
