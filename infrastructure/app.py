#!/usr/bin/env python3
"""CDK application entry point for the SPA frontend infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import ConfigError, SiteConfig
from infrastructure.stacks.frontend_stack import FrontendStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def main() -> None:
  """Create CDK app with the frontend stack for the selected environment."""
  app = cdk.App()

  try:
    site_config = SiteConfig.from_context(app.node)

    # Hosted zone lookup requires an explicit account
    account_id = get_account_id()

    FrontendStack(
      app,
      "FrontendStack",
      site_config=site_config,
      env=cdk.Environment(
        account=account_id,
        region=site_config.region,
      ),
      description=f"SPA frontend for {site_config.domain_name}",
    )
  except ConfigError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  app.synth()


if __name__ == "__main__":
  main()
