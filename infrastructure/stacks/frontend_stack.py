"""CDK stack for the SPA frontend."""

from pathlib import Path
from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import FrontendSiteConstruct
from infrastructure.config import SiteConfig, resolve_project_path


class FrontendStack(cdk.Stack):
  """Stack for the SPA frontend of one environment."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig | None = None,
    asset_path: Path | str | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    # Resolved before any construct is added to the stack
    self.site_config = site_config or SiteConfig.from_context(self.node)

    resolved_asset_path = resolve_project_path(asset_path or self.site_config.asset_path)

    self.site = FrontendSiteConstruct(
      self,
      "Site",
      bucket_name=self.site_config.bucket_name,
      domain_name=self.site_config.domain_name,
      asset_path=resolved_asset_path,
    )

    cdk.Tags.of(self).add("Project", "spa-frontend")
    cdk.Tags.of(self).add("Domain", self.site_config.domain_name)
    environment = self.node.try_get_context("config")
    if environment:
      cdk.Tags.of(self).add("Environment", environment)
