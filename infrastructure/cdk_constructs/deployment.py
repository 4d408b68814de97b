"""Upload of the built site into the bucket."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteDeployment(Construct):
  """Deploys a local build directory and invalidates the whole CDN cache."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
    asset_path: Path,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "BucketDeployment",
      sources=[s3_deploy.Source.asset(str(asset_path))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=["/*"],
    )
