"""Main composite construct for the SPA frontend infrastructure."""

from pathlib import Path

from aws_cdk import CfnOutput
from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct

from infrastructure.config import ConfigError

from .certificate import DnsValidatedCertificate
from .deployment import SiteDeployment
from .distribution import SpaDistribution
from .dns import HostedZoneRecords
from .storage import PrivateSiteBucket


class FrontendSiteConstruct(Construct):
  """Complete SPA frontend infrastructure.

  Creates, in order:
  - Route 53 hosted zone lookup
  - ACM certificate (DNS validated)
  - CloudFront origin access identity
  - Private S3 bucket readable only by that identity
  - CloudFront distribution with HTTPS and SPA error fallback
  - Bucket deployment of the built assets with a full invalidation
  - Route 53 alias record for the apex domain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    domain_name: str,
    asset_path: Path,
  ) -> None:
    super().__init__(scope, id)

    if not asset_path.is_dir():
      raise ConfigError(f"Site build directory not found: {asset_path}")

    # DNS Hosted Zone (must already exist)
    self.dns = HostedZoneRecords(
      self,
      "Dns",
      domain_name=domain_name,
    )

    # Certificate (DNS validated - automatic!)
    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=domain_name,
      hosted_zone=self.dns.hosted_zone,
    )

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OriginAccessIdentity",
    )

    # Storage - only the origin access identity may touch objects
    self.bucket = PrivateSiteBucket(
      self,
      "Storage",
      bucket_name=bucket_name,
      origin_access_identity=self.origin_access_identity,
    )

    # CloudFront Distribution
    self.distribution = SpaDistribution(
      self,
      "Distribution",
      bucket=self.bucket.bucket,
      origin_access_identity=self.origin_access_identity,
      certificate=self.certificate.certificate,
      domain_name=domain_name,
    )

    # Built assets, after both bucket and distribution exist
    self.deployment = SiteDeployment(
      self,
      "Deployment",
      bucket=self.bucket.bucket,
      distribution=self.distribution.distribution,
      asset_path=asset_path,
    )

    # DNS record pointing to CloudFront
    self.alias_record = self.dns.create_alias_record(self.distribution.distribution)

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "SiteUrl",
      value=f"https://{domain_name}",
      description="Public site URL",
    )
