"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class HostedZoneRecords(Construct):
  """Existing Route 53 hosted zone and the site's alias record."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name

    # The zone must already exist; the lookup fails at synth otherwise
    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      "HostedZone",
      domain_name=domain_name,
    )

  def create_alias_record(
    self,
    distribution: cloudfront.IDistribution,
  ) -> route53.ARecord:
    """Create the apex A record aliasing the CloudFront distribution."""
    return route53.ARecord(
      self,
      "AliasRecord",
      zone=self.hosted_zone,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
