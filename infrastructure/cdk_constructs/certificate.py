"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate with DNS validation (no email approval needed)."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
  ) -> None:
    super().__init__(scope, id)

    # Validation records are written into the hosted zone
    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      validation=acm.CertificateValidation.from_dns(hosted_zone),
    )
