"""CloudFront distribution for a single-page application."""

from aws_cdk import Annotations
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

SPA_FALLBACK_PAGE = "/index.html"
SPA_FALLBACK_STATUS_CODES = (400, 403, 404)


class SpaDistribution(Construct):
  """CloudFront distribution serving a private S3 bucket over HTTPS.

  Client errors are rewritten to the app shell so the client-side router
  can handle any path.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    origin_access_identity: cloudfront.IOriginAccessIdentity,
    certificate: acm.ICertificate,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=origin_access_identity,
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
      ),
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=status,
          response_http_status=200,
          response_page_path=SPA_FALLBACK_PAGE,
        )
        for status in SPA_FALLBACK_STATUS_CODES
      ],
      default_root_object="index.html",
      price_class=cloudfront.PriceClass.PRICE_CLASS_100,
      domain_names=[domain_name],
      certificate=certificate,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )

    Annotations.of(self).add_info(
      f"Errors {', '.join(map(str, SPA_FALLBACK_STATUS_CODES))} are served as "
      f"{SPA_FALLBACK_PAGE} with status 200; missing assets will not return 404"
    )
