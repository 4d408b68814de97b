"""Private S3 bucket for the built site assets."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class PrivateSiteBucket(Construct):
  """S3 bucket readable only through a CloudFront origin access identity.

  The bucket and its objects are deleted together with the stack.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    origin_access_identity: cloudfront.OriginAccessIdentity,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      object_ownership=s3.ObjectOwnership.BUCKET_OWNER_ENFORCED,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      public_read_access=False,
      encryption=s3.BucketEncryption.S3_MANAGED,
      removal_policy=RemovalPolicy.DESTROY,
      auto_delete_objects=True,
    )

    self.bucket.add_to_resource_policy(
      iam.PolicyStatement(
        actions=["s3:*"],
        resources=[self.bucket.arn_for_objects("*")],
        principals=[
          iam.CanonicalUserPrincipal(
            origin_access_identity.cloud_front_origin_access_identity_s3_canonical_user_id
          )
        ],
      )
    )
