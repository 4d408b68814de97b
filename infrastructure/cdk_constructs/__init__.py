"""CDK constructs for the SPA frontend infrastructure."""

from .certificate import DnsValidatedCertificate
from .deployment import SiteDeployment
from .distribution import SpaDistribution
from .dns import HostedZoneRecords
from .frontend_site import FrontendSiteConstruct
from .storage import PrivateSiteBucket

__all__ = [
  "DnsValidatedCertificate",
  "FrontendSiteConstruct",
  "HostedZoneRecords",
  "PrivateSiteBucket",
  "SiteDeployment",
  "SpaDistribution",
]
