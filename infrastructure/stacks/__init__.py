"""CDK stacks for the SPA frontend infrastructure."""

from .frontend_stack import FrontendStack

__all__ = ["FrontendStack"]
