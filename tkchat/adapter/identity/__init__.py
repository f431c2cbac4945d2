"""Identity service adapter."""

from .client import MockIdentityClient, RealIdentityClient

__all__ = ["MockIdentityClient", "RealIdentityClient"]
