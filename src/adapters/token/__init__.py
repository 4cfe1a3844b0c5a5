"""Token adapters - Access token issuance."""

from .jwt_generator import JwtTokenGenerator

__all__ = ["JwtTokenGenerator"]
