"""Temporary link issuer adapters."""

from tempurl.adapters.links.signed import SignedLinkIssuer


__all__ = ["SignedLinkIssuer"]
