"""HMAC-signed temporary link issuer implementing LinkIssuerPort."""

from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, unquote, urlencode

from tempurl.core.exceptions import (
    ConfigurationError,
    ExpiredLinkError,
    InvalidSignatureError,
)
from tempurl.core.models import ExpiringLink, epoch_seconds, to_instant
from tempurl.core.path_utils import join_url, quote_path


if TYPE_CHECKING:
    from datetime import datetime


class SignedLinkIssuer:
    """Issues URLs carrying an expiration timestamp and an HMAC signature.

    Links look like "{base_url}/{path}?expires={epoch}&signature={hex}".
    The signature is HMAC-SHA256 over the logical path and the expiration,
    keyed with the issuer's secret, so neither can be altered without
    invalidating the link.

    issue() is a pure function of its arguments and the issuer's
    configuration: the same path and expiration always yield the same URL.

    Attributes:
        base_url: Address that serves cached resources.
        expires_param: Query parameter carrying the expiration.
        signature_param: Query parameter carrying the signature.
    """

    def __init__(
        self,
        base_url: str,
        secret: str | bytes,
        expires_param: str = "expires",
        signature_param: str = "signature",
    ) -> None:
        if not base_url:
            raise ConfigurationError("SignedLinkIssuer requires a base_url")
        if not secret:
            raise ConfigurationError("SignedLinkIssuer requires a non-empty secret")
        self.base_url = base_url.rstrip("/")
        self.expires_param = expires_param
        self.signature_param = signature_param
        self._secret = secret.encode() if isinstance(secret, str) else secret

    def _sign(self, path: str, expires: int) -> str:
        message = f"{path}\n{expires}".encode()
        return hmac.new(self._secret, message, hashlib.sha256).hexdigest()

    def issue(self, path: str, expires_at: datetime) -> ExpiringLink:
        """Build a signed link to path that is valid until expires_at.

        Args:
            path: Normalized logical path.
            expires_at: Expiration instant. Sub-second precision is dropped.

        Returns:
            ExpiringLink whose URL embeds the expiration as epoch seconds.
        """
        instant = to_instant(expires_at)
        expires = epoch_seconds(instant)
        query = urlencode(
            {
                self.expires_param: expires,
                self.signature_param: self._sign(path, expires),
            }
        )
        url = f"{join_url(self.base_url, quote_path(path))}?{query}"
        return ExpiringLink(path=path, url=url, expires_at=instant)

    def verify(self, url: str, now: datetime) -> str:
        """Check a link issued by this issuer and return its logical path.

        Args:
            url: The full link URL.
            now: Current instant, supplied by the caller.

        Returns:
            The logical path the link grants access to.

        Raises:
            InvalidSignatureError: If the link does not belong to this issuer,
                is malformed, or its path or expiration was altered.
            ExpiredLinkError: If now is at or past the link's expiration.
        """
        address, _, query = url.partition("?")
        prefix = f"{self.base_url}/"
        if not address.startswith(prefix):
            raise InvalidSignatureError(url)

        path = unquote(address[len(prefix) :])
        params = parse_qs(query)
        expires_values = params.get(self.expires_param, [])
        signature_values = params.get(self.signature_param, [])
        if not path or len(expires_values) != 1 or len(signature_values) != 1:
            raise InvalidSignatureError(url)

        try:
            expires = int(expires_values[0])
        except ValueError:
            raise InvalidSignatureError(url) from None

        expected = self._sign(path, expires).encode()
        if not hmac.compare_digest(expected, signature_values[0].encode()):
            raise InvalidSignatureError(url)

        expires_at = to_instant(expires)
        if to_instant(now) >= expires_at:
            raise ExpiredLinkError(path, expires_at)

        return path
