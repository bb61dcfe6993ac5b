"""Basic temporary URL example.

This example shows the simplest usage pattern: wire a service to an
origin, ask for a temporary URL, and hand it to a client. The first
request fetches and caches the resource; later requests only issue
new links.
"""

from pathlib import Path

from tempurl import (
    Clock,
    FileCache,
    HttpFetcher,
    SignedLinkIssuer,
    TemporaryUrlService,
    configure_logging,
)


configure_logging()

# Option 1: Manual wiring (full control over adapters)
# Use this when you need a custom cache or fetcher
service = TemporaryUrlService(
    cache=FileCache(Path("./data/tempurl")),
    fetcher=HttpFetcher("https://images.example.com", max_attempts=3),
    issuer=SignedLinkIssuer("https://app.example.com/files", "change-me"),
    clock=Clock(),
)

# Option 2: Factory method (recommended for most cases)
# Picks the fetcher from the origin scheme and resolves cache_dir
# relative to the project root
# from tempurl import ServiceConfig
# service = TemporaryUrlService.from_config(
#     ServiceConfig(
#         origin="https://images.example.com",
#         link_base_url="https://app.example.com/files",
#         secret="change-me",
#     )
# )

# First call fetches from the origin and caches the content
link = service.temporary_url("avatars/42.png")
print(f"Temporary URL: {link.url}")
print(f"Valid until:   {link.expires_at.isoformat()}")

# Later calls are served from the cache, each with a fresh expiration
link = service.temporary_url("avatars/42.png", expires_in=300)

# The server side checks incoming links with the same service
path = service.verify(link.url)
print(f"Link grants access to: {path}")
