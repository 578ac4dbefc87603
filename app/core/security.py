"""Webhook signature verification.

GitHub signs each delivery with HMAC-SHA256 over the exact request body and
sends the result as ``X-Hub-Signature-256: sha256=<hex>``. The body must be
verified as received: re-serializing parsed JSON can change bytes and break
the match.
"""

import hashlib
import hmac

SIGNATURE_PREFIX = "sha256="


def compute_github_signature(raw_body: bytes, secret: str) -> str:
    """Return the ``sha256=<hex>`` signature GitHub would send for this body."""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_github_signature(raw_body: bytes, provided_signature: str | None, secret: str) -> bool:
    """Check a delivery signature against the shared secret.

    Returns False for a missing signature or a length mismatch before doing
    the constant-time comparison.
    """
    if not provided_signature:
        return False

    expected = compute_github_signature(raw_body, secret).encode("utf-8")
    provided = provided_signature.encode("utf-8")

    if len(expected) != len(provided):
        return False

    return hmac.compare_digest(expected, provided)


class SignatureVerifier:
    """Verifies webhook deliveries with a secret supplied at construction."""

    def __init__(self, secret: str):
        self.secret = secret

    def verify(self, raw_body: bytes, provided_signature: str | None) -> bool:
        return verify_github_signature(raw_body, provided_signature, self.secret)
