# SPDX-License-Identifier: MIT
"""
Tests to ensure no plaintext secrets appear in previews, contexts or reports.
"""

import hashlib

from leaksniff.core.redaction import (
    MASK,
    REDACTED,
    hash_secret,
    mask_in_context,
    mask_secret,
    redact_finding,
)


class TestSecretMasking:
    """Test masking of secret values."""

    def test_mask_keeps_last_four(self):
        assert mask_secret("sk_live_1234567890ABCDEFG") == "****DEFG"

    def test_mask_short_secret(self):
        assert mask_secret("abc") == "****abc"
        assert mask_secret("abcd") == "****abcd"

    def test_mask_empty_secret(self):
        assert mask_secret("") == MASK == "****"

    def test_mask_in_context_replaces_all_occurrences(self):
        line = "a=XYZ12345 b=XYZ12345"
        masked = mask_in_context(line, "XYZ12345", mask_secret("XYZ12345"))
        assert masked == "a=****2345 b=****2345"

    def test_mask_in_context_with_empty_secret(self):
        assert mask_in_context("unchanged", "", MASK) == "unchanged"


class TestSecretHash:
    """Test the stable digest used as the only full-secret identifier."""

    def test_known_digest(self):
        expected = hashlib.sha256(b"abc").hexdigest()
        assert hash_secret("abc") == f"sha256:{expected}"

    def test_stable_and_distinct(self):
        assert hash_secret("token-one") == hash_secret("token-one")
        assert hash_secret("token-one") != hash_secret("token-two")


def test_redact_finding_blanks_preview_and_context():
    finding = {"matchPreview": "****DEFG", "context": "key=****DEFG", "hash": "sha256:00"}
    redacted = redact_finding(finding)
    assert redacted["matchPreview"] == REDACTED
    assert redacted["context"] == REDACTED
    assert redacted["hash"] == "sha256:00"
    # input left untouched
    assert finding["matchPreview"] == "****DEFG"
