import pytest
from hypothesis import given, strategies as st

from catalog.utils.tokens import REASONS, TokenIssuer, TokenStatus

TTL_MS = 30 * 60000
START = 1_700_000_000_000


class Clock:
    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now


def _issuer(clock, secret="signing-key"):
    return TokenIssuer(secret, TTL_MS, clock=clock)


class TestIssue:

    def test_payload_carries_subject_secret_and_expiry(self):
        issuer = _issuer(Clock())
        payload = issuer.decode(issuer.issue("hunter2"))
        assert payload == {"sub": "Token", "password": "hunter2", "exp": START + TTL_MS}

    def test_empty_signing_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenIssuer("", TTL_MS)


class TestValidate:

    def test_fresh_token_is_valid(self):
        issuer = _issuer(Clock())
        assert issuer.validate(f"Bearer {issuer.issue('pw')}") is TokenStatus.VALID

    def test_missing_header(self):
        assert _issuer(Clock()).validate(None) is TokenStatus.MISSING

    @pytest.mark.parametrize("header", ["", "Bearer", "Bearer ", "Bearer not-a-token", "Bearer a.b"])
    def test_malformed_header_is_invalid(self, header):
        assert _issuer(Clock()).validate(header) is TokenStatus.INVALID

    def test_token_from_another_key_is_invalid(self):
        clock = Clock()
        token = _issuer(clock, secret="other-key").issue("pw")
        assert _issuer(clock).validate(f"Bearer {token}") is TokenStatus.INVALID

    def test_tampered_payload_is_invalid(self):
        clock = Clock()
        issuer = _issuer(clock)
        message, signature = issuer.issue("pw").split(".")
        forged = _issuer(clock).issue("other").split(".")[0]
        assert forged != message
        assert issuer.validate(f"Bearer {forged}.{signature}") is TokenStatus.INVALID

    def test_scheme_prefix_is_not_checked(self):
        issuer = _issuer(Clock())
        assert issuer.validate(f"Token {issuer.issue('pw')}") is TokenStatus.VALID

    def test_valid_at_exact_expiry_then_expired(self):
        clock = Clock()
        issuer = _issuer(clock)
        header = f"Bearer {issuer.issue('pw')}"

        clock.now = START + TTL_MS
        assert issuer.validate(header) is TokenStatus.VALID

        clock.now = START + TTL_MS + 1
        assert issuer.validate(header) is TokenStatus.EXPIRED

    @given(offset=st.integers(min_value=0, max_value=TTL_MS))
    def test_valid_within_lifetime(self, offset):
        clock = Clock()
        issuer = _issuer(clock)
        header = f"Bearer {issuer.issue('pw')}"
        clock.now = START + offset
        assert issuer.validate(header) is TokenStatus.VALID

    @given(offset=st.integers(min_value=TTL_MS + 1, max_value=100 * TTL_MS))
    def test_expired_after_lifetime(self, offset):
        clock = Clock()
        issuer = _issuer(clock)
        header = f"Bearer {issuer.issue('pw')}"
        clock.now = START + offset
        assert issuer.validate(header) is TokenStatus.EXPIRED


def test_every_rejection_has_a_reason():
    assert set(REASONS) == {TokenStatus.EXPIRED, TokenStatus.MISSING, TokenStatus.INVALID}
