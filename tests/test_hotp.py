"""
test_hotp.py

Tests for the counter-driven manager.

Covers:
- Construction (auto-generated secrets, invalid parameters)
- RFC 4226 appendix D vectors
- Validation (exact matching, no normalization)
- Negative counters
"""

import pytest

from otp_manager import (
    HashAlgorithm,
    HOTPConfig,
    HOTPManager,
    InvalidDigitCount,
    InvalidSecret,
    OTPManager,
    RandomSourceError,
    UnknownAlgorithm,
)
from otp_manager import security

RFC4226_SECRET = bytes.fromhex("3132333435363738393031323334353637383930")

RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.fixture
def hotp():
    return HOTPManager(HashAlgorithm.SHA1, RFC4226_SECRET, 6)


# -----------------------
# CONSTRUCTION TESTS
# -----------------------
@pytest.mark.parametrize("algorithm", list(HashAlgorithm))
def test_new_hotp_generates_secret(algorithm):
    manager = HOTPManager(algorithm, None, 6)
    assert isinstance(manager, OTPManager)
    assert len(manager.secret) == algorithm.default_key_size
    assert manager.algorithm is algorithm
    assert manager.code_digits == 6


def test_new_hotp_keeps_given_secret(hotp):
    assert hotp.secret == RFC4226_SECRET


def test_new_hotp_algorithm_by_name():
    manager = HOTPManager("sha256", RFC4226_SECRET)
    assert manager.algorithm is HashAlgorithm.SHA256


def test_new_hotp_unknown_algorithm():
    with pytest.raises(UnknownAlgorithm):
        HOTPManager("md5", None, 6)
    with pytest.raises(UnknownAlgorithm):
        HOTPManager(-1, None, 6)


@pytest.mark.parametrize("digits", [0, -1, 9, 10])
def test_new_hotp_invalid_digits(digits):
    with pytest.raises(InvalidDigitCount):
        HOTPManager(HashAlgorithm.SHA1, None, digits)


def test_new_hotp_empty_secret():
    with pytest.raises(InvalidSecret):
        HOTPManager(HashAlgorithm.SHA1, b"", 6)


def test_new_hotp_random_source_failure(monkeypatch):
    def broken(size):
        raise OSError("no entropy")

    monkeypatch.setattr(security.secrets, "token_bytes", broken)
    with pytest.raises(RandomSourceError):
        HOTPManager(HashAlgorithm.SHA512, None, 6)
    # a supplied secret never touches the random source
    HOTPManager(HashAlgorithm.SHA512, RFC4226_SECRET, 6)


def test_hotp_from_config():
    config = HOTPConfig.model_validate(
        {"algorithm": "SHA1", "secret": RFC4226_SECRET, "code_digits": 6}
    )
    manager = HOTPManager.from_config(config)
    assert manager.generate(0) == "755224"


# -----------------------
# RFC 4226 VECTORS
# -----------------------
@pytest.mark.parametrize("counter, expected", list(enumerate(RFC4226_CODES)))
def test_hotp_generate_rfc(hotp, counter, expected):
    assert hotp.generate(counter) == expected


@pytest.mark.parametrize("counter, expected", list(enumerate(RFC4226_CODES)))
def test_hotp_validate_rfc(hotp, counter, expected):
    assert hotp.validate(counter, expected) is True


# -----------------------
# GENERATION PROPERTIES
# -----------------------
@pytest.mark.parametrize("digits", range(1, 9))
def test_hotp_code_shape(digits):
    manager = HOTPManager(HashAlgorithm.SHA256, None, digits)
    for counter in (0, 1, 42, 2**40):
        code = manager.generate(counter)
        assert len(code) == digits
        assert code.isascii() and code.isdigit()
        assert manager.validate(counter, code) is True


def test_hotp_shorter_codes_are_suffixes():
    # same truncated value, smaller modulus
    short = HOTPManager(HashAlgorithm.SHA1, RFC4226_SECRET, 4)
    assert short.generate(0) == "5224"


def test_hotp_deterministic():
    manager = HOTPManager(HashAlgorithm.SHA512, None, 8)
    assert manager.generate(123456) == manager.generate(123456)


def test_hotp_leading_zeros_preserved():
    manager = HOTPManager(HashAlgorithm.SHA1, RFC4226_SECRET, 8)
    codes = [manager.generate(counter) for counter in range(200)]
    assert all(len(code) == 8 for code in codes)
    assert any(code.startswith("0") for code in codes)


def test_hotp_negative_counter_wraps(hotp):
    assert hotp.generate(-1) == hotp.generate(2**64 - 1)
    assert hotp.validate(-1, hotp.generate(-1)) is True


# -----------------------
# VALIDATION EDGE CASES
# -----------------------
def test_hotp_validate_rejects_wrong_code(hotp):
    assert hotp.validate(0, "755225") is False
    assert hotp.validate(1, "755224") is False


def test_hotp_validate_no_normalization(hotp):
    assert hotp.validate(0, " 755224") is False
    assert hotp.validate(0, "755224\n") is False
    assert hotp.validate(0, "55224") is False
    assert hotp.validate(0, "") is False
    assert hotp.validate(0, "七五五二二四") is False
