import enum
import hashlib
import hmac
import logging
import secrets

from .errors import RandomSourceError, UnknownAlgorithm

log = logging.getLogger(__name__)

COUNTER_MASK = 0xFFFFFFFFFFFFFFFF


class HashAlgorithm(enum.Enum):
    """Hash function used for the HMAC step."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Look up a member by name or value, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownAlgorithm(f"unknown hash algorithm: {name!r}") from None

    @property
    def digestmod(self):
        return _PROFILES[self][0]

    @property
    def default_key_size(self) -> int:
        return _PROFILES[self][1]


# (hash constructor, default secret size in bytes)
_PROFILES = {
    HashAlgorithm.SHA1: (hashlib.sha1, 20),
    HashAlgorithm.SHA256: (hashlib.sha256, 32),
    HashAlgorithm.SHA512: (hashlib.sha512, 64),
}


def generate_secret(algorithm: HashAlgorithm) -> bytes:
    """Generate a random secret sized for the given algorithm."""
    size = algorithm.default_key_size
    try:
        secret = secrets.token_bytes(size)
    except OSError as err:
        raise RandomSourceError("system random source failed") from err
    log.debug("generated %d-byte secret for %s", size, algorithm.name)
    return secret


def encode_counter(counter: int) -> bytes:
    """8-byte big-endian two's complement encoding of the moving factor."""
    return (counter & COUNTER_MASK).to_bytes(8, "big")


def dynamic_truncate(digest: bytes) -> int:
    """RFC 4226 dynamic truncation to a 31-bit integer."""
    offset = digest[-1] & 0x0F
    return int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def codes_equal(expected: str, candidate: str) -> bool:
    """Constant-time comparison of two codes."""
    return hmac.compare_digest(
        expected.encode("utf-8", "surrogatepass"),
        candidate.encode("utf-8", "surrogatepass"),
    )
