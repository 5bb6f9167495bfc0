"""
otp.py

HMAC-based (RFC 4226) and time-based (RFC 6238) one-time password managers.
"""

import hmac
import time
from typing import Optional, Protocol, runtime_checkable

from .schemas import (
    DEFAULT_CODE_DIGITS,
    DEFAULT_TIME_STEP,
    HOTPConfig,
    TOTPConfig,
    load_config,
)
from .security import (
    HashAlgorithm,
    codes_equal,
    dynamic_truncate,
    encode_counter,
    generate_secret,
    truncating_div,
)


@runtime_checkable
class OTPManager(Protocol):
    def generate(self, moving_factor: int) -> str:
        """Generate the password for a moving factor."""

    def validate(self, moving_factor: int, code: str) -> bool:
        """Check whether ``code`` matches the moving factor."""


# ---------------------------
# HOTP
# ---------------------------
class HOTPManager:
    """
    Counter-driven one-time password generator and validator.

    When ``secret`` is None a new one is drawn from the system random source,
    20 bytes for SHA1, 32 for SHA256 and 64 for SHA512. Codes are at most 8
    digits long.
    """

    __slots__ = ("_algorithm", "_digestmod", "_secret", "_code_digits", "_modulus")

    def __init__(
        self,
        algorithm,
        secret: Optional[bytes] = None,
        code_digits: int = DEFAULT_CODE_DIGITS,
    ):
        config = load_config(
            HOTPConfig, algorithm=algorithm, secret=secret, code_digits=code_digits
        )
        self._setup(config)

    @classmethod
    def from_config(cls, config: HOTPConfig) -> "HOTPManager":
        manager = cls.__new__(cls)
        manager._setup(config)
        return manager

    def _setup(self, config: HOTPConfig) -> None:
        self._algorithm = config.algorithm
        self._digestmod = config.algorithm.digestmod
        if config.secret is None:
            self._secret = generate_secret(config.algorithm)
        else:
            self._secret = bytes(config.secret)
        self._code_digits = config.code_digits
        self._modulus = 10**config.code_digits

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def secret(self) -> bytes:
        return self._secret

    @property
    def code_digits(self) -> int:
        return self._code_digits

    def generate(self, counter: int) -> str:
        digest = hmac.new(self._secret, encode_counter(counter), self._digestmod).digest()
        code = dynamic_truncate(digest) % self._modulus
        return str(code).zfill(self._code_digits)

    def validate(self, counter: int, code: str) -> bool:
        return codes_equal(self.generate(counter), code)

    def __repr__(self) -> str:
        return f"HOTPManager(algorithm={self._algorithm.name}, code_digits={self._code_digits})"


# ---------------------------
# TOTP
# ---------------------------
class TOTPManager:
    """
    Clock-driven one-time password generator and validator.

    Wraps an HOTPManager whose counter is the Unix time divided by
    ``time_step``. ``look_backward`` and ``look_forward`` are counts of whole
    steps accepted on either side of the current one during validation, to
    absorb clock drift between client and server. They do not affect
    generation; set both to 0 to accept no drift at all.
    """

    __slots__ = ("_hotp", "_time_step", "_look_backward", "_look_forward")

    def __init__(
        self,
        algorithm,
        secret: Optional[bytes] = None,
        code_digits: int = DEFAULT_CODE_DIGITS,
        time_step: int = DEFAULT_TIME_STEP,
        look_backward: int = 0,
        look_forward: int = 0,
    ):
        config = load_config(
            TOTPConfig,
            algorithm=algorithm,
            secret=secret,
            code_digits=code_digits,
            time_step=time_step,
            look_backward=look_backward,
            look_forward=look_forward,
        )
        self._setup(config)

    @classmethod
    def from_config(cls, config: TOTPConfig) -> "TOTPManager":
        manager = cls.__new__(cls)
        manager._setup(config)
        return manager

    def _setup(self, config: TOTPConfig) -> None:
        self._hotp = HOTPManager.from_config(config)
        self._time_step = config.time_step
        self._look_backward = config.look_backward
        self._look_forward = config.look_forward

    @property
    def hotp(self) -> HOTPManager:
        return self._hotp

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._hotp.algorithm

    @property
    def secret(self) -> bytes:
        return self._hotp.secret

    @property
    def code_digits(self) -> int:
        return self._hotp.code_digits

    @property
    def time_step(self) -> int:
        return self._time_step

    @property
    def look_backward(self) -> int:
        return self._look_backward

    @property
    def look_forward(self) -> int:
        return self._look_forward

    def generate(self, epoch: int) -> str:
        return self._hotp.generate(truncating_div(epoch, self._time_step))

    def validate(self, epoch: int, code: str) -> bool:
        # oldest window first
        for i in range(-self._look_backward, self._look_forward + 1):
            counter = truncating_div(epoch + i * self._time_step, self._time_step)
            if self._hotp.validate(counter, code):
                return True
        return False

    def generate_now(self) -> str:
        """Generate the code for the current wall-clock time."""
        return self.generate(int(time.time()))

    def validate_now(self, code: str) -> bool:
        """Validate ``code`` against the current wall-clock time."""
        return self.validate(int(time.time()), code)

    def __repr__(self) -> str:
        return (
            f"TOTPManager(algorithm={self.algorithm.name}, code_digits={self.code_digits}, "
            f"time_step={self._time_step}, look_backward={self._look_backward}, "
            f"look_forward={self._look_forward})"
        )
