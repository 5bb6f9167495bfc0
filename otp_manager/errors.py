"""
errors.py

Exceptions raised while building an OTP manager.

Generating and validating codes never raises; everything below surfaces from
the constructors only.
"""


class OTPError(Exception):
    """Base class for every error raised by otp_manager."""


class ConfigurationError(OTPError, ValueError):
    """A construction parameter is outside its allowed range."""


class UnknownAlgorithm(ConfigurationError):
    pass


class InvalidSecret(ConfigurationError):
    pass


class InvalidDigitCount(ConfigurationError):
    pass


class InvalidTimeStep(ConfigurationError):
    pass


class InvalidLookBackward(ConfigurationError):
    pass


class InvalidLookForward(ConfigurationError):
    pass


class RandomSourceError(OTPError):
    """The system random source failed while generating a secret."""
