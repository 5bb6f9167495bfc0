"""
__init__.py

Makes otp_manager a package.
Exposes the HOTP/TOTP managers, their configuration models and errors.
"""

from .errors import ConfigurationError as ConfigurationError
from .errors import InvalidDigitCount as InvalidDigitCount
from .errors import InvalidLookBackward as InvalidLookBackward
from .errors import InvalidLookForward as InvalidLookForward
from .errors import InvalidSecret as InvalidSecret
from .errors import InvalidTimeStep as InvalidTimeStep
from .errors import OTPError as OTPError
from .errors import RandomSourceError as RandomSourceError
from .errors import UnknownAlgorithm as UnknownAlgorithm
from .otp import HOTPManager as HOTPManager
from .otp import OTPManager as OTPManager
from .otp import TOTPManager as TOTPManager
from .schemas import HOTPConfig as HOTPConfig
from .schemas import TOTPConfig as TOTPConfig
from .security import HashAlgorithm as HashAlgorithm
from .security import generate_secret as generate_secret
