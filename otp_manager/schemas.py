from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import (
    ConfigurationError,
    InvalidDigitCount,
    InvalidLookBackward,
    InvalidLookForward,
    InvalidSecret,
    InvalidTimeStep,
    UnknownAlgorithm,
)
from .security import HashAlgorithm

DEFAULT_CODE_DIGITS = 6
MAX_CODE_DIGITS = 8
DEFAULT_TIME_STEP = 30  # seconds


class HOTPConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    secret: Optional[bytes] = Field(None, min_length=1)
    code_digits: int = Field(DEFAULT_CODE_DIGITS, ge=1, le=MAX_CODE_DIGITS)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _algorithm_from_name(cls, value):
        if isinstance(value, str):
            return HashAlgorithm.from_name(value)
        return value


class TOTPConfig(HOTPConfig):
    time_step: int = Field(DEFAULT_TIME_STEP, gt=0)
    look_backward: int = Field(0, ge=0)
    look_forward: int = Field(0, ge=0)


_FIELD_ERRORS = {
    "algorithm": UnknownAlgorithm,
    "secret": InvalidSecret,
    "code_digits": InvalidDigitCount,
    "time_step": InvalidTimeStep,
    "look_backward": InvalidLookBackward,
    "look_forward": InvalidLookForward,
}


def load_config(model, **params):
    """
    Validate construction parameters against ``model``.

    The first failing field, in declaration order, decides which
    ConfigurationError subclass is raised.
    """
    try:
        return model(**params)
    except ValidationError as err:
        failed = {e["loc"][0] for e in err.errors() if e["loc"]}
        for field in model.model_fields:
            if field in failed:
                value = params.get(field)
                if field == "secret":
                    value = "<redacted>"
                raise _FIELD_ERRORS[field](f"invalid {field}: {value!r}") from err
        raise ConfigurationError(str(err)) from err
