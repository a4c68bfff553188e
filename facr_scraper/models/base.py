from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


# Optional text that is dropped from JSON output when empty
OptionalText = Annotated[Optional[str], BeforeValidator(_empty_to_none)]


class ApiModel(BaseModel):
    """Base for models serialized into API responses.

    Assignments are validated so backfilled ids and resolved logos go through
    the same empty-to-None coercion as constructor arguments.
    """

    model_config = ConfigDict(validate_assignment=True)
