"""
Form-level configuration store.

Every key is checked against a static validation table before it is
stored. A value that does not validate is refused without touching the
current setting:

    settings = FormSettings.build("/contact", {"method": "get"})
    settings.set("method", "put")      # False, still "get"
    settings.set("enctype", "multipart")
    settings.enctype                   # "multipart/form-data"
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from .core import Markup

logger = logging.getLogger(__name__)

URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"

ENCTYPE_ALIASES = {
    "urlencoded": URLENCODED,
    "multipart": MULTIPART,
}


def _expand_enctype(value: Any) -> Any:
    if isinstance(value, str):
        return ENCTYPE_ALIASES.get(value, value)
    return value


Method = Literal["post", "get"]
Enctype = Annotated[
    Literal["application/x-www-form-urlencoded", "multipart/form-data"],
    BeforeValidator(_expand_enctype),
]

# key -> validator. Keys missing from this table are not settings.
VALIDATORS: dict[str, TypeAdapter] = {
    "action": TypeAdapter(Any),
    "method": TypeAdapter(Method),
    "enctype": TypeAdapter(Enctype),
    "class": TypeAdapter(Any),
    "id": TypeAdapter(Any),
    "markup": TypeAdapter(Markup),
    "novalidate": TypeAdapter(StrictBool),
    "add_nonce": TypeAdapter(StrictBool | StrictStr),
    "add_honeypot": TypeAdapter(StrictBool),
    "form_element": TypeAdapter(StrictBool),
    "add_submit": TypeAdapter(StrictBool),
}


class FormSettings(BaseModel):
    """Attributes of the <form> element and the renderer feature flags."""

    # direct assignment is validated like set()
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    action: Any = ""
    method: Method = "post"
    enctype: Enctype = URLENCODED
    classes: Any = Field(default_factory=list, alias="class")
    id: Any = ""
    markup: Markup = "html"
    novalidate: StrictBool = False
    add_nonce: StrictBool | StrictStr = False
    add_honeypot: StrictBool = True
    form_element: StrictBool = True
    add_submit: StrictBool = True

    @classmethod
    def defaults(cls, action: Any = "") -> dict[str, Any]:
        """Default value for every key, by external key name."""
        return cls(action=action).model_dump(by_alias=True)

    @classmethod
    def build(cls, action: Any = "", overrides: dict[str, Any] | None = None) -> FormSettings:
        """
        Seed the defaults and apply overrides key by key.

        An override that fails validation leaves that key at its default,
        unknown keys are dropped.
        """
        defaults = cls.defaults(action)
        settings = cls(action=action)

        for key, value in (overrides or {}).items():
            if key not in VALIDATORS:
                logger.warning(f"Ignoring unknown form setting {key!r}")
                continue
            if not settings.set(key, value):
                settings.set(key, defaults[key])

        return settings

    def set(self, key: str, value: Any) -> bool:
        """Validate and store a setting. Returns False and keeps the old value on failure."""
        validator = VALIDATORS.get(key)
        if validator is None:
            logger.warning(f"Rejected unknown form setting {key!r}")
            return False

        try:
            validated = validator.validate_python(value)
        except ValidationError:
            logger.warning(f"Rejected value {value!r} for form setting {key!r}")
            return False

        setattr(self, "classes" if key == "class" else key, validated)
        return True

    def get(self, key: str) -> Any:
        """Read a setting by its external key name."""
        if key not in VALIDATORS:
            raise ValueError(f"Unknown form setting: {key}")
        return getattr(self, "classes" if key == "class" else key)
