"""
formbuilder - declarative HTML forms

Queue form settings and input descriptors, then render them into a
single HTML string with labels, wrapping markup and submitted values
filled back in.
"""

from .core import slugify
from .fields import FieldKind, InputField
from .settings import FormSettings
from .builder import FormRenderer
from .fastapi import RequestData, request_data, render_response

__version__ = "0.1.0"
__all__ = [
    "FormRenderer",
    "FormSettings",
    "InputField",
    "FieldKind",
    "slugify",
    # FastAPI dependencies
    "RequestData",
    "request_data",
    "render_response",
]
