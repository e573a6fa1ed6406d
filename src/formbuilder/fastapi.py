"""
FastAPI integration: feed submitted values back into a form.

Usage:
    from formbuilder.fastapi import RequestData, render_response

    @router.post("/contact")
    async def contact(data: RequestData):
        form = contact_form()
        return render_response(form, data)
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import HTMLResponse

from .builder import FormRenderer

logger = logging.getLogger(__name__)

Values = dict[str, str | list[str]]


def _collect(values: Values, items) -> None:
    """Fold a multi-dict into ``values``; ``name[]`` keys and repeated keys become lists."""
    for key in items.keys():
        found = items.getlist(key)
        if key.endswith("[]"):
            values[key[:-2]] = [str(v) for v in found]
        elif len(found) > 1:
            values[key] = [str(v) for v in found]
        else:
            values[key] = str(found[-1])


async def request_data(request: Request) -> Values:
    """
    Query string and form body of a request as one mapping.

    Body values win over query values with the same name.
    """
    values: Values = {}
    _collect(values, request.query_params)

    form_data = await request.form()
    _collect(values, form_data)

    logger.debug(f"Collected {len(values)} request values for {request.url.path}")
    return values


RequestData = Annotated[Values, Depends(request_data)]


def render_response(
    renderer: FormRenderer,
    data: Values | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render ``renderer`` with ``data`` into an HTML response."""
    return HTMLResponse(renderer.render(data) or "", status_code=status_code)
