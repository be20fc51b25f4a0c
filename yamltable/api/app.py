"""FastAPI app exposing the YAML and TSV renderers.

Usage:
    yamltable serve
    # => Uvicorn running on http://127.0.0.1:8000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse, JSONResponse

from .. import __version__
from ..config import API_HOST, API_PORT, LOG_LEVEL, PARSE_ERROR_MESSAGE
from ..errors import YamlTableError
from ..render.pipeline import render_sanitized
from ..tsv.render import render_tsv_sanitized
from .models import ErrorResponse, Health, YamlOption

logger = logging.getLogger(__name__)

app = FastAPI(title="yamltable", version=__version__)


@app.get("/healthz", response_model=Health)
async def healthz() -> Health:
    return Health(status="ok", version=__version__)


@app.post(
    "/api/v1/yaml",
    response_class=HTMLResponse,
    responses={400: {"model": ErrorResponse}},
)
async def render_yaml(form: YamlOption) -> Response:
    """Render a YAML document as sanitized HTML tables."""
    if not form.text:
        return HTMLResponse("")

    try:
        rendered = render_sanitized(form.text.encode("utf-8"))
    except YamlTableError as e:
        logger.warning("Rejected YAML payload (%d chars): %s", len(form.text), e)
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(message=PARSE_ERROR_MESSAGE, error=str(e)).model_dump(),
        )
    return HTMLResponse(rendered.decode("utf-8"))


@app.post("/api/v1/tsv", response_class=HTMLResponse)
async def render_tsv(form: YamlOption) -> HTMLResponse:
    """Render TSV text as a sanitized HTML table."""
    if not form.text:
        return HTMLResponse("")
    return HTMLResponse(render_tsv_sanitized(form.text.encode("utf-8")).decode("utf-8"))


def main(host: str = API_HOST, port: int = API_PORT) -> None:
    """Start the web server via uvicorn."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
