from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from modules.passgen.core.errors import GENERIC_FAILURE, PassgenError
from modules.passgen.core.generate import generate_password
from modules.passgen.core.options import RawOptions
from modules.passgen.core.rng import make_rng, parse_seed
from universe.logger import setup_logger
from universe.settings import get_settings

settings = get_settings()
log = setup_logger(settings.log_level, json_logs=settings.log_json)

app = FastAPI(title="Password Generator")

BASE_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def _parse_int(value: Any, *, label: str) -> Tuple[int | None, str | None]:
    if value is None or str(value).strip() == "":
        return None, None
    raw = str(value).strip()
    try:
        number = int(raw)
    except ValueError:
        return None, f"{label} must be a whole number."
    return number, None


def _parse_text(value: Any) -> str | None:
    if value is None or str(value) == "":
        return None
    return str(value)


@app.exception_handler(PassgenError)
async def passgen_error_handler(request: Request, exc: PassgenError):
    log.warning("generation_failed", code=exc.code, errors=exc.errors, path=request.url.path)
    return JSONResponse(
        {"error": GENERIC_FAILURE, "code": exc.code, "details": exc.errors},
        status_code=exc.status_code,
    )


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"base_path": base_path},
    )


@app.post("/generate")
def generate(
    type: str | None = Form(None),
    min_length: str | None = Form(None),
    max_length: str | None = Form(None),
    uppercase: bool = Form(False),
    numbers: bool = Form(False),
    symbols: bool = Form(False),
    separator: str | None = Form(None),
    seed: str | None = Form(None),
):
    errors: List[str] = []

    min_int, error = _parse_int(min_length, label="Min length")
    if error:
        errors.append(error)
    max_int, error = _parse_int(max_length, label="Max length")
    if error:
        errors.append(error)
    seed_int, error = parse_seed(seed)
    if error:
        errors.append(error)

    raw = RawOptions(
        type=_parse_text(type),
        min_length=min_int,
        max_length=max_int,
        uppercase=uppercase,
        numbers=numbers,
        symbols=symbols,
        separator=_parse_text(separator),
    )
    return generate_password(
        raw,
        parse_errors=errors,
        rng=make_rng(seed_int),
        max_attempts=settings.max_attempts,
    )
