"""Reading request payloads that may arrive as multipart forms or JSON."""
from typing import Any, TypeVar
from fastapi import Request
from pydantic import BaseModel, ValidationError as SchemaError
from starlette.datastructures import UploadFile
from ..core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


async def read_payload(request: Request) -> tuple[dict[str, Any], list[tuple[str, UploadFile]]]:
    """Split the body into plain fields and ``(field, file)`` pairs."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body")
        if not isinstance(body, dict):
            raise ValidationError("Request body must be an object")
        return body, []

    fields: dict[str, Any] = {}
    files: list[tuple[str, UploadFile]] = []
    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                # browsers send an empty part for an untouched file input
                if value.filename:
                    files.append((key, value))
            else:
                fields[key] = value
    return fields, files


def parse_fields(model: type[M], data: dict[str, Any], *, missing_message: str) -> M:
    try:
        return model.model_validate(data)
    except SchemaError as e:
        errors = e.errors()
        if any(err["type"] == "missing" or err.get("input") is None for err in errors):
            raise ValidationError(missing_message)
        first = errors[0]
        loc = ".".join(str(p) for p in first["loc"])
        raise ValidationError(f"{loc}: {first['msg']}")
