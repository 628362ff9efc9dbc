from typing import Callable, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def form_or_json(model: Type[ModelT]) -> Callable:
    """
    Build a dependency that reads the request body as either form fields or JSON
    and validates it into `model`.

    Form values arrive as strings and are coerced by the model ("9" -> 9).
    Failures raise RequestValidationError, so clients get the usual 422.
    """

    async def dependency(request: Request) -> ModelT:
        content_type = request.headers.get("content-type", "").lower()
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            data = {key: value for key, value in form.items()}
        else:
            try:
                data = await request.json()
            except ValueError:
                raise RequestValidationError([{
                    "type": "json_invalid",
                    "loc": ("body",),
                    "msg": "Request body must be JSON or form data",
                    "input": None,
                }])

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError([
                {**err, "loc": ("body", *err["loc"])}
                for err in e.errors(include_url=False, include_context=False)
            ])

    return dependency
