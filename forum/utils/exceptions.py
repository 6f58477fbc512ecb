from typing import Dict, Any
from fastapi import status


class ForumError(Exception):
    """Base class for domain errors; each carries the HTTP status it maps to."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ForumError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredential(ForumError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConstraintViolation(ForumError):
    status_code = status.HTTP_409_CONFLICT


class IOFailure(ForumError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class TemplateFailure(ForumError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class Forbidden(ForumError):
    status_code = status.HTTP_403_FORBIDDEN


def format_validation_error(validation_error) -> Dict[str, Any]:
    """Format pydantic / FastAPI validation errors into a structured response

    Example output:
    {
        "detail": "Validation failed",
        "errors": [
            {
                "field": "post_id",
                "message": "Invalid number format: Input should be a valid integer",
                "type": "int_parsing",
                "input": "abc"
            }
        ],
        "error_count": 1
    }
    """
    errors = []

    for error in validation_error.errors():
        field_path = ".".join(str(loc) for loc in error["loc"])

        # Clean up field names for better readability
        field_display = field_path.replace("body.", "").replace("__root__.", "")

        error_detail = {
            "field": field_display,
            "message": error["msg"],
            "type": error["type"],
            "input": str(error.get("input", ""))[:100]
        }

        if error["type"] == "type_error":
            error_detail["message"] = f"Invalid type: {error['msg']}"
        elif error["type"] in ["int_parsing", "float_parsing"]:
            error_detail["message"] = f"Invalid number format: {error['msg']}"

        errors.append(error_detail)

    return {
        "detail": "Validation failed",
        "errors": errors,
        "error_count": len(errors)
    }
