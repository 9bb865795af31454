# fleetlink/schemas/response.py
"""
Standard response envelope: {statusCode, data, message, success}.
Errors use the same shape with data=None, success=False and an errors list.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ApiResponse(BaseModel):
    statusCode: int
    data: Any = None
    message: Any = "Success"   # str, except in the legacy list-bookings layout
    success: bool = True


class ApiErrorResponse(ApiResponse):
    success: bool = False
    errors: list = []


def ok(status_code: int, data: Any, message: str = "Success") -> dict:
    return ApiResponse(statusCode=status_code, data=data, message=message,
                       success=status_code < 400).model_dump()


def error(status_code: int, message: str, errors: Optional[list] = None) -> dict:
    return ApiErrorResponse(statusCode=status_code, message=message,
                            errors=errors or []).model_dump()
