"""Response shapes shared across apps."""
from typing import Dict, List

from ninja import Schema


class MessageOut(Schema):
    message: str


class ErrorOut(Schema):
    error: str


class ValidationErrorOut(Schema):
    message: str
    errors: Dict[str, List[str]]
