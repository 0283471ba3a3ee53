"""
Request body parser for the NinjaAPI.

Bodies must be a JSON object (or `null`, which decodes to an empty one).
Arrays and scalars are rejected before any schema sees them, since
django-ninja would otherwise pick fields out of them as if they were absent.
"""
from django.http import HttpRequest
from ninja.errors import HttpError
from ninja.parser import Parser


class JSONObjectParser(Parser):

    def parse_body(self, request: HttpRequest):
        data = super().parse_body(request)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise HttpError(400, f"request body must be a JSON object, not {type(data).__name__}")
        return data
