import base64
import json
import logging
import math
from datetime import date, datetime
from uuid import UUID

from bson import Decimal128, ObjectId, json_util

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

ACADEMIC_YEAR_REQUIRED = "Academic year is required"
SCHOOL_ID_REQUIRED = "School ID is required"
SCHOOL_NOT_FOUND = "School not found"
INTERNAL_ERROR = "Internal Server Error"

DEFAULT_HEADERS = {
    "Content-Type": "application/json; charset=utf-8",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
}


class MissingParameter(Exception):
    """A required path parameter was absent or empty."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _json_default(value):
    # BSON types the driver hands back inside documents
    if isinstance(value, (ObjectId, Decimal128, UUID)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        # Also covers bson.Binary, a bytes subclass
        return base64.b64encode(bytes(value)).decode('ascii')
    return json_util.default(value)


def _finite(value):
    """Replace NaN and +/-Infinity with None, recursing into containers."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def encode_json(data) -> str:
    return json.dumps(_finite(data), ensure_ascii=False, allow_nan=False, default=_json_default)


def json_response(data, status: int = 200, extra_headers: dict | None = None) -> dict:
    headers = dict(DEFAULT_HEADERS)
    if extra_headers:
        headers.update(extra_headers)
    return {
        "statusCode": status,
        "headers": headers,
        "body": encode_json(data),
    }


def error_response(message: str, status: int) -> dict:
    return json_response({"error": message}, status)


def path_params(event) -> dict:
    # API gateways send null instead of {} when a route has no parameters
    return (event or {}).get('pathParameters') or {}


def require_path_param(event, name: str, message: str) -> str:
    value = path_params(event).get(name)
    if value is None or value == '':
        raise MissingParameter(message)
    return value


def all_schools_filter() -> dict:
    return {}


def year_filter(academic_year: str) -> dict:
    """Match schools where any yearlyData entry has this academic year label."""
    return {'yearlyData.academicYear.full': academic_year}


def school_id_filter(school_id: str) -> dict:
    return {'schoolId': school_id}
