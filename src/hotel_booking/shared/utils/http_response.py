import json
import os

DEFAULT_ALLOWED_ORIGIN = "http://localhost:5173"


def api_response(status_code: int, body: dict) -> dict:
    """Build an API Gateway Lambda proxy integration response"""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": os.getenv(
                "ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGIN
            ),
        },
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, **extra: object) -> dict:
    """Error response with a user-facing message"""
    return api_response(status_code, {"status": "error", "message": message, **extra})
