import logging

from fastapi import Response, status
from pydantic import BaseModel

from app.models import HttpError

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/json"
ENCODING_FAILED = HttpError(message="Failed to encode data", status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def send(data: BaseModel) -> Response:
    """Encodes a success body, falling back to a 500 error body if encoding fails."""
    try:
        body = data.model_dump_json()
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to encode response: {str(e)}")
        return send_error(ENCODING_FAILED)
    return Response(content=body, status_code=status.HTTP_200_OK, media_type=MEDIA_TYPE)


def send_error(error: HttpError) -> Response:
    """Encodes an error body with its own status; a bare 500 if even that fails."""
    try:
        body = error.model_dump_json()
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to encode error response: {str(e)}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, media_type=MEDIA_TYPE)
    return Response(content=body, status_code=error.status, media_type=MEDIA_TYPE)
