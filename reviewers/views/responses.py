import logging

from rest_framework import status
from rest_framework.response import Response

from .. import errors

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    errors.NotFoundError: status.HTTP_404_NOT_FOUND,
    errors.MemberNotFoundError: status.HTTP_404_NOT_FOUND,
    errors.AlreadyExistsError: status.HTTP_409_CONFLICT,
    errors.TeamAlreadyExistsError: status.HTTP_409_CONFLICT,
    errors.NoTeamError: status.HTTP_409_CONFLICT,
    errors.NoCandidateError: status.HTTP_409_CONFLICT,
    errors.ReviewerNotAssignedError: status.HTTP_409_CONFLICT,
    errors.AlreadyMergedError: status.HTTP_409_CONFLICT,
    errors.EmptyTeamError: status.HTTP_400_BAD_REQUEST,
    errors.InternalConsistencyError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    errors.StoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_status(exc: errors.ServiceError) -> int:
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(code: str, message: str) -> dict:
    return {
        'error': {
            'code': code,
            'message': message
        }
    }


def service_error_response(exc: errors.ServiceError) -> Response:
    status_code = error_status(exc)
    if status_code >= 500:
        logger.error("request failed code=%s op=%s: %s", exc.code, exc.op, exc.message)
    else:
        logger.warning("request rejected code=%s op=%s: %s", exc.code, exc.op, exc.message)
    return Response(error_body(exc.code, exc.message), status=status_code)


def validation_error_response(serializer_errors: dict) -> Response:
    message = '; '.join(
        f"{field}: {' '.join(str(m) for m in messages) if isinstance(messages, list) else messages}"
        for field, messages in serializer_errors.items()
    )
    return Response(error_body('VALIDATION_ERROR', message), status=status.HTTP_400_BAD_REQUEST)


def server_error_response() -> Response:
    logger.exception("unexpected error")
    return Response(
        error_body('SERVER_ERROR', 'Internal server error'),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
