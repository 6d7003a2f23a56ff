from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..errors import ServiceError
from ..services import PullRequestService
from ..serializers import (
    PullRequestCreateSerializer,
    PullRequestMergeSerializer,
    PullRequestReassignSerializer,
    PullRequestSerializer,
)
from .responses import server_error_response, service_error_response, validation_error_response


@api_view(['POST'])
def pullrequest_create(request):
    """POST /pullRequest/create - Создать PR и назначить до двух ревьюверов"""
    payload = PullRequestCreateSerializer(data=request.data)
    if not payload.is_valid():
        return validation_error_response(payload.errors)

    try:
        pr = PullRequestService.create_pull_request(
            payload.validated_data['pull_request_id'],
            payload.validated_data['pull_request_name'],
            payload.validated_data['author_id'],
        )
    except ServiceError as e:
        return service_error_response(e)
    except Exception:
        return server_error_response()

    return Response({
        'pr': PullRequestSerializer(pr).data
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
def pullrequest_merge(request):
    """POST /pullRequest/merge - Пометить PR как MERGED (идемпотентно)"""
    payload = PullRequestMergeSerializer(data=request.data)
    if not payload.is_valid():
        return validation_error_response(payload.errors)

    try:
        pr = PullRequestService.merge_pull_request(payload.validated_data['pull_request_id'])
    except ServiceError as e:
        return service_error_response(e)
    except Exception:
        return server_error_response()

    return Response({
        'pr': PullRequestSerializer(pr).data
    })


@api_view(['POST'])
def pullrequest_reassign(request):
    """POST /pullRequest/reassign - Переназначить ревьювера"""
    payload = PullRequestReassignSerializer(data=request.data)
    if not payload.is_valid():
        return validation_error_response(payload.errors)

    try:
        pr, new_reviewer_id = PullRequestService.reassign_reviewer(
            payload.validated_data['pull_request_id'],
            payload.validated_data['old_user_id'],
        )
    except ServiceError as e:
        return service_error_response(e)
    except Exception:
        return server_error_response()

    return Response({
        'pr': PullRequestSerializer(pr).data,
        'replaced_by': new_reviewer_id
    })
