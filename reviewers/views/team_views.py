from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..errors import ServiceError
from ..services import TeamService
from ..serializers import TeamAddSerializer, TeamSerializer
from .responses import (
    error_body,
    server_error_response,
    service_error_response,
    validation_error_response,
)


@api_view(['POST'])
def team_add(request):
    """POST /team/add - Создать команду из существующих пользователей"""
    payload = TeamAddSerializer(data=request.data)
    if not payload.is_valid():
        return validation_error_response(payload.errors)

    try:
        team = TeamService.create_team_with_members(
            payload.validated_data['team_name'],
            payload.validated_data['members'],
        )
    except ServiceError as e:
        return service_error_response(e)
    except Exception:
        return server_error_response()

    return Response({
        'team': TeamSerializer(team).data
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def team_get(request):
    """GET /team/get - Получить команду с участниками"""
    team_name = request.query_params.get('team_name')
    if not team_name:
        return Response(
            error_body('VALIDATION_ERROR', 'team_name parameter is required'),
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        team = TeamService.get_team_with_members(team_name)
    except ServiceError as e:
        return service_error_response(e)
    except Exception:
        return server_error_response()

    return Response(TeamSerializer(team).data)
