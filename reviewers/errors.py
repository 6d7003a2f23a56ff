import functools

from django.db import DatabaseError


class ServiceError(Exception):
    """
    Базовая ошибка сервиса. Набор наследников закрыт,
    HTTP-статусы им назначает транспорт (views/responses.py).
    """
    code = 'SERVICE_ERROR'
    default_message = 'service error'

    def __init__(self, message: str = None, op: str = None):
        self.message = message or self.default_message
        self.op = op
        super().__init__(self.message)

    def __str__(self):
        if self.op:
            return f"{self.op}: {self.message}"
        return self.message


class NotFoundError(ServiceError):
    code = 'NOT_FOUND'
    default_message = 'resource not found'


class MemberNotFoundError(NotFoundError):
    code = 'MEMBER_NOT_FOUND'
    default_message = 'team member not found'


class AlreadyExistsError(ServiceError):
    code = 'PR_EXISTS'
    default_message = 'PR id already exists'


class TeamAlreadyExistsError(AlreadyExistsError):
    code = 'TEAM_EXISTS'
    default_message = 'team_name already exists'


class NoTeamError(ServiceError):
    code = 'NO_TEAM'
    default_message = 'author has no team'


class NoCandidateError(ServiceError):
    code = 'NO_CANDIDATE'
    default_message = 'no active replacement candidate in team'


class ReviewerNotAssignedError(ServiceError):
    code = 'NOT_ASSIGNED'
    default_message = 'reviewer is not assigned to this PR'


class AlreadyMergedError(ServiceError):
    code = 'PR_MERGED'
    default_message = 'cannot reassign on merged PR'


class EmptyTeamError(ServiceError):
    code = 'EMPTY_TEAM'
    default_message = 'team must have at least one member'


class InternalConsistencyError(ServiceError):
    code = 'INTERNAL_ERROR'
    default_message = 'inconsistent pull request state'


class StoreError(ServiceError):
    code = 'STORE_ERROR'
    default_message = 'storage failure'


def operation(op: str):
    """
    Помечает ошибки сервиса именем операции, ошибки БД оборачивает в StoreError.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ServiceError as e:
                if e.op is None:
                    e.op = op
                raise
            except DatabaseError as e:
                raise StoreError(str(e), op=op) from e
        return wrapper
    return decorator
