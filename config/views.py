import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = '로그인이 필요합니다'
GENERIC_ERROR_MESSAGE = '일시적인 오류가 발생했습니다. 잠시 후 다시 시도해주세요'


def health_check(request):
    """Liveness probe (for Render). Also touches the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return JsonResponse({'status': 'error'}, status=503)
    return JsonResponse({'status': 'ok'})


def _first_message(data):
    """Pull the first human readable message out of DRF validation output."""
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
    if isinstance(data, list) and data:
        return _first_message(data[0])
    return str(data)


def api_exception_handler(exc, context):
    """
    DRF exception handler that answers in the API's `{"error": ...}` shape.

    - NotAuthenticated always carries the login-required message
    - field validation errors keep their detail under `fields`
    - database errors become a logged, generic 500
    """
    if isinstance(exc, DatabaseError):
        logger.exception("Database error while handling %s", context['request'].path)
        return Response(
            {'error': GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {'error': LOGIN_REQUIRED_MESSAGE}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {
            'error': _first_message(response.data),
            'fields': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
