import logging

from django.middleware.csrf import get_token
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .authentication import AdminSessionAuthentication
from .permissions import IsCoupleMember, IsAdminSession
from .serializers import (
    MemberSerializer,
    CoupleSerializer,
    PartnerSerializer,
    RegisterSerializer,
    JoinSerializer,
    LoginSerializer,
    AuthResponseSerializer,
    SessionResponseSerializer,
    InvitePreviewSerializer,
    AdminLoginSerializer,
    AdminCoupleSerializer,
    AdminStatusSerializer,
    SuccessResponseSerializer,
    ErrorResponseSerializer,
)
from apps.couples.services import (
    CoupleIdentity,
    register_couple,
    join_couple,
    preview_invite,
    regenerate_invite_code,
    authenticate_member,
    bind_session,
    clear_session,
    check_admin_password,
    grant_admin,
    revoke_admin,
    is_admin_session,
    list_couples_with_members,
    delete_couple,
    delete_member,
    # Exceptions
    ValidationError,
    InvalidInviteCode,
    CoupleAlreadyComplete,
    DuplicateNameInCouple,
    CredentialMismatch,
    StorageFailure,
)

logger = logging.getLogger(__name__)


def _auth_payload(member):
    return {
        'member': MemberSerializer(member).data,
        'couple': CoupleSerializer(member.couple).data if member.couple else None,
    }


def _storage_failure_response(request, exc):
    logger.error(
        "Storage failure on %s %s: %s (cause: %r)",
        request.method, request.path, exc, exc.__cause__,
        exc_info=exc,
    )
    return Response(
        {'error': StorageFailure.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


# =============================================================================
# Member auth
# =============================================================================

@extend_schema(
    request=RegisterSerializer,
    responses={201: AuthResponseSerializer, 400: ErrorResponseSerializer},
    description="Start a new couple. Creates the couple and its first member, then logs in.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register the first member of a new couple."""
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        member = register_couple(**serializer.validated_data)
    except ValidationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except StorageFailure as e:
        return _storage_failure_response(request, e)

    bind_session(request, member)
    return Response(_auth_payload(member), status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: InvitePreviewSerializer},
    description="Preview what joining with an invite code would produce. Failures are returned as data.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def invite_preview(request, code):
    """Show the role and partner a join with this code would get."""
    preview = preview_invite(code)
    return Response(InvitePreviewSerializer(preview).data)


@extend_schema(
    request=JoinSerializer,
    responses={201: AuthResponseSerializer, 400: ErrorResponseSerializer},
    description="Join an existing couple with its invite code, then log in.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def join(request):
    """Join a couple as its second member."""
    serializer = JoinSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        member = join_couple(
            name=serializer.validated_data['name'],
            pin=serializer.validated_data['pin'],
            invite_code=serializer.validated_data['inviteCode'],
        )
    except (ValidationError, InvalidInviteCode, CoupleAlreadyComplete, DuplicateNameInCouple) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    bind_session(request, member)
    return Response(_auth_payload(member), status=status.HTTP_201_CREATED)


@extend_schema(
    request=LoginSerializer,
    responses={200: AuthResponseSerializer, 401: ErrorResponseSerializer},
    description="Log in with name and PIN.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with name and PIN."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        member = authenticate_member(**serializer.validated_data)
    except CredentialMismatch as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    bind_session(request, member)
    return Response(_auth_payload(member))


@extend_schema(
    request=None,
    responses={200: SuccessResponseSerializer},
    description="Destroy the current session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Logout by destroying the session."""
    clear_session(request)
    return Response({'success': True})


@extend_schema(
    responses={200: SessionResponseSerializer},
    description="Current member, couple and partner. All null when not logged in.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def me(request):
    """Get the identity bound to the current session."""
    # Hands the SPA a CSRF cookie for its later unsafe requests
    get_token(request)

    identity = request.user
    if not isinstance(identity, CoupleIdentity):
        return Response({'member': None, 'couple': None, 'partner': None})

    return Response({
        'member': MemberSerializer(identity.member).data,
        'couple': CoupleSerializer(identity.couple).data if identity.couple else None,
        'partner': PartnerSerializer(identity.partner).data if identity.partner else None,
    })


@extend_schema(
    request=None,
    responses={200: AuthResponseSerializer, 401: ErrorResponseSerializer},
    description="Rotate the invite code of the current member's couple.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsCoupleMember])
def regenerate_invite(request):
    """Regenerate the couple's invite code."""
    try:
        couple = regenerate_invite_code(couple_id=request.user.couple_id)
    except InvalidInviteCode as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except StorageFailure as e:
        return _storage_failure_response(request, e)

    return Response({
        'member': MemberSerializer(request.user.member).data,
        'couple': CoupleSerializer(couple).data,
    })


# =============================================================================
# Admin
# =============================================================================

@extend_schema(
    request=AdminLoginSerializer,
    responses={200: SuccessResponseSerializer, 401: ErrorResponseSerializer},
    description="Set the admin flag on the session with the shared admin password.",
    tags=['admin'],
)
@api_view(['POST'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([AllowAny])
def admin_login(request):
    """Admin login with the shared password."""
    serializer = AdminLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    if not check_admin_password(serializer.validated_data['password']):
        logger.warning("Failed admin login from %s", request.META.get('REMOTE_ADDR'))
        return Response(
            {'error': '비밀번호가 올바르지 않습니다'},
            status=status.HTTP_401_UNAUTHORIZED
        )

    grant_admin(request)
    return Response({'success': True})


@extend_schema(
    request=None,
    responses={200: SuccessResponseSerializer},
    description="Clear the admin flag. Member login on the same session is kept.",
    tags=['admin'],
)
@api_view(['POST'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([AllowAny])
def admin_logout(request):
    """Drop the admin capability from the session."""
    revoke_admin(request)
    return Response({'success': True})


@extend_schema(
    responses={200: AdminStatusSerializer},
    description="Whether the current session carries the admin flag.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([AllowAny])
def admin_status(request):
    return Response({'isAdmin': is_admin_session(request.session)})


@extend_schema(
    responses={200: AdminCoupleSerializer(many=True), 403: ErrorResponseSerializer},
    description="All couples with their members.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([IsAdminSession])
def admin_couples(request):
    """List every couple with its members."""
    couples = list_couples_with_members()
    return Response(AdminCoupleSerializer(couples, many=True).data)


@extend_schema(
    request=None,
    responses={204: None, 403: ErrorResponseSerializer},
    description="Delete a couple with its members and planning data. Unknown ids are a no-op.",
    tags=['admin'],
)
@api_view(['DELETE'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([IsAdminSession])
def admin_delete_couple(request, pk):
    delete_couple(couple_id=pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    request=None,
    responses={204: None, 403: ErrorResponseSerializer},
    description="Delete a single member. Unknown ids are a no-op.",
    tags=['admin'],
)
@api_view(['DELETE'])
@authentication_classes([AdminSessionAuthentication])
@permission_classes([IsAdminSession])
def admin_delete_member(request, pk):
    delete_member(member_id=pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
