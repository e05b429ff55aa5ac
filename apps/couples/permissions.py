from rest_framework import permissions

from apps.couples.services import CoupleIdentity, is_admin_session


class IsCoupleMember(permissions.BasePermission):
    """
    Permission: request must come from a member bound to a couple.
    """

    message = '로그인이 필요합니다'

    def has_permission(self, request, view):
        user = request.user
        return isinstance(user, CoupleIdentity) and user.couple is not None


class IsAdminSession(permissions.BasePermission):
    """
    Permission: session must carry the admin flag.
    """

    message = '관리자 권한이 필요합니다'

    def has_permission(self, request, view):
        return is_admin_session(request.session)
