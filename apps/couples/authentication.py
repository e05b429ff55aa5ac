from rest_framework.authentication import SessionAuthentication

from apps.couples.services import resolve_identity, is_admin_session


class CoupleSessionAuthentication(SessionAuthentication):
    """
    Authenticate a request from the member bound to its session cookie.

    request.user becomes a CoupleIdentity re-read from the database.
    CSRF is enforced the same way DRF's SessionAuthentication does it.
    """

    def authenticate(self, request):
        identity = resolve_identity(request._request.session)
        if identity is None:
            return None

        self.enforce_csrf(request)
        return (identity, None)

    def authenticate_header(self, request):
        # Makes DRF answer unauthenticated requests with 401 instead of 403
        return 'Session'


class AdminPrincipal:
    """Holder of the admin capability bit. Not tied to any member."""

    is_anonymous = False
    pk = None

    def __init__(self, is_admin: bool):
        self.is_admin = is_admin

    @property
    def is_authenticated(self):
        return self.is_admin

    def __str__(self):
        return 'admin' if self.is_admin else 'visitor'


class AdminSessionAuthentication(SessionAuthentication):
    """
    Resolve the admin flag on the session.

    Every request gets a principal, so a missing flag is answered by
    IsAdminSession with 403 and its own message instead of a login prompt.
    """

    def authenticate(self, request):
        principal = AdminPrincipal(is_admin_session(request._request.session))
        if principal.is_admin:
            self.enforce_csrf(request)
        return (principal, None)
