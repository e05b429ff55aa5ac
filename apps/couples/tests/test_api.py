import pytest
from unittest.mock import patch
from django.db import IntegrityError
from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from apps.couples.models import Couple, Member
from apps.couples.services import delete_member


def _post(client, url_name, data=None, **kwargs):
    return client.post(reverse(url_name, kwargs=kwargs or None), data or {}, format='json')


# =============================================================================
# Register
# =============================================================================

@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register_creates_couple_and_logs_in(self, api_client):
        response = _post(api_client, 'couples:register', {'name': 'Min', 'pin': '1234', 'role': 'groom'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['member']['name'] == 'Min'
        assert response.data['member']['role'] == 'groom'
        assert response.data['member']['coupleId'] == response.data['couple']['id']
        assert len(response.data['couple']['inviteCode']) == 6
        assert 'pin' not in response.data['member']
        assert 'pinHash' not in response.data['member']

        me = api_client.get(reverse('couples:me'))
        assert me.data['member']['name'] == 'Min'
        assert me.data['partner'] is None

    def test_register_path_has_no_trailing_slash(self):
        assert reverse('couples:register') == '/api/auth/register'

    @pytest.mark.parametrize('data', [
        {'name': 'Min', 'pin': '12', 'role': 'groom'},
        {'name': 'Min', 'pin': 'abcd', 'role': 'groom'},
        {'name': '   ', 'pin': '1234', 'role': 'groom'},
        {'name': 'Min', 'pin': '1234', 'role': 'witness'},
        {'name': 'Min', 'pin': '1234'},
    ])
    def test_register_invalid_input(self, api_client, data):
        response = _post(api_client, 'couples:register', data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data
        assert Couple.objects.count() == 0

    def test_register_invalid_pin_message(self, api_client):
        response = _post(api_client, 'couples:register', {'name': 'Min', 'pin': '12', 'role': 'groom'})
        assert response.data['error'] == 'PIN은 숫자 4자리여야 합니다'

    def test_register_storage_failure_is_logged_with_cause(self, api_client, groom):
        taken = groom.couple.invite_code

        with patch('apps.couples.services.pairing.generate_invite_code', return_value=taken), \
                patch('apps.couples.views.logger') as logger:
            response = _post(api_client, 'couples:register', {'name': 'Hana', 'pin': '1111', 'role': 'bride'})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': '일시적인 오류가 발생했습니다. 잠시 후 다시 시도해주세요'}

        logger.error.assert_called_once()
        args, kwargs = logger.error.call_args
        assert args[1:3] == ('POST', '/api/auth/register')
        assert isinstance(args[4], IntegrityError)
        assert isinstance(kwargs['exc_info'].__cause__, IntegrityError)


# =============================================================================
# Invite preview + join
# =============================================================================

@pytest.mark.django_db
class TestInvitePreview:
    """Tests for GET /api/auth/invite/{code}"""

    def test_preview_valid_code(self, api_client, groom):
        url = reverse('couples:invite-preview', kwargs={'code': groom.couple.invite_code})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'valid': True, 'assignedRole': 'bride', 'partnerName': 'Min'}

    def test_preview_unknown_code_is_200(self, api_client, db):
        url = reverse('couples:invite-preview', kwargs={'code': 'XXXXXX'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'valid': False, 'error': '유효하지 않은 초대 코드입니다'}

    def test_preview_full_couple(self, api_client, groom, bride):
        url = reverse('couples:invite-preview', kwargs={'code': groom.couple.invite_code})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'valid': False, 'error': '이미 커플이 완성되었습니다'}

    def test_preview_lowercase_code(self, api_client, groom):
        url = reverse('couples:invite-preview', kwargs={'code': groom.couple.invite_code.lower()})
        response = api_client.get(url)

        assert response.data['valid'] is True


@pytest.mark.django_db
class TestJoin:
    """Tests for POST /api/auth/join"""

    def test_join_completes_couple(self, api_client, groom):
        response = _post(api_client, 'couples:join', {
            'name': 'Yuna', 'pin': '5678', 'inviteCode': groom.couple.invite_code,
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['member']['role'] == 'bride'
        assert response.data['couple']['id'] == str(groom.couple_id)

        me = api_client.get(reverse('couples:me'))
        assert me.data['partner'] == {'id': str(groom.id), 'name': 'Min', 'role': 'groom'}

    def test_join_unknown_code(self, api_client, db):
        response = _post(api_client, 'couples:join', {'name': 'Yuna', 'pin': '5678', 'inviteCode': 'ABCDEF'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': '유효하지 않은 초대 코드입니다'}

    def test_join_full_couple(self, api_client, groom, bride):
        response = _post(api_client, 'couples:join', {
            'name': 'Third', 'pin': '0000', 'inviteCode': groom.couple.invite_code,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': '이미 커플이 완성되었습니다'}
        assert Member.objects.filter(couple=groom.couple).count() == 2

    def test_join_duplicate_name(self, api_client, groom):
        response = _post(api_client, 'couples:join', {
            'name': 'Min', 'pin': '5678', 'inviteCode': groom.couple.invite_code,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': '같은 이름의 멤버가 이미 있습니다'}

    def test_failed_join_does_not_log_in(self, api_client, groom, bride):
        _post(api_client, 'couples:join', {'name': 'Third', 'pin': '0000', 'inviteCode': groom.couple.invite_code})

        me = api_client.get(reverse('couples:me'))
        assert me.data['member'] is None


# =============================================================================
# Login / logout / me
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_success(self, api_client, groom):
        response = _post(api_client, 'couples:login', {'name': 'Min', 'pin': '1234'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['member']['id'] == str(groom.id)
        assert response.data['couple']['inviteCode'] == groom.couple.invite_code

    @pytest.mark.parametrize('data', [
        {'name': 'Min', 'pin': '9999'},
        {'name': 'Nobody', 'pin': '1234'},
        {'name': 'Min', 'pin': '12'},
    ])
    def test_login_failures_share_one_message(self, api_client, groom, data):
        response = _post(api_client, 'couples:login', data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': '이름 또는 PIN이 올바르지 않습니다'}

    def test_login_rotates_session_key(self, api_client, groom):
        _post(api_client, 'couples:login', {'name': 'Min', 'pin': '1234'})
        first = api_client.cookies[settings.SESSION_COOKIE_NAME].value

        _post(api_client, 'couples:login', {'name': 'Min', 'pin': '1234'})
        second = api_client.cookies[settings.SESSION_COOKIE_NAME].value

        assert first != second


@pytest.mark.django_db
class TestSession:
    """Tests for GET /api/auth/me and POST /api/auth/logout"""

    def test_me_anonymous(self, api_client):
        response = api_client.get(reverse('couples:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'member': None, 'couple': None, 'partner': None}

    def test_me_sets_csrf_cookie(self, api_client):
        response = api_client.get(reverse('couples:me'))
        assert settings.CSRF_COOKIE_NAME in response.cookies

    def test_session_persists_across_requests(self, authenticated_client, groom):
        for _ in range(3):
            response = authenticated_client.get(reverse('couples:me'))
            assert response.data['member']['id'] == str(groom.id)

    def test_logout_destroys_session(self, authenticated_client):
        old_cookie = authenticated_client.cookies[settings.SESSION_COOKIE_NAME].value

        response = _post(authenticated_client, 'couples:logout')
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}

        me = authenticated_client.get(reverse('couples:me'))
        assert me.data['member'] is None

        # The old session id is dead server side
        replay = APIClient()
        replay.cookies[settings.SESSION_COOKIE_NAME] = old_cookie
        assert replay.get(reverse('couples:me')).data['member'] is None

    def test_logout_without_session(self, api_client):
        response = _post(api_client, 'couples:logout')
        assert response.status_code == status.HTTP_200_OK

    def test_deleted_member_session_resolves_to_nothing(self, authenticated_client, groom):
        delete_member(member_id=groom.id)

        response = authenticated_client.get(reverse('couples:me'))
        assert response.data == {'member': None, 'couple': None, 'partner': None}

    def test_partner_is_reread_each_request(self, authenticated_client, groom):
        assert authenticated_client.get(reverse('couples:me')).data['partner'] is None

        _post(APIClient(), 'couples:join', {'name': 'Yuna', 'pin': '5678', 'inviteCode': groom.couple.invite_code})

        partner = authenticated_client.get(reverse('couples:me')).data['partner']
        assert partner['name'] == 'Yuna'

    def test_session_cookie_flags(self, authenticated_client):
        response = authenticated_client.get(reverse('couples:me'))
        cookie = response.cookies[settings.SESSION_COOKIE_NAME]

        assert cookie['httponly']
        assert cookie['samesite'] == 'Lax'
        assert cookie['max-age'] == 60 * 60 * 24 * 30


@pytest.mark.django_db
class TestRegenerateInvite:
    """Tests for POST /api/auth/invite/regenerate"""

    def test_regenerate(self, authenticated_client, groom):
        old_code = groom.couple.invite_code
        response = _post(authenticated_client, 'couples:invite-regenerate')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['couple']['inviteCode'] != old_code
        groom.couple.refresh_from_db()
        assert groom.couple.invite_code == response.data['couple']['inviteCode']

    def test_regenerate_requires_login(self, api_client):
        response = _post(api_client, 'couples:invite-regenerate')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': '로그인이 필요합니다'}


# =============================================================================
# End to end pairing
# =============================================================================

@pytest.mark.django_db
def test_pairing_flow_end_to_end():
    """Register, preview, join, then the code is spent."""
    min_client = APIClient()
    yuna_client = APIClient()

    registered = _post(min_client, 'couples:register', {'name': 'Min', 'pin': '1234', 'role': 'groom'})
    assert registered.status_code == status.HTTP_201_CREATED
    code = registered.data['couple']['inviteCode']

    preview_url = reverse('couples:invite-preview', kwargs={'code': code})
    assert yuna_client.get(preview_url).data == {
        'valid': True, 'assignedRole': 'bride', 'partnerName': 'Min',
    }

    joined = _post(yuna_client, 'couples:join', {'name': 'Yuna', 'pin': '5678', 'inviteCode': code})
    assert joined.status_code == status.HTTP_201_CREATED
    assert joined.data['member']['role'] == 'bride'
    assert joined.data['couple']['id'] == registered.data['couple']['id']

    assert yuna_client.get(preview_url).data == {'valid': False, 'error': '이미 커플이 완성되었습니다'}

    min_me = min_client.get(reverse('couples:me')).data
    assert min_me['partner']['name'] == 'Yuna'

    # Fresh login still works for both
    assert _post(APIClient(), 'couples:login', {'name': 'Yuna', 'pin': '5678'}).status_code == 200
    assert _post(APIClient(), 'couples:login', {'name': 'Min', 'pin': '1234'}).status_code == 200


# =============================================================================
# Admin
# =============================================================================

@pytest.mark.django_db
class TestAdminAuth:
    """Tests for /api/admin/login, /logout, /me"""

    def test_admin_login(self, api_client, admin_password):
        response = _post(api_client, 'couple_admin:login', {'password': admin_password})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}
        assert api_client.get(reverse('couple_admin:me')).data == {'isAdmin': True}

    def test_admin_login_wrong_password(self, api_client, admin_password):
        response = _post(api_client, 'couple_admin:login', {'password': 'nope'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': '비밀번호가 올바르지 않습니다'}
        assert api_client.get(reverse('couple_admin:me')).data == {'isAdmin': False}

    def test_admin_login_disabled_without_password(self, api_client, settings):
        settings.ADMIN_PASSWORD = ''
        response = _post(api_client, 'couple_admin:login', {'password': ''})
        assert response.status_code in (status.HTTP_400_BAD_REQUEST, status.HTTP_401_UNAUTHORIZED)

    def test_admin_logout(self, admin_client):
        _post(admin_client, 'couple_admin:logout')

        assert admin_client.get(reverse('couple_admin:me')).data == {'isAdmin': False}
        response = admin_client.get(reverse('couple_admin:couples'))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_flag_survives_member_login(self, admin_client, groom):
        _post(admin_client, 'couples:login', {'name': 'Min', 'pin': '1234'})

        assert admin_client.get(reverse('couple_admin:me')).data == {'isAdmin': True}

    def test_member_login_is_not_admin(self, authenticated_client):
        response = authenticated_client.get(reverse('couple_admin:couples'))
        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestAdminCouples:
    """Tests for GET /api/admin/couples and admin deletes"""

    def test_list_requires_admin(self, api_client, groom):
        response = api_client.get(reverse('couple_admin:couples'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'error': '관리자 권한이 필요합니다'}

    def test_list_couples(self, admin_client, groom, bride, other_member):
        response = admin_client.get(reverse('couple_admin:couples'))

        assert response.status_code == status.HTTP_200_OK
        assert [c['id'] for c in response.data] == [str(groom.couple_id), str(other_member.couple_id)]
        assert [m['name'] for m in response.data[0]['members']] == ['Min', 'Yuna']
        assert set(response.data[0]) == {'id', 'inviteCode', 'createdAt', 'members'}

    def test_delete_couple(self, admin_client, groom, bride):
        url = reverse('couple_admin:couple-delete', kwargs={'pk': groom.couple_id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Couple.objects.filter(id=groom.couple_id).exists()
        assert Member.objects.count() == 0

    def test_delete_missing_couple_is_204(self, admin_client, groom):
        url = reverse('couple_admin:couple-delete', kwargs={'pk': groom.couple_id})
        admin_client.delete(url)

        assert admin_client.delete(url).status_code == status.HTTP_204_NO_CONTENT

    def test_delete_requires_admin(self, authenticated_client, groom):
        url = reverse('couple_admin:couple-delete', kwargs={'pk': groom.couple_id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Couple.objects.filter(id=groom.couple_id).exists()

    def test_delete_member_reopens_couple(self, admin_client, groom, bride):
        url = reverse('couple_admin:member-delete', kwargs={'pk': bride.id})
        assert admin_client.delete(url).status_code == status.HTTP_204_NO_CONTENT

        preview = admin_client.get(reverse('couples:invite-preview', kwargs={'code': groom.couple.invite_code}))
        assert preview.data['valid'] is True
        assert preview.data['assignedRole'] == 'bride'

    def test_deleted_member_is_logged_out(self, admin_client, authenticated_client, groom):
        admin_client.delete(reverse('couple_admin:member-delete', kwargs={'pk': groom.id}))

        response = _post(authenticated_client, 'couples:invite-regenerate')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
