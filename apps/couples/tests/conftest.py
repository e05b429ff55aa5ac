import pytest
from django.urls import reverse
from rest_framework.test import APIClient
from apps.couples.models import MemberRole
from apps.couples.services import register_couple, join_couple


ADMIN_PASSWORD = 'wedding-admin-pass'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def groom(db):
    """First member of a half paired couple."""
    return register_couple(name='Min', pin='1234', role=MemberRole.GROOM)


@pytest.fixture
def couple(groom):
    return groom.couple


@pytest.fixture
def bride(groom):
    """Second member, completing the couple."""
    return join_couple(name='Yuna', pin='5678', invite_code=groom.couple.invite_code)


@pytest.fixture
def other_member(db):
    """Member of an unrelated couple."""
    return register_couple(name='Jisoo', pin='4321', role=MemberRole.BRIDE)


@pytest.fixture
def authenticated_client(api_client, groom):
    """Return API client logged in as the groom."""
    response = api_client.post(
        reverse('couples:login'),
        {'name': 'Min', 'pin': '1234'},
        format='json',
    )
    assert response.status_code == 200
    return api_client


@pytest.fixture
def admin_password(settings):
    settings.ADMIN_PASSWORD = ADMIN_PASSWORD
    return ADMIN_PASSWORD


@pytest.fixture
def admin_client(db, admin_password):
    """Return API client whose session carries the admin flag."""
    client = APIClient()
    response = client.post(
        reverse('couple_admin:login'),
        {'password': admin_password},
        format='json',
    )
    assert response.status_code == 200
    return client
