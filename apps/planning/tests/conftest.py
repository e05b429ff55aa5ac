import pytest
from django.urls import reverse
from rest_framework.test import APIClient
from apps.couples.models import MemberRole
from apps.couples.services import register_couple, join_couple
from apps.planning.models import Venue, Guest, GroupGuest, BudgetItem, CalendarEvent


def _login(name, pin):
    client = APIClient()
    response = client.post(reverse('couples:login'), {'name': name, 'pin': pin}, format='json')
    assert response.status_code == 200
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def groom(db):
    return register_couple(name='Min', pin='1234', role=MemberRole.GROOM)


@pytest.fixture
def bride(groom):
    return join_couple(name='Yuna', pin='5678', invite_code=groom.couple.invite_code)


@pytest.fixture
def couple(groom):
    return groom.couple


@pytest.fixture
def other_member(db):
    """Member of an unrelated couple."""
    return register_couple(name='Jisoo', pin='4321', role=MemberRole.BRIDE)


@pytest.fixture
def authenticated_client(groom):
    """Return API client logged in as the groom."""
    return _login('Min', '1234')


@pytest.fixture
def partner_client(bride):
    """Return API client logged in as the bride of the same couple."""
    return _login('Yuna', '5678')


@pytest.fixture
def other_client(other_member):
    """Return API client logged in as a member of another couple."""
    return _login('Jisoo', '4321')


@pytest.fixture
def venue(couple):
    return Venue.objects.create(
        couple=couple,
        name='Grand Hall',
        address='Seoul, Gangnam-gu 1',
        nearest_station='Gangnam',
    )


@pytest.fixture
def other_venue(other_member):
    return Venue.objects.create(couple=other_member.couple, name='Other Hall', address='Busan')


@pytest.fixture
def guests(couple):
    return [
        Guest.objects.create(couple=couple, name='Aunt Kim', side='bride', attendance='attending', invitation_sent=True),
        Guest.objects.create(couple=couple, name='Uncle Lee', side='groom', attendance='declined'),
        Guest.objects.create(couple=couple, name='Friend Park', side='groom'),
        GroupGuest.objects.create(couple=couple, name="Dad's colleagues", side='groom', estimated_count=10),
    ]


@pytest.fixture
def budget_items(couple):
    return [
        BudgetItem.objects.create(couple=couple, category='Venue', budget_amount=10000000, actual_amount=9000000),
        BudgetItem.objects.create(couple=couple, category='Dress', budget_amount=3000000, actual_amount=0),
    ]


@pytest.fixture
def events(couple):
    return [
        CalendarEvent.objects.create(couple=couple, title='Dress fitting', date='2026-05-02', category='dress'),
        CalendarEvent.objects.create(couple=couple, title='Hall tasting', date='2026-05-20', time='12:30', category='venue'),
        CalendarEvent.objects.create(couple=couple, title='Invitations', date='2026-06-01', category='etc'),
    ]
