# ==========================================
# apps/planning/models.py
# ==========================================

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class Side(models.TextChoices):
    BRIDE = 'bride', '신부측'
    GROOM = 'groom', '신랑측'


class Attendance(models.TextChoices):
    PENDING = 'pending', '미정'
    ATTENDING = 'attending', '참석'
    DECLINED = 'declined', '불참'


class CoupleOwnedModel(models.Model):
    """Base for every planning row. Deleting the couple deletes the row."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    couple = models.ForeignKey('couples.Couple', on_delete=models.CASCADE, related_name='+')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True


class WeddingInfo(CoupleOwnedModel):
    """Headline facts about the wedding. One row per couple."""

    couple = models.OneToOneField('couples.Couple', on_delete=models.CASCADE, related_name='wedding_info')
    wedding_date = models.DateField(blank=True, null=True)
    groom_name = models.CharField(max_length=50, blank=True, null=True)
    bride_name = models.CharField(max_length=50, blank=True, null=True)
    total_budget = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'wedding_info'

    def __str__(self):
        return f"{self.couple_id} - {self.wedding_date or 'undated'}"


class Venue(CoupleOwnedModel):
    """A wedding hall under consideration."""

    name = models.CharField(max_length=200)
    address = models.CharField(max_length=300)
    lat = models.FloatField(default=37.5665)
    lng = models.FloatField(default=126.978)
    nearest_station = models.CharField(max_length=100, blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'venues'
        ordering = ['created_at']

    def __str__(self):
        return self.name


class VenueQuote(models.Model):
    """A price quote from a venue for one date/time slot."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name='quotes')
    date = models.DateField(blank=True, null=True)
    time = models.TimeField(blank=True, null=True)
    estimate = models.PositiveIntegerField(default=0)
    min_guests = models.PositiveIntegerField(default=0)
    meal_cost = models.PositiveIntegerField(default=0)
    rental_fee = models.PositiveIntegerField(default=0)
    memo = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'venue_quotes'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.venue.name} {self.date or ''} {self.time or ''}".strip()


class ChecklistItem(CoupleOwnedModel):

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    completed = models.BooleanField(default=False)
    due_date = models.CharField(max_length=20, blank=True, null=True)
    date = models.DateField(blank=True, null=True)
    category = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        db_table = 'checklist_items'
        ordering = ['created_at']

    def __str__(self):
        return self.title


class BudgetItem(CoupleOwnedModel):

    category = models.CharField(max_length=50)
    budget_amount = models.PositiveIntegerField(default=0)
    actual_amount = models.PositiveIntegerField(default=0)
    memo = models.TextField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'budget_items'
        ordering = ['created_at']

    def __str__(self):
        return self.category


class Guest(CoupleOwnedModel):

    name = models.CharField(max_length=50)
    phone = models.CharField(max_length=30, blank=True, default='')
    side = models.CharField(max_length=10, choices=Side.choices)
    relation = models.CharField(max_length=50, blank=True, null=True)
    invitation_sent = models.BooleanField(default=False)
    attendance = models.CharField(max_length=10, choices=Attendance.choices, default=Attendance.PENDING)
    table_number = models.PositiveIntegerField(blank=True, null=True)
    memo = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'guests'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['couple', 'side'], name='guests_couple_side_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.side})"


class GroupGuest(CoupleOwnedModel):
    """Headcount-only guests (parents' acquaintances, relatives)."""

    name = models.CharField(max_length=100)
    side = models.CharField(max_length=10, choices=Side.choices)
    estimated_count = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    memo = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'group_guests'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} x{self.estimated_count}"


class SharedNote(CoupleOwnedModel):
    """Note visible to both members. Survives its author's deletion."""

    member = models.ForeignKey(
        'couples.Member',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notes',
    )
    author = models.CharField(max_length=50)
    content = models.TextField()

    class Meta:
        db_table = 'shared_notes'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.author}: {self.content[:30]}"


class CalendarEvent(CoupleOwnedModel):

    title = models.CharField(max_length=200)
    date = models.DateField()
    time = models.TimeField(blank=True, null=True)
    category = models.CharField(max_length=50)
    memo = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'calendar_events'
        ordering = ['date', 'time', 'created_at']

    def __str__(self):
        return f"{self.date} {self.title}"


class EventCategory(CoupleOwnedModel):

    name = models.CharField(max_length=50)
    color = models.CharField(max_length=20)

    class Meta:
        db_table = 'event_categories'
        ordering = ['created_at']
        verbose_name_plural = 'event categories'

    def __str__(self):
        return self.name
