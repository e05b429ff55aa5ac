# ==========================================
# apps/couples/models.py
# ==========================================

from django.db import models
import uuid


class MemberRole(models.TextChoices):
    BRIDE = 'bride', '신부'
    GROOM = 'groom', '신랑'

    @classmethod
    def complement(cls, role):
        return cls.GROOM if role == cls.BRIDE else cls.BRIDE


class PairingState(models.TextChoices):
    EMPTY = 'empty', 'Empty'
    HALF_PAIRED = 'half_paired', 'Half paired'
    PAIRED = 'paired', 'Paired'


MAX_MEMBERS_PER_COUPLE = 2


class Couple(models.Model):
    """A pairing unit of at most two members, addressed by an invite code."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    invite_code = models.CharField(max_length=6, unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'couples'
        ordering = ['created_at']

    def __str__(self):
        return self.invite_code

    def member_count(self):
        return self.members.count()

    @property
    def pairing_state(self):
        count = self.member_count()
        if count == 0:
            return PairingState.EMPTY
        if count < MAX_MEMBERS_PER_COUPLE:
            return PairingState.HALF_PAIRED
        return PairingState.PAIRED

    def is_complete(self):
        return self.member_count() >= MAX_MEMBERS_PER_COUPLE

    def partner_of(self, member):
        return self.members.exclude(id=member.id).order_by('created_at', 'id').first()


class Member(models.Model):
    """One authenticated person bound to a couple with a role."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    couple = models.ForeignKey(
        Couple,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='members',
    )
    name = models.CharField(max_length=50)
    pin_hash = models.CharField(max_length=64)
    hash_algorithm = models.CharField(max_length=20, default='sha256')
    role = models.CharField(max_length=10, choices=MemberRole.choices, default=MemberRole.BRIDE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'members'
        ordering = ['created_at']
        constraints = [
            # Two roles per couple: caps membership at two and keeps roles complementary
            models.UniqueConstraint(fields=['couple', 'role'], name='unique_role_per_couple'),
            models.UniqueConstraint(fields=['couple', 'name'], name='unique_name_per_couple'),
        ]
        indexes = [
            models.Index(fields=['name', 'pin_hash'], name='members_name_pin_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.role})"
