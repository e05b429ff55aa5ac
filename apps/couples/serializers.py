from rest_framework import serializers
from .models import Couple, Member, MemberRole


PIN_FIELD_KWARGS = {
    'write_only': True,
    'style': {'input_type': 'password'},
}


class MemberSerializer(serializers.ModelSerializer):
    """Member as seen by the member themselves."""

    coupleId = serializers.UUIDField(source='couple_id', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Member
        fields = ['id', 'name', 'coupleId', 'role', 'createdAt']
        read_only_fields = fields


class PartnerSerializer(serializers.ModelSerializer):
    """Minimal info about the other member of the couple."""

    class Meta:
        model = Member
        fields = ['id', 'name', 'role']
        read_only_fields = fields


class CoupleSerializer(serializers.ModelSerializer):

    inviteCode = serializers.CharField(source='invite_code', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Couple
        fields = ['id', 'inviteCode', 'createdAt']
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Serializer for starting a new couple."""

    name = serializers.CharField(max_length=50, required=True)
    pin = serializers.RegexField(
        r'^[0-9]{4}$',
        required=True,
        error_messages={'invalid': 'PIN은 숫자 4자리여야 합니다'},
        **PIN_FIELD_KWARGS
    )
    role = serializers.ChoiceField(choices=MemberRole.choices, required=True)


class JoinSerializer(serializers.Serializer):
    """Serializer for joining a couple with an invite code."""

    name = serializers.CharField(max_length=50, required=True)
    pin = serializers.RegexField(
        r'^[0-9]{4}$',
        required=True,
        error_messages={'invalid': 'PIN은 숫자 4자리여야 합니다'},
        **PIN_FIELD_KWARGS
    )
    inviteCode = serializers.CharField(max_length=16, required=True)


class LoginSerializer(serializers.Serializer):
    """Serializer for member login. PIN shape is checked by the service."""

    name = serializers.CharField(max_length=50, required=True)
    pin = serializers.CharField(max_length=16, required=True, **PIN_FIELD_KWARGS)


class AuthResponseSerializer(serializers.Serializer):
    member = MemberSerializer()
    couple = CoupleSerializer()


class SessionResponseSerializer(serializers.Serializer):
    member = MemberSerializer(allow_null=True)
    couple = CoupleSerializer(allow_null=True)
    partner = PartnerSerializer(allow_null=True)


class InvitePreviewSerializer(serializers.Serializer):
    """Read-only projection of what a join with a code would produce."""

    valid = serializers.BooleanField()
    assignedRole = serializers.CharField(source='assigned_role', required=False)
    partnerName = serializers.CharField(source='partner_name', required=False)
    error = serializers.CharField(required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Only keys that apply to this preview are sent
        return {key: value for key, value in data.items() if value is not None}


class AdminLoginSerializer(serializers.Serializer):
    password = serializers.CharField(required=True, **PIN_FIELD_KWARGS)


class AdminMemberSerializer(serializers.ModelSerializer):

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Member
        fields = ['id', 'name', 'role', 'createdAt']
        read_only_fields = fields


class AdminCoupleSerializer(serializers.ModelSerializer):
    """Couple with its members for the admin console."""

    inviteCode = serializers.CharField(source='invite_code', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    members = AdminMemberSerializer(many=True, read_only=True)

    class Meta:
        model = Couple
        fields = ['id', 'inviteCode', 'createdAt', 'members']
        read_only_fields = fields


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()


class AdminStatusSerializer(serializers.Serializer):
    isAdmin = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
