"""
Input serializers for GraphQL mutations.

GraphQL already enforces argument types; these serializers own the value
rules (email shape, password length, non-negative stats) and produce the
cleaned data handed to the service layer.
"""

from rest_framework import serializers

from api.messages import ErrorMessages
from users.models import normalize_email
from users.validators import MIN_PASSWORD_LENGTH, is_valid_email


class RegisterSerializer(serializers.Serializer):
    """Serializer for account registration."""

    email = serializers.CharField(allow_blank=True)
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def validate_email(self, value):
        email = normalize_email(value)
        if not is_valid_email(email):
            raise serializers.ValidationError(ErrorMessages.INVALID_EMAIL)
        return email

    def validate_password(self, value):
        if len(value) < MIN_PASSWORD_LENGTH:
            raise serializers.ValidationError(ErrorMessages.PASSWORD_TOO_SHORT)
        return value


class LoginSerializer(serializers.Serializer):
    """Serializer for user login; credentials are checked by AccountService."""

    email = serializers.CharField(allow_blank=True)
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def validate_email(self, value):
        return normalize_email(value)


class StatsSerializer(serializers.Serializer):
    brawn = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )
    charm = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )
    intelligence = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )
    reflexes = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )
    tech = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )
    luck = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=0,
        error_messages={"min_value": ErrorMessages.STAT_NEGATIVE},
    )


class SkillSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=100, error_messages={"blank": ErrorMessages.SKILL_NAME_REQUIRED}
    )
    level = serializers.IntegerField(
        min_value=0,
        error_messages={"min_value": ErrorMessages.SKILL_LEVEL_NEGATIVE},
    )


class CharacterCreateSerializer(serializers.Serializer):
    """Serializer for the createCharacter mutation arguments."""

    name = serializers.CharField(
        max_length=100,
        error_messages={
            "blank": ErrorMessages.NAME_REQUIRED,
            "max_length": ErrorMessages.NAME_TOO_LONG,
        },
    )
    campaign_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    stats = StatsSerializer(required=False, allow_null=True)
    skills = SkillSerializer(many=True, required=False, allow_null=True)
    cybernetic_ids = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    weapon_ids = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    item_ids = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    vehicle_ids = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
