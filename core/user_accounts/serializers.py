from rest_framework import serializers

from core.permissions.core_config import Roles

from .dtos import PasswordChangeDTO, ProfileUpdateDTO, UserRegisterDTO
from .models import User


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for public sign-up - always creates an active member"""
    email = serializers.EmailField()
    name = serializers.CharField(min_length=2, max_length=255)
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )

    def validate_email(self, value):
        return value.lower()

    def validate(self, attrs):
        if attrs['password'] != attrs['confirm_password']:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match"})
        return attrs

    def to_dto(self):
        data = self.validated_data
        return UserRegisterDTO(email=data['email'], name=data['name'], password=data['password'])


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(style={'input_type': 'password'})


class UserProfileSerializer(serializers.ModelSerializer):
    """Read serializer for the signed-in user's own profile"""

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'image', 'is_active', 'created_at']
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """Write serializer for own name and email"""
    name = serializers.CharField(min_length=2, max_length=255, required=False)
    email = serializers.EmailField(required=False)

    def validate_email(self, value):
        return value.lower()

    def to_dto(self):
        return ProfileUpdateDTO(**self.validated_data)


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(style={'input_type': 'password'})
    new_password = serializers.CharField(min_length=6, style={'input_type': 'password'})
    confirm_password = serializers.CharField(style={'input_type': 'password'})

    def validate(self, attrs):
        if attrs['new_password'] != attrs['confirm_password']:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match"})
        return attrs

    def to_dto(self):
        return PasswordChangeDTO(
            current_password=self.validated_data['current_password'],
            new_password=self.validated_data['new_password']
        )


class UserListSerializer(serializers.ModelSerializer):
    """Back-office listing with activity counts (annotated by the queryset)"""
    registration_count = serializers.IntegerField(read_only=True, default=0)
    order_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'name', 'role', 'is_active', 'image',
            'created_at', 'registration_count', 'order_count'
        ]
        read_only_fields = fields


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Roles.choices)


class ActiveUpdateSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()
