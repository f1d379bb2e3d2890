from rest_framework import serializers

from .dtos import EventCreateDTO, EventUpdateDTO, PhotoCreateDTO
from .models import Event, EventRegistration, Photo


class PhotoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Photo
        fields = ['id', 'url', 'caption', 'event', 'created_at']
        read_only_fields = fields


class EventSerializer(serializers.ModelSerializer):
    """Read serializer for events (registration_count annotated or computed)"""
    registration_count = serializers.SerializerMethodField()
    is_past = serializers.BooleanField(read_only=True)

    class Meta:
        model = Event
        fields = [
            'id', 'title', 'description', 'date', 'location', 'image',
            'payment_link', 'is_published', 'is_past', 'registration_count',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_registration_count(self, obj):
        count = getattr(obj, 'registration_count', None)
        return count if count is not None else obj.registrations.count()


class EventDetailSerializer(EventSerializer):
    photos = PhotoSerializer(many=True, read_only=True)

    class Meta(EventSerializer.Meta):
        fields = EventSerializer.Meta.fields + ['photos']
        read_only_fields = fields


class EventCreateSerializer(serializers.Serializer):
    """Write serializer for creating an event"""
    title = serializers.CharField(max_length=200)
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField(max_length=255)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    payment_link = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    is_published = serializers.BooleanField(required=False, default=False)

    def to_dto(self):
        return EventCreateDTO(**self.validated_data)


class EventUpdateSerializer(serializers.Serializer):
    """Write serializer for updating an event"""
    event_id = serializers.IntegerField()
    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False)
    date = serializers.DateTimeField(required=False)
    location = serializers.CharField(max_length=255, required=False)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    payment_link = serializers.URLField(max_length=500, required=False, allow_blank=True)
    is_published = serializers.BooleanField(required=False)

    def to_dto(self):
        return EventUpdateDTO(**self.validated_data)


class PublishSerializer(serializers.Serializer):
    is_published = serializers.BooleanField()


class PhotoCreateSerializer(serializers.Serializer):
    url = serializers.CharField(max_length=500)
    caption = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')

    def to_dto(self, event_id):
        return PhotoCreateDTO(event_id=event_id, **self.validated_data)


class PhotoCaptionSerializer(serializers.Serializer):
    caption = serializers.CharField(max_length=255, allow_blank=True)


class RegistrationSerializer(serializers.ModelSerializer):
    """Registration seen by the back office"""
    user_name = serializers.CharField(source='user.name', read_only=True)
    user_email = serializers.CharField(source='user.email', read_only=True)

    class Meta:
        model = EventRegistration
        fields = ['id', 'user', 'user_name', 'user_email', 'event', 'created_at']
        read_only_fields = fields


class MemberRegistrationSerializer(serializers.ModelSerializer):
    """Registration seen by the member, with the event inlined"""
    event = EventSerializer(read_only=True)

    class Meta:
        model = EventRegistration
        fields = ['id', 'event', 'created_at']
        read_only_fields = fields
