from rest_framework import serializers

from .models import Media


class MediaSerializer(serializers.ModelSerializer):
    class Meta:
        model = Media
        fields = ['id', 'name', 'url', 'type', 'mime_type', 'size', 'alt', 'created_at']
        read_only_fields = fields


class MediaAltSerializer(serializers.Serializer):
    alt = serializers.CharField(max_length=255, allow_blank=True)
