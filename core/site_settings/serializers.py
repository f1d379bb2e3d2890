from rest_framework import serializers

from .models import Setting


class SettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Setting
        fields = ['id', 'key', 'value', 'label', 'group', 'type']
        read_only_fields = fields


class SettingValueSerializer(serializers.Serializer):
    """Write serializer for a single setting"""
    value = serializers.CharField(allow_blank=True, trim_whitespace=False)


class SettingsBulkUpdateSerializer(serializers.Serializer):
    """Write serializer for updating several settings at once"""
    settings = serializers.DictField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=False
    )
