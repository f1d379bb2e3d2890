from rest_framework import serializers

from .dtos import PageCreateDTO, PageUpdateDTO
from .models import Page, slug_validator


class PageSerializer(serializers.ModelSerializer):
    is_system = serializers.BooleanField(read_only=True)

    class Meta:
        model = Page
        fields = [
            'id', 'slug', 'title', 'content', 'meta_title', 'meta_description',
            'is_published', 'is_system', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PublicPageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Page
        fields = ['slug', 'title', 'content', 'meta_title', 'meta_description', 'updated_at']
        read_only_fields = fields


class PageCreateSerializer(serializers.Serializer):
    slug = serializers.CharField(max_length=100, validators=[slug_validator])
    title = serializers.CharField(max_length=200)
    content = serializers.CharField()
    meta_title = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True, default='')
    meta_description = serializers.CharField(
        max_length=500, required=False, allow_blank=True, allow_null=True, default=''
    )
    is_published = serializers.BooleanField(required=False, default=False)

    def to_dto(self):
        return PageCreateDTO(**self.validated_data)


class PageUpdateSerializer(serializers.Serializer):
    page_id = serializers.IntegerField()
    slug = serializers.CharField(max_length=100, required=False, validators=[slug_validator])
    title = serializers.CharField(max_length=200, required=False)
    content = serializers.CharField(required=False)
    meta_title = serializers.CharField(max_length=200, required=False, allow_blank=True)
    meta_description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    is_published = serializers.BooleanField(required=False)

    def to_dto(self):
        return PageUpdateDTO(**self.validated_data)


class PublishSerializer(serializers.Serializer):
    is_published = serializers.BooleanField()
