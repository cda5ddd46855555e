from rest_framework import serializers
from .models import Note

TITLE_ERRORS = {
    "required": "Title is required",
    "blank": "Title is required",
    "null": "Title is required",
}


class NoteSummarySerializer(serializers.ModelSerializer):
    parentId = serializers.IntegerField(source="parent_id", read_only=True, allow_null=True)

    class Meta:
        model = Note
        fields = ["id", "title", "parentId"]


class NoteSerializer(serializers.ModelSerializer):
    parentId = serializers.IntegerField(source="parent_id", read_only=True, allow_null=True)

    class Meta:
        model = Note
        fields = ["id", "title", "content", "parentId"]


class NoteCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, error_messages=TITLE_ERRORS)
    parentId = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class NoteUpdateSerializer(NoteCreateSerializer):
    content = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False, default="")

    def validate_content(self, value):
        return value or ""
