from rest_framework import serializers
from .models import Comment


class CommentSerializer(serializers.ModelSerializer):
    stockId = serializers.IntegerField(source="stock_id", read_only=True, allow_null=True)

    class Meta:
        model = Comment
        fields = ("id", "stockId")
        read_only_fields = ("id",)
