from rest_framework import serializers
from comments.serializers import CommentSerializer
from .models import Stock


class StockSerializer(serializers.ModelSerializer):
    companyName = serializers.CharField(source="company_name", read_only=True)
    lastDiv = serializers.DecimalField(source="last_div", max_digits=18, decimal_places=2, read_only=True)
    marketCap = serializers.IntegerField(source="market_cap", read_only=True)
    comments = CommentSerializer(many=True, read_only=True)

    class Meta:
        model = Stock
        fields = ("id", "symbol", "companyName", "purchase", "lastDiv", "industry", "marketCap", "comments")
        read_only_fields = ("id", "symbol", "purchase", "industry")
