from django.contrib import admin
from comments.models import Comment
from .models import Stock


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0


@admin.register(Stock)
class StockAdmin(admin.ModelAdmin):
    list_display = ("id", "symbol", "company_name", "industry", "purchase", "last_div", "market_cap")
    search_fields = ("symbol", "company_name")
    inlines = [CommentInline]
