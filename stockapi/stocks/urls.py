from django.urls import path
from .views import StockListView, StockDetailView

urlpatterns = [
    path("api/stocks", StockListView.as_view(), name="stock-list"),
    path("api/stocks/", StockListView.as_view()),
    path("api/stocks/<int:stock_id>", StockDetailView.as_view(), name="stock-detail"),
    path("api/stocks/<int:stock_id>/", StockDetailView.as_view()),
]
