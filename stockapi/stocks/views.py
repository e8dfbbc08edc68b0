import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from .context import StockContext
from .serializers import StockSerializer

logger = logging.getLogger(__name__)


def list_stocks(context):
    stocks = context.all_stocks()
    logger.info(f"Returned {len(stocks)} stocks")
    return Response(StockSerializer(stocks, many=True).data)


def get_stock(context, stock_id):
    stock = context.find_stock(stock_id)
    if stock is None:
        logger.warning(f"Stock not found: {stock_id}")
        return Response(status=status.HTTP_404_NOT_FOUND)
    return Response(StockSerializer(stock).data)


class StockListView(APIView):
    def get(self, request):
        """List all stocks."""
        return list_stocks(StockContext())


class StockDetailView(APIView):
    def get(self, request, stock_id):
        return get_stock(StockContext(), stock_id)
