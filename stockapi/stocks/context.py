"""
Storage access for stocks and their comments.

A StockContext is built explicitly by whoever handles a request and passed to
the code that needs it. It only remembers which database alias to read from;
Django owns the underlying connection.
"""

import logging

from comments.models import Comment
from .models import Stock

logger = logging.getLogger(__name__)


class StockContext:
    def __init__(self, using="default"):
        self.using = using

    @property
    def stocks(self):
        """Stocks on this alias, with their comments loaded alongside."""
        return Stock.objects.using(self.using).prefetch_related("comments")

    @property
    def comments(self):
        return Comment.objects.using(self.using)

    def all_stocks(self):
        """Every stock in the store's natural row order. Database errors propagate."""
        return list(self.stocks.all())

    def find_stock(self, stock_id):
        """Return the stock with this id, or None when there is no such row."""
        try:
            return self.stocks.get(pk=stock_id)
        except Stock.DoesNotExist:
            logger.debug(f"Stock not found: {stock_id}")
            return None
