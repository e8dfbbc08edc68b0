"""Seed a handful of stocks into the database."""
import logging
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from stocks.models import Stock

logger = logging.getLogger(__name__)

INITIAL_STOCKS = [
    {"symbol": "AAPL", "company_name": "Apple Inc.", "purchase": Decimal("189.50"),
     "last_div": Decimal("0.24"), "industry": "Technology", "market_cap": 2_950_000_000_000},
    {"symbol": "MSFT", "company_name": "Microsoft Corporation", "purchase": Decimal("415.20"),
     "last_div": Decimal("0.75"), "industry": "Technology", "market_cap": 3_080_000_000_000},
    {"symbol": "JNJ", "company_name": "Johnson & Johnson", "purchase": Decimal("152.10"),
     "last_div": Decimal("1.24"), "industry": "Healthcare", "market_cap": 366_000_000_000},
    {"symbol": "XOM", "company_name": "Exxon Mobil Corporation", "purchase": Decimal("110.30"),
     "last_div": Decimal("0.95"), "industry": "Energy", "market_cap": 440_000_000_000},
]


class Command(BaseCommand):
    help = "Insert the initial set of stocks, skipping symbols that already exist."

    def add_arguments(self, parser):
        parser.add_argument("--clear", action="store_true", help="Delete all stocks and their comments first")

    def handle(self, *args, **options):
        created = 0
        with transaction.atomic():
            if options["clear"]:
                deleted, _ = Stock.objects.all().delete()
                logger.info(f"Deleted {deleted} rows before seeding")

            for data in INITIAL_STOCKS:
                if Stock.objects.filter(symbol=data["symbol"]).exists():
                    logger.info(f"Skipping {data['symbol']} - already exists")
                    continue

                stock = Stock.objects.create(**data)
                created += 1
                logger.info(f"Created: {stock.symbol} (id={stock.id})")

        self.stdout.write(f"Seeded {created} stocks")
