from django.db import models


class Stock(models.Model):
    symbol = models.CharField(max_length=20, default="")
    company_name = models.CharField(max_length=255, default="")
    purchase = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    last_div = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    industry = models.CharField(max_length=100, default="")
    market_cap = models.BigIntegerField(default=0)

    def __str__(self):
        return f"{self.symbol} ({self.company_name})"
