from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Stock",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("symbol", models.CharField(default="", max_length=20)),
                ("company_name", models.CharField(default="", max_length=255)),
                ("purchase", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("last_div", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("industry", models.CharField(default="", max_length=100)),
                ("market_cap", models.BigIntegerField(default=0)),
            ],
        ),
    ]
