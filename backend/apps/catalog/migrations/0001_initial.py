import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('category', models.CharField(choices=[('phone', 'Phone'), ('tablet', 'Tablet'), ('laptop', 'Laptop')], max_length=32)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('stock', models.IntegerField(default=0)),
                ('image', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['name'], name='product_name_idx'),
                    models.Index(fields=['category'], name='product_category_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('price__gt', 0)), name='product_price_positive'),
                    models.CheckConstraint(condition=models.Q(('stock__gte', 0)), name='product_stock_non_negative'),
                ],
            },
        ),
    ]
