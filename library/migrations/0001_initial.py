import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('schools', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Book',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200, verbose_name='Title')),
                ('book_no', models.CharField(max_length=50, verbose_name='Book number')),
                ('isbn', models.CharField(blank=True, max_length=20, verbose_name='ISBN')),
                ('author', models.CharField(blank=True, max_length=200, verbose_name='Author')),
                ('publisher', models.CharField(blank=True, max_length=200, verbose_name='Publisher')),
                ('category', models.CharField(blank=True, max_length=100, verbose_name='Category')),
                ('quantity', models.PositiveIntegerField(default=1, verbose_name='Quantity')),
                ('available', models.PositiveIntegerField(default=1, verbose_name='Available')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10, verbose_name='Price')),
                ('shelf_location', models.CharField(blank=True, max_length=50, verbose_name='Shelf location')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('school', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='books', to='schools.school', verbose_name='School')),
            ],
            options={
                'verbose_name': 'Book',
                'verbose_name_plural': 'Books',
                'ordering': ['title'],
            },
        ),
    ]
