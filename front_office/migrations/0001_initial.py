import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('schools', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Visitor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Visitor name')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='Phone')),
                ('purpose', models.CharField(max_length=200, verbose_name='Purpose')),
                ('to_meet', models.CharField(blank=True, max_length=100, verbose_name='Person to meet')),
                ('id_card', models.CharField(blank=True, max_length=100, verbose_name='ID card')),
                ('visit_date', models.DateField(default=django.utils.timezone.localdate, verbose_name='Date')),
                ('in_time', models.TimeField(blank=True, null=True, verbose_name='In time')),
                ('out_time', models.TimeField(blank=True, null=True, verbose_name='Out time')),
                ('note', models.TextField(blank=True, verbose_name='Note')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('school', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='visitors', to='schools.school', verbose_name='School')),
            ],
            options={
                'verbose_name': 'Visitor',
                'verbose_name_plural': 'Visitors',
                'ordering': ['-visit_date', '-in_time'],
            },
        ),
        migrations.CreateModel(
            name='Enquiry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='Phone')),
                ('source', models.CharField(blank=True, max_length=100, verbose_name='Source')),
                ('class_interested', models.CharField(blank=True, max_length=50, verbose_name='Class interested')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('follow_up_date', models.DateField(blank=True, null=True, verbose_name='Follow-up date')),
                ('status', models.CharField(choices=[('active', 'Active'), ('passive', 'Passive'), ('won', 'Won'), ('lost', 'Lost'), ('dead', 'Dead')], default='active', max_length=20, verbose_name='Status')),
                ('note', models.TextField(blank=True, verbose_name='Note')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('school', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='enquiries', to='schools.school', verbose_name='School')),
            ],
            options={
                'verbose_name': 'Enquiry',
                'verbose_name_plural': 'Enquiries',
                'ordering': ['-created_at'],
            },
        ),
    ]
