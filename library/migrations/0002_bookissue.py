import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('library', '0001_initial'),
        ('schools', '0001_initial'),
        ('staff', '0001_initial'),
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='BookIssue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('issue_date', models.DateField(default=django.utils.timezone.localdate, verbose_name='Issue date')),
                ('due_date', models.DateField(blank=True, null=True, verbose_name='Due date')),
                ('return_date', models.DateField(blank=True, null=True, verbose_name='Return date')),
                ('note', models.CharField(blank=True, max_length=255, verbose_name='Note')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('book', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='issues', to='library.book', verbose_name='Book')),
                ('school', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='book_issues', to='schools.school', verbose_name='School')),
                ('staff', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='book_issues', to='staff.staff', verbose_name='Staff member')),
                ('student', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='book_issues', to='students.student', verbose_name='Student')),
            ],
            options={
                'verbose_name': 'Book issue',
                'verbose_name_plural': 'Book issues',
                'ordering': ['-issue_date', '-id'],
            },
        ),
    ]
