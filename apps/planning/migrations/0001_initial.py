# Generated manually for planning app

import uuid
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


SIDE_CHOICES = [('bride', '신부측'), ('groom', '신랑측')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('couples', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='WeddingInfo',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('wedding_date', models.DateField(blank=True, null=True)),
                ('groom_name', models.CharField(blank=True, max_length=50, null=True)),
                ('bride_name', models.CharField(blank=True, max_length=50, null=True)),
                ('total_budget', models.PositiveIntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('couple', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='wedding_info', to='couples.couple')),
            ],
            options={
                'db_table': 'wedding_info',
            },
        ),
        migrations.CreateModel(
            name='Venue',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=200)),
                ('address', models.CharField(max_length=300)),
                ('lat', models.FloatField(default=37.5665)),
                ('lng', models.FloatField(default=126.978)),
                ('nearest_station', models.CharField(blank=True, default='', max_length=100)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'venues',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='VenueQuote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(blank=True, null=True)),
                ('time', models.TimeField(blank=True, null=True)),
                ('estimate', models.PositiveIntegerField(default=0)),
                ('min_guests', models.PositiveIntegerField(default=0)),
                ('meal_cost', models.PositiveIntegerField(default=0)),
                ('rental_fee', models.PositiveIntegerField(default=0)),
                ('memo', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('venue', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='quotes', to='planning.venue')),
            ],
            options={
                'db_table': 'venue_quotes',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='ChecklistItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, null=True)),
                ('completed', models.BooleanField(default=False)),
                ('due_date', models.CharField(blank=True, max_length=20, null=True)),
                ('date', models.DateField(blank=True, null=True)),
                ('category', models.CharField(blank=True, max_length=50, null=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'checklist_items',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='BudgetItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('category', models.CharField(max_length=50)),
                ('budget_amount', models.PositiveIntegerField(default=0)),
                ('actual_amount', models.PositiveIntegerField(default=0)),
                ('memo', models.TextField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'budget_items',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='Guest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=50)),
                ('phone', models.CharField(blank=True, default='', max_length=30)),
                ('side', models.CharField(choices=SIDE_CHOICES, max_length=10)),
                ('relation', models.CharField(blank=True, max_length=50, null=True)),
                ('invitation_sent', models.BooleanField(default=False)),
                ('attendance', models.CharField(choices=[('pending', '미정'), ('attending', '참석'), ('declined', '불참')], default='pending', max_length=10)),
                ('table_number', models.PositiveIntegerField(blank=True, null=True)),
                ('memo', models.TextField(blank=True, null=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'guests',
                'ordering': ['created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='guest',
            index=models.Index(fields=['couple', 'side'], name='guests_couple_side_idx'),
        ),
        migrations.CreateModel(
            name='GroupGuest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=100)),
                ('side', models.CharField(choices=SIDE_CHOICES, max_length=10)),
                ('estimated_count', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('memo', models.TextField(blank=True, null=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'group_guests',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='SharedNote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('author', models.CharField(max_length=50)),
                ('content', models.TextField()),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
                ('member', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='notes', to='couples.member')),
            ],
            options={
                'db_table': 'shared_notes',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='CalendarEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('title', models.CharField(max_length=200)),
                ('date', models.DateField()),
                ('time', models.TimeField(blank=True, null=True)),
                ('category', models.CharField(max_length=50)),
                ('memo', models.TextField(blank=True, null=True)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'calendar_events',
                'ordering': ['date', 'time', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='EventCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=50)),
                ('color', models.CharField(max_length=20)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='couples.couple')),
            ],
            options={
                'db_table': 'event_categories',
                'ordering': ['created_at'],
                'verbose_name_plural': 'event categories',
            },
        ),
    ]
