import django.core.validators
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Member',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=100, verbose_name='이름')),
                ('phone', models.CharField(blank=True, max_length=20, validators=[django.core.validators.RegexValidator(message='올바른 전화번호를 입력하세요', regex='^[0-9\\-\\+\\(\\)\\s]+$')], verbose_name='전화번호')),
                ('address', models.CharField(blank=True, max_length=255, verbose_name='주소')),
                ('rayon', models.CharField(blank=True, db_index=True, max_length=50, verbose_name='구역(rayon)')),
            ],
            options={
                'db_table': 'members',
                'ordering': ['created_at', 'id'],
            },
        ),
    ]
