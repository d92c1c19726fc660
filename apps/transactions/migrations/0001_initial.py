import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('members', '0001_initial'),
        ('organization', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('income', '수입'), ('installment', '분납'), ('expense', '지출')], db_index=True, max_length=20)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('amount', models.PositiveIntegerField()),
                ('method', models.CharField(blank=True, max_length=50)),
                ('date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('year', models.CharField(blank=True, db_index=True, max_length=4, validators=[django.core.validators.RegexValidator(message='연도는 4자리 숫자여야 합니다', regex='^\\d{4}$')])),
                ('category', models.CharField(blank=True, max_length=50)),
                ('member', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='members.member')),
                ('month', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='organization.month')),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['date', 'created_at', 'id'],
                'indexes': [models.Index(fields=['member', 'month'], name='transactions_member_month_idx'), models.Index(fields=['type', 'year'], name='transactions_type_year_idx')],
            },
        ),
    ]
