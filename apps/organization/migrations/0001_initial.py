import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Month',
            fields=[
                ('id', models.PositiveSmallIntegerField(primary_key=True, serialize=False, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('name', models.CharField(max_length=20)),
            ],
            options={
                'db_table': 'months',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='OrganizationSettings',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.PositiveSmallIntegerField(editable=False, primary_key=True, serialize=False)),
                ('organization_name', models.CharField(max_length=100, verbose_name='조직명')),
                ('monthly_fee', models.PositiveIntegerField(verbose_name='월회비')),
                ('active_month', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to='organization.month', verbose_name='진행 중인 월')),
            ],
            options={
                'db_table': 'settings',
                'verbose_name': '조직 설정',
                'verbose_name_plural': '조직 설정',
            },
        ),
    ]
