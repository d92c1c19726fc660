from django.conf import settings
from django.db import migrations


def seed_months_and_settings(apps, schema_editor):
    Month = apps.get_model('organization', 'Month')
    OrganizationSettings = apps.get_model('organization', 'OrganizationSettings')

    month_names = [
        'Januari', 'Februari', 'Maret', 'April', 'Mei', 'Juni',
        'Juli', 'Agustus', 'September', 'Oktober', 'November', 'Desember',
    ]
    for month_id, name in enumerate(month_names, start=1):
        Month.objects.get_or_create(id=month_id, defaults={'name': name})

    OrganizationSettings.objects.get_or_create(
        pk=1,
        defaults={
            'organization_name': getattr(settings, 'KASAPRO_DEFAULT_ORGANIZATION_NAME', 'KasaPro'),
            'active_month_id': getattr(settings, 'KASAPRO_DEFAULT_ACTIVE_MONTH', 6),
            'monthly_fee': getattr(settings, 'KASAPRO_DEFAULT_MONTHLY_FEE', 100000),
        },
    )


def unseed_months_and_settings(apps, schema_editor):
    OrganizationSettings = apps.get_model('organization', 'OrganizationSettings')
    Month = apps.get_model('organization', 'Month')
    OrganizationSettings.objects.all().delete()
    Month.objects.all().delete()


class Migration(migrations.Migration):

    dependencies = [
        ('organization', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_months_and_settings, unseed_months_and_settings),
    ]
