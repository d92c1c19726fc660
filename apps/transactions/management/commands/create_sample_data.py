import random

from django.core.management.base import BaseCommand
from django.db import transaction as db_transaction

from apps.members.models import Member
from apps.organization.models import Month
from apps.organization.utils import seed_defaults
from apps.transactions.models import Transaction
from apps.transactions.utils import (
    record_dues_income,
    record_expense,
    record_installment,
)


class Command(BaseCommand):
    help = '개발용 샘플 회원/거래 데이터 생성'

    def add_arguments(self, parser):
        parser.add_argument('--members', type=int, default=10, help='생성할 회원 수')
        parser.add_argument('--year', type=str, default='2025', help='거래 연도 태그')
        parser.add_argument('--seed', type=int, default=None, help='난수 시드 (재현용)')

    @db_transaction.atomic
    def handle(self, *args, **options):
        member_count = options['members']
        year = options['year']
        rng = random.Random(options['seed'])

        self.stdout.write("=== 샘플 데이터 생성 시작 ===")
        seed_defaults()

        months = list(Month.objects.all())
        rayons = ['Rayon 1', 'Rayon 2', 'Rayon 3']
        methods = ['cash', 'transfer']

        members = [
            Member.objects.create(
                name=f'Anggota {i:02d}',
                phone=f'0812{i:08d}',
                address=f'Jl. Contoh No. {i}',
                rayon=rayons[i % len(rayons)],
            )
            for i in range(1, member_count + 1)
        ]

        for member in members:
            # 앞쪽 몇 달은 완납, 다음 달은 분납, 나머지는 미납
            paid_until = rng.randint(0, 8)
            if paid_until:
                record_dues_income(
                    member=member,
                    year=year,
                    months=months[:paid_until],
                    amount=100000,
                    method=rng.choice(methods),
                    description='Iuran bulanan',
                )
            if paid_until < len(months):
                for _ in range(rng.randint(0, 2)):
                    record_installment(
                        member=member,
                        month=months[paid_until],
                        amount=rng.choice([20000, 30000, 50000]),
                        method=rng.choice(methods),
                        description='Cicilan',
                        year=year,
                    )

        record_expense(name='Sewa tenda', category='Acara', amount=250000, method='cash')
        record_expense(name='Alat tulis', category='Operasional', amount=45000, method='cash')

        self.stdout.write(
            self.style.SUCCESS(
                f"✅ 회원 {len(members)}명, 거래 {Transaction.objects.count()}건"
            )
        )
