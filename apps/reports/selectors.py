"""
리포트 데이터 조회 (1단계: DB 접근만, 집계 없음)

회원 × 월 교차 조합에 (회원, 월)이 일치하는 income/installment 거래를
왼쪽 결합한 평탄한 행 목록을 만듭니다.

필터 규칙:
    - month: 조합 자체를 해당 월로 제한
    - year: 결합된 거래 행 단위 필터 (t.year = ?)
      거래가 없는 조합은 연도가 NULL이므로 결과에서 빠집니다.
      다른 연도 거래만 있는 조합도 마찬가지입니다.
    - search: 회원 이름 부분 일치 (대소문자 무시)
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import List, Optional

from apps.core.api import storage_guard
from apps.members.models import Member
from apps.organization.models import Month
from apps.transactions.models import Transaction


@dataclass(frozen=True)
class LedgerRow:
    """회원 × 월 × (거래 또는 없음) 한 행"""
    member_id: str
    member_name: str
    month_id: int
    month_name: str
    type: Optional[str] = None  # 거래 없으면 None
    amount: Optional[int] = None
    method: Optional[str] = None
    year: Optional[str] = None


def fetch_ledger_rows(month: Optional[int] = None,
                      year: Optional[str] = None,
                      search: Optional[str] = None) -> List[LedgerRow]:
    """
    회원 × 월 × 거래 평탄화 행 조회

    Returns:
        회원 순서 × 월 순서, 같은 조합 안에서는 거래일/생성 순서
    """
    with storage_guard():
        members = Member.objects.only('id', 'name')
        months = Month.objects.all()
        transactions = Transaction.objects.dues().only(
            'member', 'month', 'type', 'amount', 'method', 'year'
        )

        if month is not None:
            months = months.filter(pk=month)
            transactions = transactions.filter(month_id=month)
        if year is not None:
            transactions = transactions.for_year(year)
        if search:
            members = members.filter(name__icontains=search)
            transactions = transactions.filter(member__name__icontains=search)

        members = list(members)
        months = list(months)
        by_pair = defaultdict(list)
        for tx in transactions:
            by_pair[(tx.member_id, tx.month_id)].append(tx)

    rows = []
    for member in members:
        for month_obj in months:
            matched = by_pair.get((member.pk, month_obj.pk))
            if matched:
                rows.extend(
                    LedgerRow(
                        member_id=str(member.pk),
                        member_name=member.name,
                        month_id=month_obj.pk,
                        month_name=month_obj.name,
                        type=tx.type,
                        amount=tx.amount,
                        method=tx.method,
                        year=tx.year or None,
                    )
                    for tx in matched
                )
            elif year is None:
                # 거래 없는 조합 (연도 필터가 있으면 NULL 연도라 제외됨)
                rows.append(LedgerRow(
                    member_id=str(member.pk),
                    member_name=member.name,
                    month_id=month_obj.pk,
                    month_name=month_obj.name,
                ))
    return rows
