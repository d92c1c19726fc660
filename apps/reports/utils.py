"""
납부 현황 리포트 집계 (2단계: 순수 함수)

(회원, 월) 조합마다 상태를 하나로 결정합니다.

우선순위:
    1. income 행이 하나라도 있으면 → paid, 금액 = 현재 월회비
       (기록된 거래 금액이 아님: 월회비를 바꾸면 지난 달 금액도 바뀜)
    2. installment 합계 > 0 → installment, 금액 = 분납 합계
    3. 그 외 → unpaid, 금액 0

상태 필터는 집계가 끝난 뒤에만 적용합니다.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from django.db import transaction

from apps.core.api import storage_guard
from apps.core.exceptions import InvalidFilter
from apps.organization.models import OrganizationSettings
from .selectors import LedgerRow, fetch_ledger_rows

logger = logging.getLogger(__name__)

STATUS_PAID = 'paid'
STATUS_INSTALLMENT = 'installment'
STATUS_UNPAID = 'unpaid'
STATUSES = (STATUS_PAID, STATUS_INSTALLMENT, STATUS_UNPAID)

# 결제 수단이 없을 때 표시값
NO_METHOD = '-'


@dataclass(frozen=True)
class ReportRow:
    """(회원, 월) 한 조합의 납부 현황 (저장하지 않음)"""
    member_id: str
    member_name: str
    month_id: int
    month_name: str
    status: str
    amount: int
    installment_paid: int
    method: str

    @property
    def id(self):
        return f"{self.member_id}-{self.month_id}"

    def to_dict(self):
        return {
            'id': self.id,
            'memberId': self.member_id,
            'memberName': self.member_name,
            'monthId': self.month_id,
            'month': self.month_name,
            'status': self.status,
            'amount': self.amount,
            'installmentPaid': self.installment_paid,
            'method': self.method,
        }


def validate_status(status: Optional[str]) -> Optional[str]:
    """상태 필터 검증 (빈 값은 None)"""
    if not status:
        return None
    if status not in STATUSES:
        raise InvalidFilter('status', status)
    return status


def summarize_pair(rows: List[LedgerRow], monthly_fee: int) -> ReportRow:
    """같은 (회원, 월) 행들을 하나의 현황으로 요약"""
    first = rows[0]
    income_rows = [r for r in rows if r.type == 'income']
    installment_rows = [r for r in rows if r.type == 'installment']
    installment_paid = sum(r.amount or 0 for r in installment_rows)

    if income_rows:
        status, amount, method = STATUS_PAID, monthly_fee, income_rows[0].method
    elif installment_paid > 0:
        # 가장 최근 분납의 결제 수단
        status, amount, method = STATUS_INSTALLMENT, installment_paid, installment_rows[-1].method
    else:
        status, amount, method = STATUS_UNPAID, 0, None

    return ReportRow(
        member_id=first.member_id,
        member_name=first.member_name,
        month_id=first.month_id,
        month_name=first.month_name,
        status=status,
        amount=amount,
        installment_paid=installment_paid,
        method=method or NO_METHOD,
    )


def derive_report(rows: Iterable[LedgerRow],
                  monthly_fee: int,
                  status: Optional[str] = None) -> List[ReportRow]:
    """
    평탄화 행 → (회원, 월)별 현황 목록

    Args:
        rows: fetch_ledger_rows() 결과 (입력 순서 유지)
        monthly_fee: 현재 월회비 (호출자가 설정에서 읽어 전달)
        status: 상태 필터 (paid / installment / unpaid)

    Returns:
        조합이 처음 나온 순서대로 정렬된 ReportRow 목록
    """
    status = validate_status(status)

    grouped: Dict[tuple, List[LedgerRow]] = {}
    for row in rows:
        grouped.setdefault((row.member_id, row.month_id), []).append(row)

    report = [summarize_pair(pair_rows, monthly_fee) for pair_rows in grouped.values()]

    if status:
        report = [r for r in report if r.status == status]
    return report


def generate_report(month: Optional[int] = None,
                    year: Optional[str] = None,
                    status: Optional[str] = None,
                    search: Optional[str] = None) -> List[ReportRow]:
    """
    설정 조회 + 데이터 조회 + 집계 (한 트랜잭션 안에서 읽기)

    Raises:
        InvalidFilter: 상태 필터 오류 (조회 전에 거부)
        SettingsMissing: 조직 설정 없음
        StorageUnavailable: DB 접근 실패
    """
    status = validate_status(status)

    with storage_guard(), transaction.atomic():
        monthly_fee = OrganizationSettings.get_solo().monthly_fee
        rows = fetch_ledger_rows(month=month, year=year, search=search)

    report = derive_report(rows, monthly_fee, status)
    logger.debug(f"리포트 생성: {len(rows)}행 → {len(report)}건 (월회비 {monthly_fee:,})")
    return report
