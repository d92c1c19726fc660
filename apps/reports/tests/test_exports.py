from io import BytesIO

import openpyxl
import pytest

from apps.reports.exports import (
    EXPORT_HEADERS,
    export_report_to_csv,
    export_report_to_excel,
    format_rupiah,
    status_label,
)
from apps.reports.utils import ReportRow


def report_row(status, amount, installment_paid=0, method='cash', name='Ana', month='Juni'):
    return ReportRow(
        member_id='m1',
        member_name=name,
        month_id=6,
        month_name=month,
        status=status,
        amount=amount,
        installment_paid=installment_paid,
        method=method,
    )


class TestFormatRupiah:

    @pytest.mark.parametrize('amount,expected', [
        (0, 'Rp 0,00'),
        (500, 'Rp 500,00'),
        (100000, 'Rp 100.000,00'),
        (1250000, 'Rp 1.250.000,00'),
        (None, 'Rp 0,00'),
    ])
    def test_format(self, amount, expected):
        assert format_rupiah(amount) == expected


class TestStatusLabel:

    def test_paid(self):
        assert status_label(report_row('paid', 100000)) == 'Lunas'

    def test_installment_shows_sum(self):
        row = report_row('installment', 50000, installment_paid=50000)
        assert status_label(row) == 'Cicilan (Rp 50.000,00)'

    def test_unpaid(self):
        assert status_label(report_row('unpaid', 0, method='-')) == 'Belum Bayar'


class TestExportCsv:

    def test_header_and_rows(self):
        report = [
            report_row('paid', 100000),
            report_row('unpaid', 0, method='-', name='Budi', month='Juli'),
        ]
        lines = export_report_to_csv(report).splitlines()

        assert lines[0] == ','.join(EXPORT_HEADERS)
        # 금액에 쉼표가 있으므로 따옴표 처리
        assert lines[1] == '1,Ana,Juni,Lunas,"Rp 100.000,00",cash'
        assert lines[2] == '2,Budi,Juli,Belum Bayar,"Rp 0,00",-'

    def test_empty_report_has_header_only(self):
        assert export_report_to_csv([]).splitlines() == [','.join(EXPORT_HEADERS)]


class TestExportExcel:

    def test_workbook_contents(self):
        report = [report_row('installment', 50000, installment_paid=50000)]
        wb = openpyxl.load_workbook(BytesIO(export_report_to_excel(report).read()))
        ws = wb.active

        assert [c.value for c in ws[1]] == EXPORT_HEADERS
        assert [c.value for c in ws[2]] == [1, 'Ana', 'Juni', 'Cicilan (Rp 50.000,00)', 50000, 'cash']
