"""
리포트 내보내기 (표시 전용)

집계 규칙은 utils.derive_report()와 동일하며, 여기서는
금액을 통화 문자열로, 상태를 사람이 읽는 라벨로 바꾸기만 합니다.
"""
import csv
from io import BytesIO, StringIO

import openpyxl
from openpyxl.styles import Font

from .utils import STATUS_INSTALLMENT, STATUS_PAID

EXPORT_HEADERS = ['No', 'Nama Anggota', 'Bulan', 'Status', 'Jumlah', 'Metode']
CSV_FILENAME = 'laporan_pembayaran.csv'
EXCEL_FILENAME = 'laporan_pembayaran.xlsx'


def format_rupiah(amount):
    """
    인도네시아 루피아 표기

    100000 → 'Rp 100.000,00'
    """
    grouped = f"{int(amount or 0):,}".replace(',', '.')
    return f"Rp {grouped},00"


def status_label(row):
    """상태 → 표시 라벨"""
    if row.status == STATUS_PAID:
        return 'Lunas'
    if row.status == STATUS_INSTALLMENT:
        return f"Cicilan ({format_rupiah(row.installment_paid)})"
    return 'Belum Bayar'


def export_rows(report):
    """ReportRow 목록 → 내보내기용 행 (번호 1부터)"""
    return [
        [
            i,
            row.member_name,
            row.month_name,
            status_label(row),
            format_rupiah(row.amount),
            row.method,
        ]
        for i, row in enumerate(report, start=1)
    ]


def export_report_to_csv(report):
    """CSV 문자열 생성 (쉼표가 든 금액은 따옴표로 감쌈)"""
    output = StringIO()
    writer = csv.writer(output, lineterminator='\n')
    writer.writerow(EXPORT_HEADERS)
    writer.writerows(export_rows(report))
    return output.getvalue()


def export_report_to_excel(report):
    """
    엑셀 파일 생성

    금액 열은 계산이 가능하도록 숫자로, 나머지는 CSV와 같은 라벨로 채웁니다.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Laporan_Pembayaran"

    ws.append(EXPORT_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for i, row in enumerate(report, start=1):
        ws.append([
            i,
            row.member_name,
            row.month_name,
            status_label(row),
            row.amount,
            row.method,
        ])
        ws.cell(row=i + 1, column=5).number_format = '#,##0'

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
