"""
KasaPro 공통 예외

호출자(뷰)가 사용자 응답을 결정할 수 있도록 원인별로 구분합니다.
    - StorageUnavailable: DB 접근 실패 (재시도 없음, 부분 결과 없음)
    - SettingsMissing: 조직 설정 싱글톤이 없음 (시딩 실패 = 설정 오류)
    - InvalidFilter: 리포트 필터 입력 오류 (집계 전에 거부)
"""


class KasaProError(Exception):
    """KasaPro 예외 기본 클래스"""

    status_code = 500
    default_message = '서버 오류'

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def as_dict(self):
        data = {'error': self.message}
        if self.details:
            data['details'] = self.details
        return data


class StorageUnavailable(KasaProError):
    """저장소(DB) 사용 불가"""

    status_code = 503
    default_message = 'Database error'


class SettingsMissing(KasaProError):
    """조직 설정 싱글톤 누락"""

    status_code = 500
    default_message = 'Settings not configured'


class InvalidFilter(KasaProError):
    """잘못된 필터 값"""

    status_code = 400
    default_message = 'Invalid filter'

    def __init__(self, field, value, message=None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for '{field}': {value!r}", field=field)
