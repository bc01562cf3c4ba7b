"""
백엔드 리소스 API

리소스마다 동일한 list/get/create/update/delete 연산을 제공하고,
리소스별 추가 엔드포인트는 하위 클래스에 정의합니다.
"""

from typing import Optional

from oripro_dashboard.api.client import ApiClient
from oripro_dashboard.api.result import ApiResult


class ResourceApi:
    """공통 CRUD 엔드포인트"""

    base_path: str = ''

    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params) -> ApiResult:
        """목록 조회 (None 값 파라미터는 전송하지 않음)"""
        return self.client.get(self.base_path, params=params)

    def get(self, item_id) -> ApiResult:
        return self.client.get(f"{self.base_path}/{item_id}")

    def create(self, data: dict) -> ApiResult:
        return self.client.post(self.base_path, data)

    def update(self, item_id, data: dict) -> ApiResult:
        return self.client.put(f"{self.base_path}/{item_id}", data)

    def delete(self, item_id) -> ApiResult:
        return self.client.delete(f"{self.base_path}/{item_id}")


class LoggedResourceApi(ResourceApi):
    """변경 이력(logs) 엔드포인트가 있는 리소스"""

    def logs(self, item_id, **params) -> ApiResult:
        return self.client.get(f"{self.base_path}/{item_id}/logs", params=params)


class AuthApi:
    """인증 엔드포인트"""

    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> ApiResult:
        """
        자격 증명 로그인

        Returns:
            data가 `{token, user}`인 ApiResult
        """
        return self.client.post('/api/auth/login', {'email': email, 'password': password})

    def forgot_password(self, email: str) -> ApiResult:
        return self.client.post('/api/auth/forgot-password', {'email': email})

    def reset_password(self, uid: str, token: str, new_password: str) -> ApiResult:
        """
        메일 링크의 uid/token으로 비밀번호 설정

        비밀번호 재설정과 최초 비밀번호 생성 모두 이 엔드포인트를 사용합니다.
        """
        return self.client.post('/api/auth/reset-password', {
            'uid': uid,
            'token': token,
            'newPassword': new_password
        })


class UsersApi(LoggedResourceApi):
    base_path = '/api/users'

    def sidebar(self) -> ApiResult:
        """현재 사용자의 사이드바 트리 (`{navMain: [...]}`)"""
        return self.client.get(f"{self.base_path}/sidebar")

    def menus(self) -> ApiResult:
        """현재 사용자의 메뉴 권한 트리 (`{menus: [...]}`)"""
        return self.client.get(f"{self.base_path}/menus")

    def permissions(self) -> ApiResult:
        return self.client.get(f"{self.base_path}/permissions")

    def check_menu_access(self, path: str) -> ApiResult:
        """
        경로 접근 가능 여부 확인

        Args:
            path: 가공하지 않은 현재 경로

        Returns:
            data가 `{hasAccess: bool}`인 ApiResult
        """
        return self.client.get(f"{self.base_path}/check-menu-access", params={'path': path})


class RolesApi(ResourceApi):
    base_path = '/api/roles'


class AssetsApi(LoggedResourceApi):
    base_path = '/api/assets'


class UnitsApi(LoggedResourceApi):
    base_path = '/api/units'


class TenantsApi(LoggedResourceApi):
    base_path = '/api/tenants'

    def payment_logs(self, tenant_id, **params) -> ApiResult:
        return self.client.get(f"{self.base_path}/{tenant_id}/payment-logs", params=params)

    def deposit_logs(self, tenant_id, **params) -> ApiResult:
        return self.client.get(f"{self.base_path}/{tenant_id}/deposit-logs", params=params)

    def create_payment(self, tenant_id, data: dict) -> ApiResult:
        return self.client.post(f"{self.base_path}/{tenant_id}/payments", data)

    def upload_file(self, filename: str, content: bytes, file_type: str) -> ApiResult:
        """
        신분증/계약서 업로드

        Args:
            file_type: 'identification' 또는 'contract'
        """
        type_code = '1' if file_type == 'identification' else '2'
        return self.client.upload(
            '/api/tenant-uploads',
            files={'file': (filename, content)},
            fields={'type': type_code}
        )


class TasksApi(ResourceApi):
    base_path = '/api/tasks'


class TaskGroupsApi(ResourceApi):
    base_path = '/api/task-groups'


class ScanInfoApi(ResourceApi):
    base_path = '/api/scan-infos'


class MenusApi(ResourceApi):
    base_path = '/api/menus'

    def parents(self) -> ApiResult:
        """상위 메뉴로 선택 가능한 메뉴 목록"""
        return self.client.get(f"{self.base_path}/parents")


class ComplaintReportsApi(LoggedResourceApi):
    base_path = '/api/complaint-reports'


class AttendanceApi:
    """출퇴근 엔드포인트"""

    base_path = '/api/attendance'

    def __init__(self, client: ApiClient):
        self.client = client

    def check_radius(self, latitude: float, longitude: float, asset_id) -> ApiResult:
        return self.client.post(f"{self.base_path}/check-radius", {
            'latitude': latitude,
            'longitude': longitude,
            'asset_id': asset_id
        })

    def check_in(self, asset_id, latitude: float, longitude: float, notes: Optional[str] = None) -> ApiResult:
        return self.client.post(f"{self.base_path}/check-in", {
            'asset_id': asset_id,
            'latitude': latitude,
            'longitude': longitude,
            'notes': notes
        })

    def check_out(self, asset_id, latitude: float, longitude: float, notes: Optional[str] = None) -> ApiResult:
        return self.client.post(f"{self.base_path}/check-out", {
            'asset_id': asset_id,
            'latitude': latitude,
            'longitude': longitude,
            'notes': notes
        })

    def today_status(self, asset_id) -> ApiResult:
        return self.client.get(f"{self.base_path}/today-status/{asset_id}")

    def weekly_history(self, asset_id) -> ApiResult:
        return self.client.get(f"{self.base_path}/weekly-history", params={'asset_id': asset_id})

    def user_history(self, user_id, date: Optional[str] = None) -> ApiResult:
        return self.client.get(f"{self.base_path}/user/{user_id}/history", params={'date': date})

    def user_history_between(self, user_id, date_from: str, date_to: str) -> ApiResult:
        """작업자 상세 화면의 기간별 출퇴근 기록"""
        return self.client.get(
            f"{self.base_path}/user/{user_id}/history",
            params={'date_from': date_from, 'date_to': date_to}
        )

    def my_history(self, limit: int = 10) -> ApiResult:
        """로그인한 사용자의 최근 출퇴근 기록"""
        return self.client.get(f"{self.base_path}/history", params={'limit': limit})


class UserTasksApi:
    """
    사용자별 일일 작업 엔드포인트

    작업(task) 정의에서 생성된 사용자 작업의 시작/완료를 처리합니다.
    """

    base_path = '/api/user-tasks'

    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params) -> ApiResult:
        return self.client.get(self.base_path, params=params)

    def start(self, user_task_id) -> ApiResult:
        return self.client.post(f"{self.base_path}/{user_task_id}/start", {})

    def complete(self, user_task_id, notes: Optional[str] = None) -> ApiResult:
        return self.client.post(f"{self.base_path}/{user_task_id}/complete", {'notes': notes})

    def complete_with_files(self, user_task_id, files: dict, fields: dict) -> ApiResult:
        """
        증빙 파일과 함께 완료

        Args:
            files: {'file_before'|'file_after'|'file_scan': (파일명, 내용)}
            fields: notes, scan_code 등 일반 필드
        """
        return self.client.upload(f"{self.base_path}/{user_task_id}/complete", files=files, fields=fields)

    def generate_upcoming(self) -> ApiResult:
        """다가오는 기간의 사용자 작업 생성"""
        return self.client.post(f"{self.base_path}/generate-upcoming", {})


class DashboardApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def stats(self) -> ApiResult:
        return self.client.get('/api/dashboard/stats')

    def data(self) -> ApiResult:
        return self.client.get('/api/dashboard')


class BackendApi:
    """
    리소스 API 묶음

    페이지는 이 객체 하나만 받아서 필요한 리소스를 사용합니다.
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthApi(client)
        self.users = UsersApi(client)
        self.roles = RolesApi(client)
        self.assets = AssetsApi(client)
        self.units = UnitsApi(client)
        self.tenants = TenantsApi(client)
        self.tasks = TasksApi(client)
        self.task_groups = TaskGroupsApi(client)
        self.scan_info = ScanInfoApi(client)
        self.menus = MenusApi(client)
        self.complaint_reports = ComplaintReportsApi(client)
        self.attendance = AttendanceApi(client)
        self.user_tasks = UserTasksApi(client)
        self.dashboard = DashboardApi(client)
