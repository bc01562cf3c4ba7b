"""
Test resource endpoint wiring.

ApiClient is mocked; each test checks the endpoint and payload a resource sends.
"""

from unittest.mock import Mock

import pytest

from oripro_dashboard.api import ApiResult, BackendApi


@pytest.fixture
def client():
    mock = Mock()
    mock.get.return_value = ApiResult.ok([])
    mock.post.return_value = ApiResult.ok({})
    mock.put.return_value = ApiResult.ok({})
    mock.delete.return_value = ApiResult.ok()
    mock.upload.return_value = ApiResult.ok({})
    return mock


@pytest.fixture
def api(client):
    return BackendApi(client)


def test_230_crud_endpoints(api, client):
    """TEST-230: 공통 list/get/create/update/delete 경로"""
    api.assets.list(name='Mall')
    client.get.assert_called_with('/api/assets', params={'name': 'Mall'})

    api.units.get(5)
    client.get.assert_called_with('/api/units/5')

    api.roles.create({'name': 'Admin', 'level': 1})
    client.post.assert_called_with('/api/roles', {'name': 'Admin', 'level': 1})

    api.tenants.update(7, {'name': 'Cafe'})
    client.put.assert_called_with('/api/tenants/7', {'name': 'Cafe'})

    api.scan_info.delete(3)
    client.delete.assert_called_with('/api/scan-infos/3')


def test_231_menu_access_check_endpoint(api, client):
    """TEST-231: 접근 확인은 가공하지 않은 경로를 쿼리로 전송"""
    api.users.check_menu_access('/tenants/edit/7')

    client.get.assert_called_with('/api/users/check-menu-access', params={'path': '/tenants/edit/7'})


def test_232_user_extras(api, client):
    """TEST-232: 사이드바, 변경 이력"""
    api.users.sidebar()
    client.get.assert_called_with('/api/users/sidebar')

    api.users.logs(4, page=2)
    client.get.assert_called_with('/api/users/4/logs', params={'page': 2})


def test_233_tenant_extras(api, client):
    """TEST-233: 테넌트 납부/보증금/업로드"""
    api.tenants.payment_logs(7)
    client.get.assert_called_with('/api/tenants/7/payment-logs', params={})

    api.tenants.create_payment(7, {'amount': 100})
    client.post.assert_called_with('/api/tenants/7/payments', {'amount': 100})

    api.tenants.upload_file('ktp.jpg', b'img', 'identification')
    client.upload.assert_called_with('/api/tenant-uploads', files={'file': ('ktp.jpg', b'img')}, fields={'type': '1'})


def test_234_attendance_endpoints(api, client):
    """TEST-234: 출퇴근 엔드포인트"""
    api.attendance.check_in('a1', -6.2, 106.8, notes=None)
    client.post.assert_called_with('/api/attendance/check-in', {
        'asset_id': 'a1', 'latitude': -6.2, 'longitude': 106.8, 'notes': None
    })

    api.attendance.today_status('a1')
    client.get.assert_called_with('/api/attendance/today-status/a1')

    api.attendance.user_history('u1', date='2024-05-01')
    client.get.assert_called_with('/api/attendance/user/u1/history', params={'date': '2024-05-01'})


def test_235_menu_parents_and_dashboard(api, client):
    """TEST-235: 상위 메뉴 목록, 대시보드 통계"""
    api.menus.parents()
    client.get.assert_called_with('/api/menus/parents')

    api.dashboard.stats()
    client.get.assert_called_with('/api/dashboard/stats')


def test_236_login(api, client):
    """TEST-236: 자격 증명 로그인"""
    api.auth.login('a@b.id', 'secret')

    client.post.assert_called_with('/api/auth/login', {'email': 'a@b.id', 'password': 'secret'})


def test_237_reset_password_payload(api, client):
    """TEST-237: 비밀번호 재설정은 uid/token/newPassword 전송"""
    api.auth.reset_password('u-9', 'tok-1', 'rahasia1')

    client.post.assert_called_with('/api/auth/reset-password', {
        'uid': 'u-9', 'token': 'tok-1', 'newPassword': 'rahasia1'
    })

    api.auth.forgot_password('a@b.id')
    client.post.assert_called_with('/api/auth/forgot-password', {'email': 'a@b.id'})


def test_238_user_menu_and_permission_endpoints(api, client):
    """TEST-238: 사용자 메뉴 권한 트리, 권한 목록"""
    api.users.menus()
    client.get.assert_called_with('/api/users/menus')

    api.users.permissions()
    client.get.assert_called_with('/api/users/permissions')


def test_239_user_task_endpoints(api, client):
    """TEST-239: 사용자 작업 목록/시작/완료/생성"""
    api.user_tasks.list(user_id='5', limit=1000)
    client.get.assert_called_with('/api/user-tasks', params={'user_id': '5', 'limit': 1000})

    api.user_tasks.start(11)
    client.post.assert_called_with('/api/user-tasks/11/start', {})

    api.user_tasks.complete(11, 'beres')
    client.post.assert_called_with('/api/user-tasks/11/complete', {'notes': 'beres'})

    api.user_tasks.complete_with_files(11, files={'file_after': ('a.jpg', b'img')}, fields={'notes': 'ok'})
    client.upload.assert_called_with(
        '/api/user-tasks/11/complete', files={'file_after': ('a.jpg', b'img')}, fields={'notes': 'ok'})

    api.user_tasks.generate_upcoming()
    client.post.assert_called_with('/api/user-tasks/generate-upcoming', {})


def test_240_attendance_history_endpoints(api, client):
    """TEST-240: 기간별/본인 출퇴근 기록"""
    api.attendance.user_history_between('u1', '2024-05-01', '2024-05-31')
    client.get.assert_called_with('/api/attendance/user/u1/history',
                                  params={'date_from': '2024-05-01', 'date_to': '2024-05-31'})

    api.attendance.my_history(10)
    client.get.assert_called_with('/api/attendance/history', params={'limit': 10})
