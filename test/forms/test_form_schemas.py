"""
Test form schemas and validation helpers.
"""

from oripro_dashboard.forms import (
    CompleteTaskForm,
    MenuForm,
    ResetPasswordForm,
    RoleForm,
    TaskForm,
    TaskGroupForm,
    UserForm,
    validate_form,
)


def task_data(**overrides):
    data = {
        'name': 'Clean lobby',
        'duration': 30,
        'asset_id': 'a1',
        'role_id': 2,
    }
    data.update(overrides)
    return data


def test_400_task_form_valid():
    """TEST-400: 필수 값만 있는 작업 폼"""
    form, errors = validate_form(TaskForm, task_data())

    assert errors == {}
    assert form.scan_code is None
    assert form.days == []


def test_401_task_scan_requires_code():
    """TEST-401: 스캔 작업은 scan_code 필수"""
    form, errors = validate_form(TaskForm, task_data(is_scan=True))

    assert form is None
    assert errors['scan_code'] == 'Scan code wajib diisi jika task memerlukan scan'


def test_402_task_scan_with_code():
    """TEST-402: scan_code가 있으면 통과"""
    form, errors = validate_form(TaskForm, task_data(is_scan=True, scan_code='QR-01'))

    assert errors == {}
    assert form.scan_code == 'QR-01'


def test_403_task_times_format():
    """TEST-403: 시간은 HH:mm 형식"""
    _, errors = validate_form(TaskForm, task_data(times=['08:00', '25:00']))

    assert 'times' in errors
    assert '25:00' in errors['times']


def test_404_task_days_range():
    """TEST-404: 요일은 0~6"""
    _, errors = validate_form(TaskForm, task_data(days=[0, 7]))

    assert errors['days'] == 'Hari harus antara 0 dan 6'


def test_405_task_group_time():
    """TEST-405: 작업 그룹 시작/종료 시간 형식"""
    _, errors = validate_form(TaskGroupForm, {'name': 'Pagi', 'start_time': '6:00', 'end_time': '12:00'})

    assert list(errors) == ['start_time']


def test_406_user_password_optional_on_edit():
    """TEST-406: 수정 시 빈 비밀번호는 None (기존 비밀번호 유지)"""
    form, errors = validate_form(UserForm, {'email': 'u@oripro.id', 'name': 'User', 'password': ''})

    assert errors == {}
    assert form.password is None
    assert 'password' not in form.to_payload()


def test_407_user_password_min_length():
    """TEST-407: 비밀번호는 최소 6자"""
    _, errors = validate_form(UserForm, {'email': 'u@oripro.id', 'name': 'User', 'password': '123'})

    assert errors['password'] == 'Password minimal 6 karakter'


def test_408_menu_url_rules():
    """TEST-408: 메뉴 url은 '/' 또는 '#'으로 시작, 빈 값은 None"""
    _, errors = validate_form(MenuForm, {'title': 'Asset', 'url': 'asset'})
    assert 'url' in errors

    form, _ = validate_form(MenuForm, {'title': 'Users', 'url': '#'})
    assert form.url == '#'

    form, _ = validate_form(MenuForm, {'title': 'Users', 'url': ''})
    assert form.url is None


def test_409_whitespace_is_stripped():
    """TEST-409: 문자열 앞뒤 공백 제거"""
    form, _ = validate_form(RoleForm, {'name': '  Admin  ', 'level': 1})

    assert form.name == 'Admin'


def test_410_one_message_per_field():
    """TEST-410: 필드별 첫 번째 오류만 반환"""
    _, errors = validate_form(RoleForm, {'name': '', 'level': 0})

    assert set(errors) == {'name', 'level'}
    assert all(isinstance(message, str) for message in errors.values())


def test_411_reset_password_confirmation_must_match():
    """TEST-411: 비밀번호 확인 불일치"""
    _, errors = validate_form(ResetPasswordForm, {'password': 'rahasia1', 'confirm_password': 'rahasia2'})

    assert errors == {'confirm_password': 'Konfirmasi password tidak cocok'}


def test_412_short_reset_password_reports_password_only():
    """TEST-412: 짧은 비밀번호는 password 오류만 표시"""
    _, errors = validate_form(ResetPasswordForm, {'password': '123', 'confirm_password': '123'})

    assert errors == {'password': 'Password minimal 6 karakter'}


def test_413_complete_task_scan_code():
    """TEST-413: 스캔 작업은 스캔 코드 필수, 페이로드에 is_scan 제외"""
    _, errors = validate_form(CompleteTaskForm, {'is_scan': True, 'scan_code': ''})
    assert errors == {'scan_code': 'Kode scan wajib diisi untuk task ini'}

    form, errors = validate_form(CompleteTaskForm, {'is_scan': True, 'scan_code': ' QR-1 ', 'notes': None})
    assert errors == {}
    assert form.to_payload() == {'scan_code': 'QR-1'}
