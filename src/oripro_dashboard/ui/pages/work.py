"""
작업자 일일 작업 페이지

오늘 생성된 사용자 작업을 표시하고 시작/완료 처리를 합니다.
작업 날짜는 Asia/Jakarta 기준입니다.
"""

from datetime import date, datetime, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo

import streamlit as st

from oripro_dashboard.forms import CompleteTaskForm, validate_form
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import field_error, render_empty
from oripro_dashboard.ui.session_state import AppContext

logger = setup_logger('WorkPage')

WORK_TIMEZONE = ZoneInfo('Asia/Jakarta')

TASK_GROUP_TITLES = {
    'security-guard': 'Security Guard',
    'cleaning-program': 'Cleaning Program',
}

EVIDENCE_FIELDS = {
    'file_before': 'Foto sebelum',
    'file_after': 'Foto sesudah',
    'file_scan': 'Foto scan',
}


def user_task_id(user_task: dict):
    return user_task.get('user_task_id') or user_task.get('id')


def task_definition(user_task: dict) -> dict:
    """사용자 작업이 가리키는 작업 정의 (없으면 빈 딕셔너리)"""
    task = user_task.get('task')
    return task if isinstance(task, dict) else {}


def has_started(user_task: dict) -> bool:
    return bool(user_task.get('started_at') or user_task.get('start_at'))


def is_completed(user_task: dict) -> bool:
    return user_task.get('status') == 'completed' or bool(user_task.get('completed_at'))


def can_start(user_task: dict) -> bool:
    """
    시작 버튼 표시 여부

    대기 중이면서 검증 또는 스캔이 필요한 작업만 명시적으로 시작합니다.
    """
    task = task_definition(user_task)
    is_pending = user_task.get('status') == 'pending' and not has_started(user_task)
    return is_pending and bool(task.get('is_need_validation') or task.get('is_scan'))


def can_complete(user_task: dict) -> bool:
    return has_started(user_task) and not is_completed(user_task)


def task_status_label(user_task: dict) -> str:
    if is_completed(user_task):
        return 'Selesai'
    if has_started(user_task):
        return 'Sedang Dikerjakan'
    return 'Pending'


def local_date(timestamp: Optional[str]) -> Optional[date]:
    """
    ISO 시각 문자열의 Asia/Jakarta 날짜

    시간대가 없는 값은 UTC로 간주합니다. 해석할 수 없으면 None.
    """
    if not timestamp:
        return None
    try:
        moment = datetime.fromisoformat(str(timestamp).replace('Z', '+00:00'))
    except ValueError:
        logger.warning(f"Unparseable task timestamp: {timestamp}")
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(WORK_TIMEZONE).date()


def today_in_work_timezone() -> date:
    return datetime.now(WORK_TIMEZONE).date()


def tasks_for_day(user_tasks: List[dict], day: date) -> List[dict]:
    """생성일(created_at)이 지정한 날짜인 작업"""
    return [task for task in user_tasks if local_date(task.get('created_at')) == day]


def work_page_title(task_group: Optional[str]) -> str:
    """taskGroup 쿼리 파라미터에 맞는 제목"""
    if not task_group:
        return 'Pekerjaan'
    return TASK_GROUP_TITLES.get(task_group) or ' '.join(word.capitalize() for word in task_group.split('-'))


def render_work_page(ctx: AppContext):
    """작업 페이지 렌더링"""
    st.title(f"🧹 {work_page_title(st.query_params.get('taskGroup'))}")

    with st.spinner("Memuat task..."):
        result = ctx.api.user_tasks.list()

    if not result.success:
        ctx.notifier.api_error(result, "Gagal memuat task")
        render_empty("Task tidak dapat dimuat.")
        return

    today_tasks = tasks_for_day(result.items(), today_in_work_timezone())
    if not today_tasks:
        render_empty("Belum ada user task untuk hari ini")
        if st.button("⚙️ Generate Task", key='generate_user_tasks'):
            generate_user_tasks(ctx)
            st.rerun()
        return

    for user_task in today_tasks:
        _render_user_task(ctx, user_task)


def _render_user_task(ctx: AppContext, user_task: dict, depth: int = 0):
    task = task_definition(user_task)
    task_id = user_task_id(user_task)
    indent = '↳ ' * depth

    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown(f"{indent}**{task.get('name') or user_task.get('name') or task_id}**")
        st.caption(task_status_label(user_task))
    with col2:
        if can_start(user_task) and st.button("▶️ Mulai", key=f"start_task_{task_id}", use_container_width=True):
            start_user_task(ctx, task_id)
            st.rerun()

    if can_complete(user_task):
        with st.expander("✅ Selesaikan task"):
            _render_complete_form(ctx, user_task)

    for sub_task in user_task.get('sub_user_task') or []:
        _render_user_task(ctx, sub_task, depth + 1)


def _render_complete_form(ctx: AppContext, user_task: dict):
    task = task_definition(user_task)
    task_id = user_task_id(user_task)
    form_key = f"form_complete_task_{task_id}"
    errors = st.session_state.form_errors.get(form_key, {})

    with st.form(form_key):
        uploads = {}
        if task.get('is_need_validation'):
            for name in ('file_before', 'file_after'):
                uploads[name] = st.file_uploader(EVIDENCE_FIELDS[name], type=['jpg', 'jpeg', 'png'], key=f"{form_key}_{name}")
        scan_code = None
        if task.get('is_scan'):
            scan_code = st.text_input("Kode scan")
            field_error(errors, 'scan_code')
            uploads['file_scan'] = st.file_uploader(
                EVIDENCE_FIELDS['file_scan'], type=['jpg', 'jpeg', 'png'], key=f"{form_key}_file_scan")
        notes = st.text_area("Catatan")
        submitted = st.form_submit_button("Selesai")

    if submitted:
        files = {name: (upload.name, upload.getvalue()) for name, upload in uploads.items() if upload is not None}
        _, errors = complete_user_task(ctx, user_task, {'scan_code': scan_code, 'notes': notes or None}, files)
        st.session_state.form_errors[form_key] = errors
        st.rerun()


def start_user_task(ctx: AppContext, task_id) -> bool:
    """작업 시작 처리"""
    result = ctx.api.user_tasks.start(task_id)
    if not result.success:
        ctx.notifier.api_error(result, "Gagal memulai task")
        return False

    logger.info(f"User task {task_id} started")
    ctx.notifier.success("Task berhasil dimulai")
    return True


def complete_user_task(ctx: AppContext, user_task: dict, values: dict, files: Optional[dict] = None):
    """
    작업 완료 처리

    증빙 파일이 있으면 multipart로, 없으면 메모만 전송합니다.

    Args:
        ctx: 서비스 묶음
        user_task: 완료할 사용자 작업
        values: scan_code, notes 입력 값
        files: {필드명: (파일명, 내용)}

    Returns:
        (성공 여부, 필드별 오류)
    """
    task = task_definition(user_task)
    form, errors = validate_form(CompleteTaskForm, {**values, 'is_scan': bool(task.get('is_scan'))})
    if errors:
        return False, errors

    task_id = user_task_id(user_task)
    payload = form.to_payload()
    if files:
        result = ctx.api.user_tasks.complete_with_files(task_id, files=files, fields=payload)
    else:
        result = ctx.api.user_tasks.complete(task_id, payload.get('notes'))

    if not result.success:
        ctx.notifier.api_error(result, "Gagal menyelesaikan task")
        return False, {}

    logger.info(f"User task {task_id} completed ({len(files or {})} files)")
    ctx.notifier.success("Task berhasil diselesaikan")
    return True, {}


def generate_user_tasks(ctx: AppContext) -> bool:
    """
    다가오는 기간의 사용자 작업 생성

    이미 생성된 기간이면 (409) 안내 메시지만 표시합니다.
    """
    result = ctx.api.user_tasks.generate_upcoming()
    if result.success:
        logger.info("Upcoming user tasks generated")
        ctx.notifier.success("User tasks berhasil di-generate")
        return True

    if result.status_code == 409 or 'already been generated' in (result.error or ''):
        ctx.notifier.info("User tasks sudah pernah di-generate untuk periode ini")
        return False

    ctx.notifier.api_error(result, "Gagal generate user tasks")
    return False
