"""
작업자(Worker) 페이지

보안/청소 역할 사용자 목록과 작업자별 출퇴근 기록, 일일 작업 통계를 표시합니다.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List

import pandas as pd
import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import render_empty, render_not_found, to_table
from oripro_dashboard.ui.components.crud import get_value
from oripro_dashboard.ui.pages.work import (
    is_completed,
    local_date,
    task_definition,
    task_status_label,
    today_in_work_timezone,
    user_task_id,
)
from oripro_dashboard.ui.session_state import AppContext, navigate_to

logger = setup_logger('WorkersPage')

WORKERS_PATH = '/worker'

# 역할 이름에 포함되면 작업자 역할로 간주
WORKER_ROLE_KEYWORDS = {
    'security': ('keamanan', 'security', 'satpam'),
    'cleaning': ('kebersihan', 'cleaning'),
}

WORKER_COLUMNS = {
    'name': 'Nama',
    'email': 'Email',
    'phone': 'Telepon',
    'role.name': 'Role',
    'status': 'Status',
}


def find_worker_role_ids(roles: Iterable[dict]) -> List[str]:
    """
    작업자 역할 id

    역할 이름에 보안 또는 청소 키워드가 포함된 역할을 찾습니다.
    """
    role_ids = []
    for keywords in WORKER_ROLE_KEYWORDS.values():
        for role in roles:
            name = str(role.get('name') or '').lower()
            role_id = str(role.get('id'))
            if any(keyword in name for keyword in keywords) and role_id not in role_ids:
                role_ids.append(role_id)
                break
    return role_ids


def merge_workers(*groups: Iterable[dict]) -> List[dict]:
    """여러 역할의 사용자 목록을 id 기준으로 합침 (처음 나온 항목 유지)"""
    seen = set()
    workers = []
    for group in groups:
        for user in group:
            if user.get('id') in seen:
                continue
            seen.add(user.get('id'))
            workers.append(user)
    return workers


def filter_workers(workers: List[dict], keyword: str) -> List[dict]:
    keyword = (keyword or '').strip().lower()
    if not keyword:
        return workers
    return [
        worker for worker in workers
        if keyword in str(worker.get('name') or '').lower() or keyword in str(worker.get('email') or '').lower()
    ]


def load_workers(ctx: AppContext) -> List[dict]:
    """보안/청소 역할 사용자 목록 (역할을 찾지 못하면 빈 목록)"""
    roles = ctx.api.roles.list()
    if not roles.success:
        ctx.notifier.api_error(roles, "Gagal memuat role")
        return []

    groups = []
    for role_id in find_worker_role_ids(roles.items()):
        result = ctx.api.users.list(role_id=role_id, limit=100, offset=0)
        if result.success:
            groups.append(result.items())
        else:
            logger.warning(f"Failed to load workers for role {role_id}: {result.error}")
    return merge_workers(*groups)


def render_workers_page(ctx: AppContext):
    """작업자 목록 페이지 렌더링"""
    st.title("👷 Worker")

    keyword = st.text_input("Cari", key='search_workers', placeholder="Cari nama atau email...")
    with st.spinner("Memuat worker..."):
        workers = filter_workers(load_workers(ctx), keyword)

    if not workers:
        render_empty("Belum ada data worker.")
        return

    st.dataframe(to_table(workers, WORKER_COLUMNS), use_container_width=True, hide_index=True)

    labels = {str(worker['id']): worker.get('name') or worker.get('email') for worker in workers if 'id' in worker}
    selected = st.selectbox("Pilih worker", options=list(labels.keys()), format_func=lambda value: labels[value])
    if st.button("👁️ Detail", key='view_worker'):
        navigate_to(f"{WORKERS_PATH}/{selected}")


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    next_month = (day.replace(day=28) + timedelta(days=4)).replace(day=1)
    return next_month - timedelta(days=1)


def main_task_completed(main_task: dict, day_tasks: List[dict]) -> bool:
    """
    메인 작업 완료 여부

    검증/스캔이 없는 메인 작업은 하위 작업이 모두 끝나야 완료로 봅니다.
    하위 작업이 없으면 자기 상태를 따릅니다.
    """
    task = task_definition(main_task)
    if task.get('is_need_validation') or task.get('is_scan'):
        return is_completed(main_task)

    parent_ids = {user_task_id(main_task), main_task.get('id')}
    children = [item for item in day_tasks if item.get('parent_user_task_id') in parent_ids - {None}]
    if not children:
        return is_completed(main_task)
    return all(is_completed(child) for child in children)


def daily_task_statistics(user_tasks: List[dict]) -> List[Dict]:
    """
    날짜별 메인 작업 완료 통계 (최근 날짜 먼저)

    Returns:
        [{date, total, completed, pending, percentage}]
    """
    by_day = defaultdict(list)
    for user_task in user_tasks:
        day = local_date(user_task.get('created_at'))
        if day is not None:
            by_day[day].append(user_task)

    stats = []
    for day, day_tasks in by_day.items():
        main_tasks = [item for item in day_tasks if item.get('is_main_task', True) is not False]
        completed = sum(1 for item in main_tasks if main_task_completed(item, day_tasks))
        total = len(main_tasks)
        stats.append({
            'date': day.isoformat(),
            'total': total,
            'completed': completed,
            'pending': total - completed,
            'percentage': round(completed * 100 / total) if total else 0,
        })
    return sorted(stats, key=lambda row: row['date'], reverse=True)


def render_worker_detail(ctx: AppContext, id: str):
    """작업자 상세 페이지 렌더링"""
    result = ctx.api.users.get(id)
    if result.is_not_found or (result.success and not result.data):
        render_not_found("Worker tidak ditemukan", back_path=WORKERS_PATH)
        return
    if not result.success:
        ctx.notifier.api_error(result, "Gagal memuat data user")
        render_empty("Data worker tidak dapat dimuat.")
        return

    worker = result.data
    st.title(f"👷 {worker.get('name') or worker.get('email')}")
    st.caption(f"{worker.get('email') or '-'} · {get_value(worker, 'role.name') or '-'}")
    if st.button("← Kembali", key='back_worker'):
        navigate_to(WORKERS_PATH)

    today = today_in_work_timezone()
    col1, col2 = st.columns(2)
    with col1:
        date_from = st.date_input("Dari tanggal", value=month_start(today), key='worker_date_from')
    with col2:
        date_to = st.date_input("Sampai tanggal", value=month_end(today), key='worker_date_to')
    if date_from > date_to:
        st.error("Tanggal mulai tidak boleh setelah tanggal akhir")
        return

    attendance_tab, tasks_tab = st.tabs(["🕒 Absensi", "🧹 Kerja Harian"])
    with attendance_tab:
        history = ctx.api.attendance.user_history_between(id, date_from.isoformat(), date_to.isoformat())
        if not history.success:
            ctx.notifier.api_error(history, "Gagal memuat riwayat absensi")
        items = history.items()
        if items:
            st.dataframe(pd.DataFrame(items), use_container_width=True, hide_index=True)
        else:
            render_empty("Belum ada riwayat absensi pada periode ini.")

    with tasks_tab:
        tasks = ctx.api.user_tasks.list(user_id=id, limit=1000,
                                        date_from=date_from.isoformat(), date_to=date_to.isoformat())
        if not tasks.success:
            ctx.notifier.api_error(tasks, "Gagal memuat data kerja harian")
        stats = daily_task_statistics(tasks.items())
        if not stats:
            render_empty("Belum ada data kerja harian pada periode ini.")
            return
        st.dataframe(pd.DataFrame(stats), use_container_width=True, hide_index=True)
        rows = [
            {'Task': task_definition(item).get('name'), 'Status': task_status_label(item),
             'Dibuat': item.get('created_at')}
            for item in tasks.items()
        ]
        with st.expander("Detail task"):
            st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
