"""
작업자 대시보드 페이지

로그인한 작업자의 최근 출퇴근 기록과 최근 작업을 표시합니다.
"""

import pandas as pd
import streamlit as st

from oripro_dashboard.ui.components import render_empty
from oripro_dashboard.ui.pages.work import task_definition, task_status_label
from oripro_dashboard.ui.session_state import AppContext, navigate_to

RECENT_LIMIT = 10


def attendance_rows(history: list) -> list:
    return [
        {
            'Lokasi': (item.get('asset') or {}).get('name') or 'Asset',
            'Masuk': item.get('check_in_time') or '-',
            'Keluar': item.get('check_out_time') or '-',
        }
        for item in history
    ]


def user_task_rows(user_tasks: list) -> list:
    return [
        {
            'Task': task_definition(item).get('name') or item.get('name') or '-',
            'Status': task_status_label(item),
            'Dibuat': str(item.get('created_at') or '-')[:16].replace('T', ' '),
        }
        for item in user_tasks
    ]


def render_worker_dashboard(ctx: AppContext):
    """작업자 대시보드 페이지 렌더링"""
    st.title("👷 Dashboard Worker")
    st.caption("Informasi absensi dan tugas Anda")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("🕒 Riwayat Absensi")
        history = ctx.api.attendance.my_history(RECENT_LIMIT)
        if not history.success:
            ctx.notifier.api_error(history, "Gagal memuat riwayat absensi")
        if history.items():
            st.dataframe(pd.DataFrame(attendance_rows(history.items())), use_container_width=True, hide_index=True)
        else:
            render_empty("Belum ada riwayat absensi")
        if st.button("Buka Absensi", key='worker_dashboard_attendance'):
            navigate_to('/attendance')

    with col2:
        st.subheader("🧹 Task Terbaru")
        tasks = ctx.api.user_tasks.list(limit=RECENT_LIMIT)
        if not tasks.success:
            ctx.notifier.api_error(tasks, "Gagal memuat task")
        if tasks.items():
            st.dataframe(pd.DataFrame(user_task_rows(tasks.items())), use_container_width=True, hide_index=True)
        else:
            render_empty("Belum ada task")
        if st.button("Buka Pekerjaan", key='worker_dashboard_work'):
            navigate_to('/work')
