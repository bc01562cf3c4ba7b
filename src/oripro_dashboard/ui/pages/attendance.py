"""
출퇴근 페이지

오늘의 출퇴근 상태, 체크인/체크아웃, 주간 기록을 표시합니다.
"""

import pandas as pd
import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import load_options, render_empty
from oripro_dashboard.ui.session_state import AppContext

logger = setup_logger('AttendancePage')


def attendance_phase(status: dict) -> str:
    """
    오늘 상태에서 가능한 동작

    Returns:
        'check_in', 'check_out', 'done' 중 하나
    """
    if not status or not status.get('check_in_time'):
        return 'check_in'
    if not status.get('check_out_time'):
        return 'check_out'
    return 'done'


def render_attendance_page(ctx: AppContext):
    """출퇴근 페이지 렌더링"""
    st.title("🕒 Absensi")

    assets = load_options(ctx.api.assets)
    if not assets:
        render_empty("Tidak ada asset yang tersedia.")
        return

    asset_id = st.selectbox(
        "Lokasi (Asset)",
        options=list(assets.keys()),
        format_func=lambda value: assets[value],
        key='attendance_asset'
    )

    status_result = ctx.api.attendance.today_status(asset_id)
    if not status_result.success and not status_result.is_not_found:
        ctx.notifier.api_error(status_result, "Gagal memuat status absensi")
    status = status_result.data if status_result.success and isinstance(status_result.data, dict) else {}

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Check-in", status.get('check_in_time') or '-')
    with col2:
        st.metric("Check-out", status.get('check_out_time') or '-')

    st.markdown("---")
    _render_check_form(ctx, asset_id, attendance_phase(status))

    st.markdown("---")
    st.subheader("📅 Riwayat Minggu Ini")
    history = ctx.api.attendance.weekly_history(asset_id)
    items = history.items() if history.success else []
    if items:
        st.dataframe(pd.DataFrame(items), use_container_width=True, hide_index=True)
    else:
        render_empty("Belum ada riwayat absensi minggu ini.")


def _render_check_form(ctx: AppContext, asset_id: str, phase: str):
    if phase == 'done':
        st.success("✅ Absensi hari ini sudah lengkap.")
        return

    label = "Check-in" if phase == 'check_in' else "Check-out"
    with st.form("attendance_form"):
        st.caption("Masukkan koordinat lokasi Anda saat ini.")
        col1, col2 = st.columns(2)
        with col1:
            latitude = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=0.0, format="%.6f")
        with col2:
            longitude = st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=0.0, format="%.6f")
        notes = st.text_input("Catatan")
        submitted = st.form_submit_button(f"📍 {label}")

    if submitted:
        submit_attendance(ctx, phase, asset_id, latitude, longitude, notes or None)
        st.rerun()


def submit_attendance(ctx: AppContext, phase: str, asset_id: str, latitude: float, longitude: float,
                      notes=None) -> bool:
    """
    반경 확인 후 체크인/체크아웃

    Returns:
        성공 여부
    """
    radius = ctx.api.attendance.check_radius(latitude, longitude, asset_id)
    if not radius.success:
        ctx.notifier.api_error(radius, "Gagal memeriksa lokasi")
        return False
    if isinstance(radius.data, dict) and radius.data.get('is_within_radius') is False:
        ctx.notifier.error("Anda berada di luar radius lokasi asset")
        return False

    if phase == 'check_in':
        result = ctx.api.attendance.check_in(asset_id, latitude, longitude, notes)
    else:
        result = ctx.api.attendance.check_out(asset_id, latitude, longitude, notes)

    if not result.success:
        ctx.notifier.api_error(result, "Absensi gagal")
        return False

    logger.info(f"Attendance {phase} recorded for asset {asset_id}")
    ctx.notifier.success("Check-in berhasil" if phase == 'check_in' else "Check-out berhasil")
    return True
