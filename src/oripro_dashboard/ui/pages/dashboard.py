"""
대시보드 페이지

자산/유닛/테넌트 요약 지표와 매출, 민원, 작업 완료 차트를 표시합니다.
"""

import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import render_empty
from oripro_dashboard.ui.components.charts import (
    complaint_status_figure,
    revenue_growth_figure,
    task_completion_figure,
)
from oripro_dashboard.ui.session_state import AppContext

logger = setup_logger('DashboardPage')

STAT_CARDS = [
    ('total_assets', '📦 Total Asset'),
    ('total_units', '🏢 Total Unit'),
    ('total_tenants', '🧾 Total Tenant'),
    ('total_workers', '👷 Total Worker'),
]


def render_dashboard(ctx: AppContext):
    """대시보드 페이지 렌더링"""
    st.title("🏠 Dashboard")

    with st.spinner("Memuat statistik..."):
        stats = ctx.api.dashboard.stats()
        data = ctx.api.dashboard.data()

    render_stat_cards(ctx, stats)

    st.markdown("---")

    if not data.success:
        ctx.notifier.api_error(data, "Gagal memuat data dashboard")
        render_empty("Data dashboard tidak dapat dimuat.")
        return

    payload = data.data if isinstance(data.data, dict) else {}
    render_charts(payload)


def render_stat_cards(ctx: AppContext, stats):
    """요약 지표"""
    values = stats.data if stats.success and isinstance(stats.data, dict) else {}
    if not stats.success:
        logger.warning(f"Dashboard stats unavailable: {stats.error}")

    columns = st.columns(len(STAT_CARDS))
    for column, (key, label) in zip(columns, STAT_CARDS):
        with column:
            value = values.get(key)
            st.metric(label, f"{value:,}" if isinstance(value, (int, float)) else '-')


def render_charts(payload: dict):
    """차트 영역"""
    revenue = revenue_growth_figure(payload.get('revenue_growth'))
    if revenue is not None:
        st.plotly_chart(revenue, use_container_width=True)
    else:
        render_empty("Belum ada data pendapatan.")

    col1, col2 = st.columns(2)
    with col1:
        complaints = complaint_status_figure(payload.get('complaints'))
        if complaints is not None:
            st.plotly_chart(complaints, use_container_width=True)
        else:
            render_empty("Belum ada laporan keluhan.")
    with col2:
        tasks = task_completion_figure(payload.get('daily_task_completion'))
        if tasks is not None:
            st.plotly_chart(tasks, use_container_width=True)
        else:
            render_empty("Belum ada data tugas.")
